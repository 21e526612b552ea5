"""
Unit Tests for the AI Gateway Client and the Gemini provider
"""

import pytest
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

from synthesis.config import GeminiSettings
from synthesis.domain.errors import GatewayConfigurationError
from synthesis.domain.models.behavior_log import BehaviorLogEntry
from synthesis.infrastructure.llm import gemini_provider as gemini_module
from synthesis.infrastructure.llm.gateway import AIGateway
from synthesis.infrastructure.llm.gemini_provider import GeminiProvider
from synthesis.infrastructure.llm.provider import ContentBlockedError, LLMProvider
from synthesis.services.prompt.prompt_builder import PromptKind


@pytest.fixture
def entry(noisy_store_draft):
    return BehaviorLogEntry(**noisy_store_draft)


@pytest.fixture
def fake_genai(monkeypatch):
    """Replace the Gemini SDK module so no network call can happen."""
    sdk = MagicMock()
    monkeypatch.setattr(gemini_module, "genai", sdk)
    return sdk


def _gemini_response(text: str):
    part = SimpleNamespace(text=text)
    candidate = SimpleNamespace(content=SimpleNamespace(parts=[part]))
    return SimpleNamespace(candidates=[candidate])


class TestGatewayResponses:
    """Successful calls return the model text verbatim."""

    @pytest.mark.asyncio
    async def test_analyze_behavior_returns_text_verbatim(self, make_provider, entry):
        text = "Likely trigger: auditory overload. Suggest noise-canceling headphones next visit."
        provider = make_provider([text])
        gateway = AIGateway(provider)

        result = await gateway.analyze_behavior(entry, "autism spectrum")

        assert result == text
        assert len(provider.calls) == 1
        assert provider.calls[0].kind == PromptKind.BEHAVIOR_ANALYSIS
        assert "autism spectrum" in provider.calls[0].user_message

    @pytest.mark.asyncio
    async def test_get_crisis_advice_returns_text_verbatim(self, make_provider):
        provider = make_provider(["**1. Safety** first."])
        gateway = AIGateway(provider)

        result = await gateway.get_crisis_advice("meltdown in a store")

        assert result == "**1. Safety** first."
        assert provider.calls[0].kind == PromptKind.CRISIS_ADVICE


class TestGatewayConfiguration:
    """Missing credential raises before any network attempt."""

    @pytest.mark.asyncio
    async def test_analyze_behavior_without_credential(self, make_provider, entry):
        provider = make_provider(configured=False)
        gateway = AIGateway(provider)

        with pytest.raises(GatewayConfigurationError):
            await gateway.analyze_behavior(entry, "profile")

        assert provider.calls == []

    @pytest.mark.asyncio
    async def test_crisis_advice_without_credential(self, make_provider):
        provider = make_provider(configured=False)
        gateway = AIGateway(provider)

        with pytest.raises(GatewayConfigurationError):
            await gateway.get_crisis_advice("noise")

        assert provider.calls == []

    @pytest.mark.asyncio
    async def test_gemini_without_key_never_touches_sdk(self, fake_genai, entry):
        gateway = AIGateway(GeminiProvider(GeminiSettings()))

        with pytest.raises(GatewayConfigurationError):
            await gateway.analyze_behavior(entry, "profile")
        with pytest.raises(GatewayConfigurationError):
            await gateway.get_crisis_advice("noise")

        fake_genai.configure.assert_not_called()
        fake_genai.GenerativeModel.assert_not_called()

    def test_placeholder_key_is_not_configured(self):
        provider = GeminiProvider(GeminiSettings(SYNTHESIS_GEMINI_API_KEY="CHANGE_ME"))

        assert provider.is_configured() is False


class TestGatewayErrors:
    """Transport errors propagate unchanged; retry is opt-in."""

    @pytest.mark.asyncio
    async def test_transport_error_propagates_unchanged(self, make_provider, entry):
        error = ConnectionError("network down")
        provider = make_provider([error, "never returned"])
        gateway = AIGateway(provider)

        with pytest.raises(ConnectionError) as exc_info:
            await gateway.analyze_behavior(entry, "profile")

        assert exc_info.value is error
        assert len(provider.calls) == 1

    @pytest.mark.asyncio
    async def test_opt_in_retry_recovers(self, make_provider):
        provider = make_provider([TimeoutError("slow"), "calm steps"])
        gateway = AIGateway(provider, max_attempts=2)

        result = await gateway.get_crisis_advice("noise")

        assert result == "calm steps"
        assert len(provider.calls) == 2


class TestGeminiProvider:
    """Gemini SDK wiring with the SDK mocked out."""

    def test_provider_contract(self):
        assert LLMProvider.__abstractmethods__ == {
            "provider_name",
            "default_model",
            "generate",
            "is_configured",
        }

    @pytest.mark.asyncio
    async def test_persona_sent_as_system_instruction(self, fake_genai, entry):
        model = MagicMock()
        model.generate_content_async = AsyncMock(return_value=_gemini_response("Analysis text"))
        fake_genai.GenerativeModel.return_value = model
        settings = GeminiSettings(SYNTHESIS_GEMINI_API_KEY="real-key", model="gemini-test")
        gateway = AIGateway(GeminiProvider(settings))

        result = await gateway.analyze_behavior(entry, "profile")

        assert result == "Analysis text"
        fake_genai.configure.assert_called_once_with(api_key="real-key")
        kwargs = fake_genai.GenerativeModel.call_args.kwargs
        assert kwargs["model_name"] == "gemini-test"
        assert "Synthesis Intelligence" in kwargs["system_instruction"]
        user_message = model.generate_content_async.call_args.args[0]
        assert "covered ears and cried" in user_message

    @pytest.mark.asyncio
    async def test_empty_candidates_yield_empty_text(self, fake_genai):
        model = MagicMock()
        model.generate_content_async = AsyncMock(return_value=SimpleNamespace(candidates=[]))
        fake_genai.GenerativeModel.return_value = model
        provider = GeminiProvider(GeminiSettings(SYNTHESIS_GEMINI_API_KEY="real-key"))

        result = await AIGateway(provider).get_crisis_advice("noise")

        assert result == ""

    @pytest.mark.asyncio
    async def test_sdk_error_propagates(self, fake_genai):
        model = MagicMock()
        model.generate_content_async = AsyncMock(side_effect=RuntimeError("429 quota"))
        fake_genai.GenerativeModel.return_value = model
        provider = GeminiProvider(GeminiSettings(SYNTHESIS_GEMINI_API_KEY="real-key"))

        with pytest.raises(RuntimeError, match="429 quota"):
            await AIGateway(provider).get_crisis_advice("noise")

    @pytest.mark.asyncio
    async def test_blocked_prompt_raises(self, fake_genai):
        blocked = SimpleNamespace(
            candidates=[],
            prompt_feedback=SimpleNamespace(block_reason="SAFETY"),
        )
        model = MagicMock()
        model.generate_content_async = AsyncMock(return_value=blocked)
        fake_genai.GenerativeModel.return_value = model
        provider = GeminiProvider(GeminiSettings(SYNTHESIS_GEMINI_API_KEY="real-key"))

        with pytest.raises(ContentBlockedError) as exc_info:
            await AIGateway(provider).get_crisis_advice("noise")

        assert exc_info.value.reason == "SAFETY"

    @pytest.mark.asyncio
    async def test_unset_block_reason_is_not_a_block(self, fake_genai):
        response = _gemini_response("Stay close and quiet.")
        response.prompt_feedback = SimpleNamespace(block_reason=0)
        model = MagicMock()
        model.generate_content_async = AsyncMock(return_value=response)
        fake_genai.GenerativeModel.return_value = model
        provider = GeminiProvider(GeminiSettings(SYNTHESIS_GEMINI_API_KEY="real-key"))

        assert await AIGateway(provider).get_crisis_advice("noise") == "Stay close and quiet."

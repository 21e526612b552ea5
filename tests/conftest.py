"""Tests configuration and fixtures."""

import asyncio
from typing import Optional, Sequence, Union

import pytest

from synthesis.config import CareSettings, GeminiSettings, Settings
from synthesis.infrastructure.llm.gateway import AIGateway
from synthesis.infrastructure.llm.provider import LLMProvider, LLMResponse
from synthesis.services.crisis.crisis_controller import CrisisController
from synthesis.services.diary.diary_controller import DiaryController
from synthesis.services.diary.log_store import BehaviorLogStore
from synthesis.services.prompt.prompt_builder import BuiltPrompt

Outcome = Union[str, Exception]


class FakeProvider(LLMProvider):
    """
    In-memory provider recording every prompt.

    Outcomes are consumed in order; the last one repeats. An Exception
    outcome is raised instead of returned.
    """

    def __init__(
        self,
        outcomes: Sequence[Outcome] = ("Model says hello.",),
        configured: bool = True,
    ) -> None:
        self.outcomes = list(outcomes)
        self.configured = configured
        self.calls: list[BuiltPrompt] = []
        self.release: Optional[asyncio.Event] = None

    @property
    def provider_name(self) -> str:
        return "fake"

    @property
    def default_model(self) -> str:
        return "fake-model"

    async def generate(self, prompt) -> LLMResponse:
        self.calls.append(prompt)
        if self.release is not None:
            await self.release.wait()
        outcome = self.outcomes.pop(0) if len(self.outcomes) > 1 else self.outcomes[0]
        if isinstance(outcome, Exception):
            raise outcome
        return LLMResponse(content=outcome, model=self.default_model, provider=self.provider_name)

    def is_configured(self) -> bool:
        return self.configured


@pytest.fixture(autouse=True)
def no_ambient_api_key(monkeypatch):
    """Keep a developer's real key out of the tests."""
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("SYNTHESIS_GEMINI_API_KEY", raising=False)


@pytest.fixture
def care_settings() -> CareSettings:
    return CareSettings(
        subject_profile="autism spectrum, auditory hypersensitivity, verbal",
        default_crisis_situation="meltdown in a store, noise, sensory overload",
        response_language="English",
    )


@pytest.fixture
def test_settings(care_settings) -> Settings:
    """Create test settings with a dummy key."""
    return Settings(
        env="development",
        gemini=GeminiSettings(SYNTHESIS_GEMINI_API_KEY="test-key"),
        care=care_settings,
    )


@pytest.fixture
def provider() -> FakeProvider:
    return FakeProvider()


@pytest.fixture
def gateway(provider) -> AIGateway:
    return AIGateway(provider)


@pytest.fixture
def log_store() -> BehaviorLogStore:
    return BehaviorLogStore()


@pytest.fixture
def diary(log_store, gateway, care_settings) -> DiaryController:
    return DiaryController(log_store, gateway, subject_profile=care_settings.subject_profile)


@pytest.fixture
def crisis(gateway, care_settings) -> CrisisController:
    return CrisisController(gateway, default_situation=care_settings.default_crisis_situation)


@pytest.fixture
def noisy_store_draft() -> dict:
    return {
        "antecedent": "entered a noisy store",
        "behavior": "covered ears and cried",
        "consequence": "left the store, calmed down",
    }


@pytest.fixture
def make_provider():
    """Factory for providers with scripted outcomes."""
    def _make(outcomes: Sequence[Outcome] = ("Model says hello.",), configured: bool = True) -> FakeProvider:
        return FakeProvider(outcomes, configured=configured)
    return _make

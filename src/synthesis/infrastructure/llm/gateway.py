"""
AI Gateway Client

The two calls the app makes to the hosted model: ABC behavior
analysis and SOS crisis advice. Each call builds a persona prompt,
performs one round trip and returns the model text verbatim.

ERROR POLICY: The gateway never catches its own errors. A missing
credential raises GatewayConfigurationError before any network
call; transport and API errors propagate unchanged.
"""

from typing import Optional

from tenacity import (
    AsyncRetrying,
    retry_if_not_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from synthesis.config.logging_config import get_logger
from synthesis.config.settings import Settings
from synthesis.domain.models.behavior_log import BehaviorLogEntry
from synthesis.infrastructure.llm.gemini_provider import GeminiProvider
from synthesis.infrastructure.llm.provider import GatewayConfigurationError, LLMProvider
from synthesis.infrastructure.metrics.prometheus_metrics import track_gateway_call
from synthesis.services.prompt.prompt_builder import BuiltPrompt, PromptBuilder, PromptKind

logger = get_logger(__name__)


class AIGateway:
    """
    Gateway to the hosted generative-text model.

    Usage:
        gateway = AIGateway(GeminiProvider())
        analysis = await gateway.analyze_behavior(entry, "autism spectrum, verbal")
    """

    def __init__(
        self,
        provider: LLMProvider,
        *,
        prompt_builder: Optional[PromptBuilder] = None,
        max_attempts: int = 1,
    ) -> None:
        """
        Initialize gateway.

        Args:
            provider: Text generation backend
            prompt_builder: Persona prompt builder
            max_attempts: Attempts per call; 1 disables retry
        """
        self._provider = provider
        self._prompt_builder = prompt_builder or PromptBuilder()
        self._max_attempts = max(1, max_attempts)

    @property
    def provider(self) -> LLMProvider:
        return self._provider

    def is_configured(self) -> bool:
        return self._provider.is_configured()

    @track_gateway_call(PromptKind.BEHAVIOR_ANALYSIS.value)
    async def analyze_behavior(self, entry: BehaviorLogEntry, subject_profile: str) -> str:
        """
        Analyze one ABC incident.

        Args:
            entry: Logged incident
            subject_profile: Description of the child

        Returns:
            Model analysis text, verbatim

        Raises:
            GatewayConfigurationError: If no credential is configured
        """
        self._require_credential()
        prompt = self._prompt_builder.build_analysis(entry, subject_profile)
        return await self._complete(prompt)

    @track_gateway_call(PromptKind.CRISIS_ADVICE.value)
    async def get_crisis_advice(self, situation_description: str) -> str:
        """
        Get calm, step-ordered crisis guidance.

        Raises:
            GatewayConfigurationError: If no credential is configured
        """
        self._require_credential()
        prompt = self._prompt_builder.build_crisis(situation_description)
        return await self._complete(prompt)

    def _require_credential(self) -> None:
        if not self._provider.is_configured():
            logger.error("Gateway credential missing", provider=self._provider.provider_name)
            raise GatewayConfigurationError(provider=self._provider.provider_name)

    async def _complete(self, prompt: BuiltPrompt) -> str:
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self._max_attempts),
            wait=wait_exponential(multiplier=0.5, min=0.5, max=5),
            retry=retry_if_not_exception_type(GatewayConfigurationError),
            reraise=True,
        ):
            with attempt:
                response = await self._provider.generate(prompt)

        logger.info(
            "Gateway call completed",
            kind=prompt.kind.value,
            provider=response.provider,
            model=response.model,
            latency_ms=response.latency_ms,
        )
        return response.content


def create_gateway(settings: Settings) -> AIGateway:
    """Build the gateway from application settings."""
    return AIGateway(
        GeminiProvider(settings.gemini),
        prompt_builder=PromptBuilder(response_language=settings.care.response_language),
        max_attempts=settings.gemini.max_attempts,
    )

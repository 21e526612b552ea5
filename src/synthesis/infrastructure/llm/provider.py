"""
LLM Provider Abstract Interface

Defines the contract for text generation backends used by the
AI gateway. Tests substitute an in-memory provider.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from synthesis.domain.errors import GatewayConfigurationError
from synthesis.services.prompt.prompt_builder import BuiltPrompt

__all__ = ["ContentBlockedError", "GatewayConfigurationError", "LLMProvider", "LLMResponse"]


class ContentBlockedError(Exception):
    """The model refused the prompt on safety grounds and returned no text."""

    def __init__(self, provider: str, reason: str) -> None:
        super().__init__(f"{provider} blocked the prompt: {reason}")
        self.provider = provider
        self.reason = reason


@dataclass
class LLMResponse:
    """
    Response from LLM provider.

    Attributes:
        content: Generated text, verbatim
        model: Model identifier used
        provider: Provider name
        latency_ms: Response time in milliseconds
    """

    content: str
    model: str = ""
    provider: str = ""
    latency_ms: int = 0


class LLMProvider(ABC):
    """
    Abstract LLM provider interface.

    Providers perform exactly one network round trip per generate()
    call and let transport and API errors propagate unchanged.
    """

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Get provider name for logging/tracking."""
        pass

    @property
    @abstractmethod
    def default_model(self) -> str:
        """Get default model identifier."""
        pass

    @abstractmethod
    async def generate(self, prompt: BuiltPrompt) -> LLMResponse:
        """
        Generate completion from prompt.

        Args:
            prompt: Built prompt with persona and user message

        Returns:
            LLMResponse with generated content

        Raises:
            GatewayConfigurationError: If the credential is missing
            ContentBlockedError: If the model refused the prompt
        """
        pass

    @abstractmethod
    def is_configured(self) -> bool:
        """Check whether the provider has a usable credential."""
        pass

"""LLM provider and gateway package."""

from synthesis.infrastructure.llm.provider import (
    ContentBlockedError,
    GatewayConfigurationError,
    LLMProvider,
    LLMResponse,
)
from synthesis.infrastructure.llm.gemini_provider import GeminiProvider
from synthesis.infrastructure.llm.gateway import AIGateway, create_gateway

__all__ = [
    # Base types
    "LLMProvider",
    "LLMResponse",
    "GatewayConfigurationError",
    "ContentBlockedError",
    # Providers
    "GeminiProvider",
    # Gateway
    "AIGateway",
    "create_gateway",
]

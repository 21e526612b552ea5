"""
Google Gemini LLM Provider

Implementation of the LLM provider interface for the Google Gemini API.
The persona is passed as the model's native system instruction.
"""

import time
from typing import Any, Optional

import google.generativeai as genai
from google.generativeai.types import HarmBlockThreshold, HarmCategory

from synthesis.config import get_settings
from synthesis.config.logging_config import get_logger
from synthesis.config.settings import GeminiSettings
from synthesis.infrastructure.llm.provider import (
    ContentBlockedError,
    GatewayConfigurationError,
    LLMProvider,
    LLMResponse,
)
from synthesis.services.prompt.prompt_builder import BuiltPrompt

logger = get_logger(__name__)


class GeminiProvider(LLMProvider):
    """
    Google Gemini provider.

    The API key is read from settings on first use, not at import or
    construction, so a missing key surfaces on the first call that
    needs it.

    Usage:
        provider = GeminiProvider()
        response = await provider.generate(prompt)
    """

    # Dangerous-content threshold is relaxed so crisis and safety
    # guidance is not blocked
    SAFETY_SETTINGS = {
        HarmCategory.HARM_CATEGORY_HARASSMENT: HarmBlockThreshold.BLOCK_MEDIUM_AND_ABOVE,
        HarmCategory.HARM_CATEGORY_HATE_SPEECH: HarmBlockThreshold.BLOCK_MEDIUM_AND_ABOVE,
        HarmCategory.HARM_CATEGORY_SEXUALLY_EXPLICIT: HarmBlockThreshold.BLOCK_MEDIUM_AND_ABOVE,
        HarmCategory.HARM_CATEGORY_DANGEROUS_CONTENT: HarmBlockThreshold.BLOCK_ONLY_HIGH,
    }

    def __init__(self, settings: Optional[GeminiSettings] = None) -> None:
        """
        Initialize Gemini provider.

        Args:
            settings: Gemini settings (defaults to application settings)
        """
        self._settings = settings
        self._client_configured = False

    @property
    def settings(self) -> GeminiSettings:
        if self._settings is None:
            self._settings = get_settings().gemini
        return self._settings

    @property
    def provider_name(self) -> str:
        return "gemini"

    @property
    def default_model(self) -> str:
        return self.settings.model

    def is_configured(self) -> bool:
        return self.settings.has_api_key()

    def _ensure_client(self) -> None:
        """Configure the SDK once a usable key is known."""
        if not self.is_configured():
            raise GatewayConfigurationError(provider=self.provider_name)
        if not self._client_configured:
            genai.configure(api_key=self.settings.api_key.get_secret_value())
            self._client_configured = True

    async def generate(self, prompt: BuiltPrompt) -> LLMResponse:
        """
        Generate completion using Gemini API.

        One request, no streaming. Errors from the SDK are not caught.
        """
        self._ensure_client()

        model_name = self.default_model
        gemini_model = genai.GenerativeModel(
            model_name=model_name,
            safety_settings=self.SAFETY_SETTINGS,
            system_instruction=prompt.system_prompt,
        )

        start_time = time.time()
        response = await gemini_model.generate_content_async(prompt.user_message)
        latency_ms = int((time.time() - start_time) * 1000)

        feedback = getattr(response, "prompt_feedback", None)
        block_reason = getattr(feedback, "block_reason", None)
        if block_reason:
            logger.warning("Gemini prompt blocked", kind=prompt.kind.value, reason=str(block_reason))
            raise ContentBlockedError(provider=self.provider_name, reason=str(block_reason))

        content = self._extract_text(response)

        logger.debug(
            "Gemini completion generated",
            model=model_name,
            latency_ms=latency_ms,
            content_length=len(content),
        )

        return LLMResponse(
            content=content,
            model=model_name,
            provider=self.provider_name,
            latency_ms=latency_ms,
        )

    def _extract_text(self, response: Any) -> str:
        """Join the text parts of the first candidate ("" if none)."""
        if not response.candidates:
            return ""
        candidate = response.candidates[0]
        if not candidate.content or not candidate.content.parts:
            return ""
        return "".join(part.text or "" for part in candidate.content.parts)


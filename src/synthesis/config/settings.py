"""
Synthesis Settings

Everything is read from SYNTHESIS_* environment variables or a .env
file in the working directory. The Gemini key is also accepted under
the plain GEMINI_API_KEY name the Google tooling uses.

SECURITY: The API key is a SecretStr; pass it to the SDK only.
"""

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


# Placeholder shipped in example .env files; treated as "not configured"
API_KEY_PLACEHOLDER = "CHANGE_ME"


class GeminiSettings(BaseSettings):
    """Google Gemini API configuration."""

    model_config = SettingsConfigDict(
        env_prefix="SYNTHESIS_GEMINI_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    api_key: SecretStr = Field(
        default=SecretStr(""),
        validation_alias=AliasChoices("SYNTHESIS_GEMINI_API_KEY", "GEMINI_API_KEY"),
        description="Gemini API key",
    )
    model: str = Field(default="gemini-3-flash-preview", description="Model identifier")
    max_attempts: int = Field(
        default=1,
        ge=1,
        le=5,
        description="Attempts per gateway call (1 = no retry)",
    )

    def has_api_key(self) -> bool:
        """Check whether a usable API key is present."""
        key = self.api_key.get_secret_value().strip()
        return bool(key) and key != API_KEY_PLACEHOLDER


class CareSettings(BaseSettings):
    """Caregiver context passed to the model."""

    model_config = SettingsConfigDict(
        env_prefix="SYNTHESIS_CARE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    subject_profile: str = Field(
        default="autism spectrum, auditory hypersensitivity, verbal",
        description="Profile of the child the diary is kept for",
    )
    default_crisis_situation: str = Field(
        default="meltdown in a store, noise, sensory overload",
        description="Situation sent when the SOS screen gets no description",
    )
    response_language: str = Field(
        default="Czech",
        description="Language the model is asked to answer in",
    )


class Settings(BaseSettings):
    """
    Root settings; model and caregiver context are nested.

    Usage:
        settings = get_settings()
        model = settings.gemini.model
    """

    model_config = SettingsConfigDict(
        env_prefix="SYNTHESIS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    env: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Application environment"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level"
    )
    api_version: str = Field(default="v1", description="API version prefix")
    cors_origins: list[str] = Field(
        default=["http://localhost:3000"],
        description="Allowed CORS origins"
    )
    sentry_dsn: str = Field(default="", description="Sentry DSN (empty disables error tracking)")

    # Nested settings
    gemini: GeminiSettings = Field(default_factory=GeminiSettings)
    care: CareSettings = Field(default_factory=CareSettings)

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.env == "production"


@lru_cache()
def get_settings() -> Settings:
    """Settings for the running process, loaded once. Tests build Settings directly."""
    return Settings()

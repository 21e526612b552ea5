"""
Synthesis Configuration Module

Provides centralized configuration management with:
- Environment-based settings loading
- Secure handling of the model API key
"""

from synthesis.config.settings import CareSettings, GeminiSettings, Settings, get_settings

__all__ = ["CareSettings", "GeminiSettings", "Settings", "get_settings"]

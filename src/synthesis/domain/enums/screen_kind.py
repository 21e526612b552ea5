"""
Screen Enumeration

The closed set of screens reachable from the bottom navigation.
"""

from enum import StrEnum


class ScreenKind(StrEnum):
    """Navigation tabs."""

    LIBRARY = "library"
    """Pictogram cards."""

    DIARY = "diary"
    """ABC behavior diary."""

    SOS = "sos"
    """Crisis support."""

    CHAT = "chat"
    """Reserved tab; no conversation support yet."""

"""Domain enums package."""

from synthesis.domain.enums.screen_kind import ScreenKind

__all__ = ["ScreenKind"]

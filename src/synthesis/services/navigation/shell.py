"""
Navigation Shell

Holds which of the four screens is active. Switching is a plain
assignment; there is no data flow between screens.
"""

from typing import Mapping, Union

from synthesis.config.logging_config import get_logger
from synthesis.domain.enums.screen_kind import ScreenKind
from synthesis.services.navigation.screens import Screen

logger = get_logger(__name__)


class NavigationShell:
    """
    Tab navigation over a closed set of screens.

    Usage:
        shell = NavigationShell(screens)
        shell.switch_to(ScreenKind.DIARY)
        state = shell.render()
    """

    def __init__(
        self,
        screens: Mapping[ScreenKind, Screen],
        initial: ScreenKind = ScreenKind.LIBRARY,
    ) -> None:
        """
        Args:
            screens: One screen per ScreenKind
            initial: Screen shown first

        Raises:
            ValueError: If a screen is missing or registered under the wrong kind
        """
        missing = [kind.value for kind in ScreenKind if kind not in screens]
        if missing:
            raise ValueError(f"Missing screens: {', '.join(missing)}")
        for kind, screen in screens.items():
            if screen.kind != kind:
                raise ValueError(f"Screen {type(screen).__name__} registered as {kind.value}")

        self._screens = dict(screens)
        self._active = ScreenKind(initial)

    @property
    def active(self) -> ScreenKind:
        return self._active

    @property
    def active_screen(self) -> Screen:
        return self._screens[self._active]

    def screen(self, kind: ScreenKind) -> Screen:
        return self._screens[kind]

    def switch_to(self, kind: Union[ScreenKind, str]) -> ScreenKind:
        """
        Make a screen active.

        Raises:
            ValueError: If kind does not name a screen
        """
        self._active = ScreenKind(kind)
        logger.debug("Screen switched", screen=self._active.value)
        return self._active

    def render(self) -> dict:
        return {
            "active_screen": self._active.value,
            "screen": self.active_screen.render(),
        }

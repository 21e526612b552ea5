"""Navigation package."""

from synthesis.services.navigation.screens import (
    ChatScreen,
    CrisisScreen,
    DiaryScreen,
    LibraryScreen,
    Screen,
)
from synthesis.services.navigation.shell import NavigationShell

__all__ = [
    "Screen",
    "LibraryScreen",
    "DiaryScreen",
    "CrisisScreen",
    "ChatScreen",
    "NavigationShell",
]

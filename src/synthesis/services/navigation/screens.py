"""
Screen Variants

One class per navigation tab. Each renders its own state; the
navigation shell only picks which one is active.
"""

from abc import ABC, abstractmethod
from typing import ClassVar

from synthesis.domain.enums.screen_kind import ScreenKind
from synthesis.domain.models.pictogram import PICTOGRAM_CATALOG
from synthesis.services.crisis.crisis_controller import CrisisController
from synthesis.services.diary.diary_controller import DiaryController


class Screen(ABC):
    """A navigation tab."""

    kind: ClassVar[ScreenKind]

    @abstractmethod
    def render(self) -> dict:
        """Current screen state for the client."""
        pass


class LibraryScreen(Screen):
    """Static pictogram cards."""

    kind = ScreenKind.LIBRARY

    def render(self) -> dict:
        return {
            "title": "Pictograms",
            "subtitle": "Visual support for communication",
            "cards": [card.to_dict() for card in PICTOGRAM_CATALOG],
        }


class DiaryScreen(Screen):
    kind = ScreenKind.DIARY

    def __init__(self, controller: DiaryController) -> None:
        self.controller = controller

    def render(self) -> dict:
        return self.controller.render()


class CrisisScreen(Screen):
    kind = ScreenKind.SOS

    def __init__(self, controller: CrisisController) -> None:
        self.controller = controller

    def render(self) -> dict:
        return self.controller.render()


class ChatScreen(Screen):
    """Reserved tab. Conversation with the assistant is not offered yet."""

    kind = ScreenKind.CHAT

    def render(self) -> dict:
        return {
            "available": False,
            "message": "Chat with Synthesis Intelligence is not available yet.",
        }

"""
Unit Tests for the Navigation Shell and Screen Variants
"""

import pytest

from synthesis.domain.enums.screen_kind import ScreenKind
from synthesis.domain.models.pictogram import PICTOGRAM_CATALOG
from synthesis.services.navigation.screens import (
    ChatScreen,
    CrisisScreen,
    DiaryScreen,
    LibraryScreen,
)
from synthesis.services.navigation.shell import NavigationShell


@pytest.fixture
def screens(diary, crisis):
    return {
        ScreenKind.LIBRARY: LibraryScreen(),
        ScreenKind.DIARY: DiaryScreen(diary),
        ScreenKind.SOS: CrisisScreen(crisis),
        ScreenKind.CHAT: ChatScreen(),
    }


@pytest.fixture
def shell(screens):
    return NavigationShell(screens)


class TestNavigationShell:

    def test_library_is_initial(self, shell):
        assert shell.active == ScreenKind.LIBRARY
        assert shell.render()["active_screen"] == "library"

    @pytest.mark.parametrize("kind", list(ScreenKind))
    def test_switch_to_each_screen(self, shell, kind):
        shell.switch_to(kind)

        assert shell.active == kind
        assert shell.render()["screen"] == shell.screen(kind).render()

    def test_switch_accepts_screen_name(self, shell):
        assert shell.switch_to("sos") == ScreenKind.SOS

    def test_unknown_screen_rejected(self, shell):
        with pytest.raises(ValueError):
            shell.switch_to("settings")

        assert shell.active == ScreenKind.LIBRARY

    def test_missing_screen_rejected(self, screens):
        del screens[ScreenKind.CHAT]

        with pytest.raises(ValueError, match="chat"):
            NavigationShell(screens)

    def test_screen_under_wrong_kind_rejected(self, screens):
        screens[ScreenKind.CHAT] = LibraryScreen()

        with pytest.raises(ValueError):
            NavigationShell(screens)

    def test_switching_keeps_screen_state(self, shell, diary):
        shell.switch_to(ScreenKind.DIARY)
        diary.open_composer()
        diary.update_draft_field("behavior", "rocking")

        shell.switch_to(ScreenKind.LIBRARY)
        shell.switch_to(ScreenKind.DIARY)

        assert shell.render()["screen"]["draft"]["behavior"] == "rocking"


class TestScreens:

    def test_library_lists_catalog(self):
        cards = LibraryScreen().render()["cards"]

        assert [card["id"] for card in cards] == [card.id for card in PICTOGRAM_CATALOG]

    def test_chat_is_not_available(self):
        assert ChatScreen().render()["available"] is False

    def test_crisis_screen_starts_with_breathing_guidance(self, crisis):
        state = CrisisScreen(crisis).render()

        assert state["phase"] == "breathing"
        assert state["breathing_prompt"]
        assert len(state["grounding_steps"]) == 2

"""
App Session

Explicitly owned, session-scoped state. An AppSession bundles the
log store, the two screen controllers and the navigation shell for
one user session; the registry creates and discards them.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID, uuid4

from synthesis.config.logging_config import get_logger
from synthesis.config.settings import CareSettings
from synthesis.domain.enums.screen_kind import ScreenKind
from synthesis.domain.errors import SessionNotFoundError
from synthesis.infrastructure.llm.gateway import AIGateway
from synthesis.infrastructure.metrics.prometheus_metrics import ACTIVE_APP_SESSIONS
from synthesis.services.crisis.crisis_controller import CrisisController
from synthesis.services.diary.diary_controller import DiaryController
from synthesis.services.diary.log_store import BehaviorLogStore
from synthesis.services.navigation.screens import (
    ChatScreen,
    CrisisScreen,
    DiaryScreen,
    LibraryScreen,
)
from synthesis.services.navigation.shell import NavigationShell

logger = get_logger(__name__)


@dataclass
class AppSession:
    """
    One user's session.

    Attributes:
        log_store: Diary entries for this session only
        diary: Diary screen controller
        crisis: SOS screen controller
        navigation: Tab shell over all four screens
        id: Session identifier
        created_at: Session start (UTC)
    """

    log_store: BehaviorLogStore
    diary: DiaryController
    crisis: CrisisController
    navigation: NavigationShell
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def start(cls, gateway: AIGateway, care: CareSettings) -> "AppSession":
        """Create a session with an empty diary, library tab active."""
        log_store = BehaviorLogStore()
        diary = DiaryController(log_store, gateway, subject_profile=care.subject_profile)
        crisis = CrisisController(gateway, default_situation=care.default_crisis_situation)
        navigation = NavigationShell({
            ScreenKind.LIBRARY: LibraryScreen(),
            ScreenKind.DIARY: DiaryScreen(diary),
            ScreenKind.SOS: CrisisScreen(crisis),
            ScreenKind.CHAT: ChatScreen(),
        })
        return cls(log_store=log_store, diary=diary, crisis=crisis, navigation=navigation)


class SessionRegistry:
    """Open app sessions by ID."""

    def __init__(self, gateway: AIGateway, care: Optional[CareSettings] = None) -> None:
        self._gateway = gateway
        self._care = care or CareSettings()
        self._sessions: dict[UUID, AppSession] = {}

    def create(self) -> AppSession:
        session = AppSession.start(self._gateway, self._care)
        self._sessions[session.id] = session
        ACTIVE_APP_SESSIONS.inc()
        logger.info("App session started", session_id=str(session.id))
        return session

    def get(self, session_id: UUID) -> AppSession:
        """
        Raises:
            SessionNotFoundError: Unknown or closed session
        """
        session = self._sessions.get(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        return session

    def close(self, session_id: UUID) -> None:
        """
        Discard a session and everything it holds.

        Raises:
            SessionNotFoundError: Unknown or closed session
        """
        session = self._sessions.pop(session_id, None)
        if session is None:
            raise SessionNotFoundError(session_id)
        ACTIVE_APP_SESSIONS.dec()
        logger.info(
            "App session closed",
            session_id=str(session_id),
            entries=len(session.log_store),
        )

    def close_all(self) -> None:
        for session_id in list(self._sessions):
            self.close(session_id)

    def __len__(self) -> int:
        return len(self._sessions)

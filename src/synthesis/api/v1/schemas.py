"""
API v1 Schemas

Response models shared across endpoints. Screen controllers render
plain dicts; these models validate and document them.
"""

from datetime import datetime
from typing import Any, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from synthesis.domain.enums.screen_kind import ScreenKind
from synthesis.domain.models.crisis import CrisisPhase


class BehaviorLogEntryModel(BaseModel):
    """A stored diary entry."""

    id: UUID
    antecedent: str
    behavior: str
    consequence: str
    timestamp: datetime
    analysis: Optional[str] = None


class DraftModel(BaseModel):
    antecedent: str = ""
    behavior: str = ""
    consequence: str = ""


class DiaryStateResponse(BaseModel):
    """Diary screen state. Entries are most recent first."""

    entries: list[BehaviorLogEntryModel]
    is_composing: bool
    is_submitting: bool
    draft: DraftModel
    last_error: Optional[str] = None


class CrisisStateResponse(BaseModel):
    """SOS screen state."""

    phase: CrisisPhase
    advice: Optional[str] = None
    is_loading: bool
    failure_notice: Optional[str] = None
    breathing_prompt: Optional[str] = None
    grounding_steps: list[str]

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "phase": "advice_shown",
                "advice": "1. Move to a quiet corner...",
                "is_loading": False,
                "failure_notice": None,
                "breathing_prompt": None,
                "grounding_steps": [],
            }
        }
    )


class NavigationResponse(BaseModel):
    """Active tab and its rendered state."""

    active_screen: ScreenKind
    screen: dict[str, Any]


class CreateSessionResponse(BaseModel):
    session_id: UUID
    active_screen: ScreenKind
    created_at: datetime

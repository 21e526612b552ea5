"""
Domain Errors

Conditions raised by the screen controllers and the session registry.
The API layer maps each of them to an HTTP status.
"""

from typing import Optional, Sequence
from uuid import UUID


class SynthesisError(Exception):
    """Base exception for Synthesis domain errors."""


class GatewayConfigurationError(SynthesisError):
    """
    The model credential is not configured.

    Fatal: raised before any network call and not recoverable
    without reconfiguring the process.
    """

    def __init__(self, provider: str, message: Optional[str] = None) -> None:
        super().__init__(
            message
            or "GEMINI_API_KEY is not configured. Set SYNTHESIS_GEMINI_API_KEY or GEMINI_API_KEY."
        )
        self.provider = provider


class DraftValidationError(SynthesisError):
    """
    Diary draft is incomplete.

    Raised before any gateway call; the log store is untouched.
    """

    def __init__(self, missing_fields: Sequence[str]) -> None:
        super().__init__(f"Required fields are empty: {', '.join(missing_fields)}")
        self.missing_fields = tuple(missing_fields)


class SubmissionInProgressError(SynthesisError):
    """A diary submission is already waiting for the gateway."""

    def __init__(self) -> None:
        super().__init__("A diary entry is already being analyzed")


class InvalidCrisisTransitionError(SynthesisError):
    """Crisis screen action is not allowed in the current phase."""

    def __init__(self, action: str, phase: str) -> None:
        super().__init__(f"Cannot {action} while crisis screen is {phase}")
        self.action = action
        self.phase = phase


class AnalysisAlreadyAttachedError(SynthesisError):
    """A behavior log entry already carries its analysis."""


class SessionNotFoundError(SynthesisError):
    """No open app session with the given ID."""

    def __init__(self, session_id: UUID) -> None:
        super().__init__(f"Session {session_id} not found")
        self.session_id = session_id

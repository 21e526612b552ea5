"""
Crisis Session Domain Model

Ephemeral state of the SOS screen. Cycles through
breathing -> awaiting_advice -> advice_shown -> breathing and
has no terminal state; the screen can be re-entered indefinitely.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import Optional

from synthesis.domain.errors import InvalidCrisisTransitionError


class CrisisPhase(StrEnum):
    """SOS screen phases."""

    BREATHING = "breathing"
    """Breathing guidance visible; help can be requested."""

    AWAITING_ADVICE = "awaiting_advice"
    """Advice request in flight; guidance hidden, loading shown."""

    ADVICE_SHOWN = "advice_shown"
    """Crisis protocol from the model is on screen."""


@dataclass
class CrisisSession:
    """
    SOS screen state machine.

    Attributes:
        phase: Current phase
        advice: Model advice, present only in ADVICE_SHOWN
        failure_notice: User-visible notice after a failed request
    """

    phase: CrisisPhase = CrisisPhase.BREATHING
    advice: Optional[str] = None
    failure_notice: Optional[str] = None

    @property
    def is_loading(self) -> bool:
        return self.phase == CrisisPhase.AWAITING_ADVICE

    def request_help(self) -> None:
        """BREATHING -> AWAITING_ADVICE."""
        self._require(CrisisPhase.BREATHING, "request help")
        self.phase = CrisisPhase.AWAITING_ADVICE
        self.failure_notice = None

    def receive_advice(self, advice: str) -> None:
        """AWAITING_ADVICE -> ADVICE_SHOWN."""
        self._require(CrisisPhase.AWAITING_ADVICE, "show advice")
        self.phase = CrisisPhase.ADVICE_SHOWN
        self.advice = advice

    def fail(self, notice: Optional[str] = None) -> None:
        """AWAITING_ADVICE -> BREATHING, keeping an optional notice."""
        self._require(CrisisPhase.AWAITING_ADVICE, "record a failure")
        self.phase = CrisisPhase.BREATHING
        self.advice = None
        self.failure_notice = notice

    def dismiss(self) -> None:
        """ADVICE_SHOWN -> BREATHING."""
        self._require(CrisisPhase.ADVICE_SHOWN, "dismiss advice")
        self.phase = CrisisPhase.BREATHING
        self.advice = None

    def _require(self, phase: CrisisPhase, action: str) -> None:
        if self.phase != phase:
            raise InvalidCrisisTransitionError(action=action, phase=self.phase.value)

    def to_dict(self) -> dict:
        return {
            "phase": self.phase.value,
            "advice": self.advice,
            "is_loading": self.is_loading,
            "failure_notice": self.failure_notice,
        }

"""
Diary Screen Controller

Drives the ABC diary: composer form state, submission through the
AI gateway and the session's log store.

INVARIANT: is_submitting is reset to False after every submission
attempt, whatever its outcome. While it is set the composer is
read-only.
"""

from typing import Optional

from synthesis.config.logging_config import get_logger
from synthesis.domain.errors import DraftValidationError, SubmissionInProgressError
from synthesis.domain.models.behavior_log import BehaviorLogEntry, Draft
from synthesis.infrastructure.llm.gateway import AIGateway
from synthesis.infrastructure.metrics.prometheus_metrics import track_diary_submission
from synthesis.services.diary.log_store import BehaviorLogStore
from synthesis.services.gateway_call import (
    GatewayFailure,
    GatewayResult,
    GatewaySuccess,
    run_gateway_call,
)

logger = get_logger(__name__)

SUBMISSION_FAILED_NOTICE = "The analysis could not be completed. Your entry is kept below, please try again."


class DiaryController:
    """
    Diary screen state and operations.

    Attributes:
        is_composing: Composer form is open
        is_submitting: A submission is waiting for the gateway
        draft: Composer fields
        last_error: User-visible notice after a failed submission
    """

    def __init__(
        self,
        store: BehaviorLogStore,
        gateway: AIGateway,
        subject_profile: str,
    ) -> None:
        self._store = store
        self._gateway = gateway
        self._subject_profile = subject_profile

        self.is_composing = False
        self.is_submitting = False
        self.draft = Draft()
        self.last_error: Optional[str] = None

    @property
    def entries(self) -> tuple[BehaviorLogEntry, ...]:
        return self._store.all()

    def _require_idle(self) -> None:
        if self.is_submitting:
            raise SubmissionInProgressError()

    def open_composer(self) -> None:
        """Open the form with an empty draft."""
        self._require_idle()
        self.is_composing = True
        self.draft = Draft()
        self.last_error = None

    def update_draft_field(self, field: str, value: str) -> None:
        """
        Set one draft field.

        Raises:
            ValueError: If field is not antecedent, behavior or consequence
            SubmissionInProgressError: The draft is being analyzed
        """
        self._require_idle()
        self.draft.set_field(field, value)

    def cancel_composer(self) -> None:
        """Discard the draft and close the form."""
        self._require_idle()
        self.draft = Draft()
        self.is_composing = False
        self.last_error = None

    async def submit(self) -> GatewayResult:
        """
        Submit the draft for analysis.

        On success the analyzed entry is stored, the composer closes and
        the draft is cleared. On failure nothing is stored and the draft
        stays intact for a retry.

        Returns:
            The gateway outcome

        Raises:
            SubmissionInProgressError: A submission is already in flight
            DraftValidationError: A draft field is empty
            GatewayConfigurationError: No model credential configured
        """
        self._require_idle()

        missing = self.draft.missing_fields()
        if missing:
            track_diary_submission("invalid")
            raise DraftValidationError(missing)

        self.is_submitting = True
        try:
            entry = self.draft.to_entry()
            result = await run_gateway_call(
                self._gateway.analyze_behavior(entry, self._subject_profile),
                operation="analyze_behavior",
            )

            if isinstance(result, GatewaySuccess):
                self._store.append(entry.with_analysis(result.text))
                self.is_composing = False
                self.draft = Draft()
                self.last_error = None
                track_diary_submission("saved")
                logger.info("Diary entry saved", entry_id=str(entry.id), entries=len(self._store))
            elif isinstance(result, GatewayFailure):
                self.last_error = SUBMISSION_FAILED_NOTICE
                track_diary_submission("failed")
                logger.warning("Diary entry not saved", reason=result.reason)

            return result
        finally:
            self.is_submitting = False

    def render(self) -> dict:
        """Screen state for the client."""
        return {
            "entries": [entry.to_dict() for entry in self.entries],
            "is_composing": self.is_composing,
            "is_submitting": self.is_submitting,
            "draft": self.draft.to_dict(),
            "last_error": self.last_error,
        }

"""
Synthesis Domain Layer

Core entities and value objects, independent of infrastructure.
"""

from synthesis.domain.enums.screen_kind import ScreenKind
from synthesis.domain.errors import (
    AnalysisAlreadyAttachedError,
    DraftValidationError,
    GatewayConfigurationError,
    InvalidCrisisTransitionError,
    SessionNotFoundError,
    SubmissionInProgressError,
    SynthesisError,
)
from synthesis.domain.models.behavior_log import BehaviorLogEntry, Draft
from synthesis.domain.models.crisis import CrisisPhase, CrisisSession

__all__ = [
    # Models
    "BehaviorLogEntry",
    "Draft",
    "CrisisPhase",
    "CrisisSession",
    # Enums
    "ScreenKind",
    # Errors
    "SynthesisError",
    "AnalysisAlreadyAttachedError",
    "DraftValidationError",
    "GatewayConfigurationError",
    "InvalidCrisisTransitionError",
    "SessionNotFoundError",
    "SubmissionInProgressError",
]

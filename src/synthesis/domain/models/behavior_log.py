"""
Behavior Log Domain Model

ABC (Antecedent-Behavior-Consequence) incident records kept by the
diary screen, plus the draft the composer edits before submission.

PRIVACY: Entry text describes a child's behavior. Keep it out of logs.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID, uuid4

from synthesis.domain.errors import AnalysisAlreadyAttachedError


# Form order of the three ABC fields
ABC_FIELDS: tuple[str, ...] = ("antecedent", "behavior", "consequence")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class BehaviorLogEntry:
    """
    A single logged incident.

    Entries are immutable. The only change an entry ever sees is the
    one-time step from "no analysis" to "has analysis", which produces
    a new entry via with_analysis().

    Attributes:
        antecedent: What preceded the incident
        behavior: The observed behavior
        consequence: What followed
        timestamp: Submission instant (UTC)
        analysis: Model analysis, absent until the gateway answers
        id: Stable identifier for list rendering
    """

    antecedent: str
    behavior: str
    consequence: str
    timestamp: datetime = field(default_factory=_utcnow)
    analysis: Optional[str] = None
    id: UUID = field(default_factory=uuid4)

    @property
    def has_analysis(self) -> bool:
        return self.analysis is not None

    def with_analysis(self, analysis: str) -> "BehaviorLogEntry":
        """
        Return this entry with its analysis attached.

        Raises:
            AnalysisAlreadyAttachedError: If the entry already has one
        """
        if self.analysis is not None:
            raise AnalysisAlreadyAttachedError(f"Entry {self.id} already has an analysis")
        return replace(self, analysis=analysis)

    def to_dict(self) -> dict:
        """Serialize entry to dictionary."""
        return {
            "id": str(self.id),
            "antecedent": self.antecedent,
            "behavior": self.behavior,
            "consequence": self.consequence,
            "timestamp": self.timestamp.isoformat(),
            "analysis": self.analysis,
        }


@dataclass
class Draft:
    """Composer form state. All fields start empty."""

    antecedent: str = ""
    behavior: str = ""
    consequence: str = ""

    def set_field(self, name: str, value: str) -> None:
        """
        Set one ABC field.

        Raises:
            ValueError: If name is not one of the ABC fields
        """
        if name not in ABC_FIELDS:
            raise ValueError(f"Unknown draft field: {name!r}")
        setattr(self, name, value)

    def missing_fields(self) -> list[str]:
        """Names of empty (or whitespace-only) fields, in form order."""
        return [name for name in ABC_FIELDS if not getattr(self, name).strip()]

    @property
    def is_complete(self) -> bool:
        return not self.missing_fields()

    def to_entry(self) -> BehaviorLogEntry:
        """Build a new entry stamped with the current time."""
        return BehaviorLogEntry(
            antecedent=self.antecedent,
            behavior=self.behavior,
            consequence=self.consequence,
            timestamp=_utcnow(),
        )

    def to_dict(self) -> dict:
        return {name: getattr(self, name) for name in ABC_FIELDS}

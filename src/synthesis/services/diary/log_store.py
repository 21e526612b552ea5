"""
Behavior Log Store

Append-only, session-scoped collection of diary entries.
Storage keeps insertion order; all() reverses it for display.
Nothing is persisted across sessions.
"""

from synthesis.domain.models.behavior_log import BehaviorLogEntry


class BehaviorLogStore:
    """In-memory diary entries for one app session."""

    def __init__(self) -> None:
        self._entries: list[BehaviorLogEntry] = []

    def append(self, entry: BehaviorLogEntry) -> None:
        """Add an entry; it becomes the first item of all()."""
        self._entries.append(entry)

    def all(self) -> tuple[BehaviorLogEntry, ...]:
        """Entries, most recent first."""
        return tuple(reversed(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

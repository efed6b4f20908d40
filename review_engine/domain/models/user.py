"""User directory record as seen by the review engine."""

from __future__ import annotations

from dataclasses import dataclass, field

from review_engine.domain.models.identifiers import UserId

UNKNOWN_LEVEL: str = "Unknown"
"""Level shown when the directory has no level recorded."""


@dataclass(frozen=True)
class DirectoryUser:
    """A user as returned by the user directory.

    Attributes:
        id: User identifier.
        name: Display name.
        level: Recorded level name, if any.
        manager_id: The user's direct manager, if any.
    """

    id: UserId
    name: str
    level: str | None = field(default=None)
    manager_id: UserId | None = field(default=None)

    @property
    def display_level(self) -> str:
        return self.level or UNKNOWN_LEVEL

    def reports_to(self, manager_id: UserId) -> bool:
        """True if manager_id is this user's recorded manager."""
        return self.manager_id is not None and self.manager_id == manager_id

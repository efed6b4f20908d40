"""Calibration session record.

Managers meet during the CALIBRATION phase to align scores across teams
before final scores are locked.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from uuid import UUID

from review_engine.domain.models.identifiers import ReviewCycleId, UserId


class CalibrationSessionStatus(str, Enum):
    """Status of a calibration session."""

    SCHEDULED = "SCHEDULED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"


@dataclass(frozen=True, eq=True)
class CalibrationSession:
    """A scheduled calibration meeting for a cycle.

    Attributes:
        id: Session identifier.
        cycle_id: Cycle being calibrated.
        name: Display name.
        facilitator_id: User running the session.
        participant_ids: Managers taking part.
        scheduled_at: Meeting time.
        department: Optional department scope.
        status: Current status.
    """

    id: UUID
    cycle_id: ReviewCycleId
    name: str
    facilitator_id: UserId
    participant_ids: tuple[UserId, ...]
    scheduled_at: datetime
    department: str | None = field(default=None)
    status: CalibrationSessionStatus = field(default=CalibrationSessionStatus.SCHEDULED)

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("name must be non-empty")

"""Review cycle aggregate.

A review cycle is created in DRAFT by an administrator and then moves
strictly forward:

    DRAFT -> ACTIVE -> CALIBRATION -> COMPLETED

No transition skips a state and none is reversible. ``end_date`` is set
exactly once, when the cycle completes.

The "only one ACTIVE cycle" rule spans aggregates and is enforced by
ReviewCycleService before calling ``start()``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from review_engine.domain.errors.review_cycle import InvalidReviewCycleStateError
from review_engine.domain.models.cycle_deadlines import CycleDeadlines, ReviewPhase
from review_engine.domain.models.identifiers import ReviewCycleId


class CycleStatus(str, Enum):
    """Lifecycle status of a review cycle."""

    DRAFT = "DRAFT"
    ACTIVE = "ACTIVE"
    CALIBRATION = "CALIBRATION"
    COMPLETED = "COMPLETED"

    @classmethod
    def from_string(cls, status: str) -> CycleStatus:
        """Parse a status name, ignoring case."""
        try:
            return cls(status.upper())
        except ValueError as e:
            raise ValueError(f"Invalid cycle status: {status}") from e

    def is_terminal(self) -> bool:
        return self == CycleStatus.COMPLETED


@dataclass(eq=False)
class ReviewCycle:
    """A review period with phased deadlines.

    Mutated in place by its transition methods; the owning store is
    responsible for serializing concurrent writes.

    Attributes:
        id: Cycle identifier.
        name: Display name ("2026 Annual Review").
        year: Calendar year the cycle reviews.
        deadlines: Phase deadlines.
        start_date: When the cycle was opened.
        status: Current lifecycle status.
        end_date: Completion time (None until COMPLETED).
    """

    id: ReviewCycleId
    name: str
    year: int
    deadlines: CycleDeadlines
    start_date: datetime
    status: CycleStatus = field(default=CycleStatus.DRAFT)
    end_date: datetime | None = field(default=None)

    @classmethod
    def create(
        cls,
        name: str,
        year: int,
        deadlines: CycleDeadlines,
        start_date: datetime | None = None,
        cycle_id: ReviewCycleId | None = None,
    ) -> ReviewCycle:
        """Create a new cycle in DRAFT status."""
        return cls(
            id=cycle_id or ReviewCycleId.generate(),
            name=name,
            year=year,
            deadlines=deadlines,
            start_date=start_date or datetime.now(timezone.utc),
        )

    def start(self) -> None:
        """Open the cycle (DRAFT -> ACTIVE).

        Raises:
            InvalidReviewCycleStateError: If the cycle is not DRAFT.
        """
        self._require(CycleStatus.DRAFT, "start cycle")
        self.status = CycleStatus.ACTIVE

    def activate(self) -> None:
        """Alias for ``start()``."""
        self.start()

    def enter_calibration(self) -> None:
        """Move to calibration (ACTIVE -> CALIBRATION).

        Raises:
            InvalidReviewCycleStateError: If the cycle is not ACTIVE.
        """
        self._require(CycleStatus.ACTIVE, "enter calibration")
        self.status = CycleStatus.CALIBRATION

    def complete(self) -> None:
        """Close the cycle (CALIBRATION -> COMPLETED) and stamp ``end_date``.

        Raises:
            InvalidReviewCycleStateError: If the cycle is not in CALIBRATION.
        """
        self._require(CycleStatus.CALIBRATION, "complete cycle")
        self.status = CycleStatus.COMPLETED
        self.end_date = datetime.now(timezone.utc)

    def has_deadline_passed(
        self, phase: ReviewPhase, now: datetime | None = None
    ) -> bool:
        """Check a phase deadline. Valid in every status."""
        return self.deadlines.has_passed_deadline(phase, now=now)

    @property
    def is_active(self) -> bool:
        return self.status == CycleStatus.ACTIVE

    @property
    def is_completed(self) -> bool:
        return self.status == CycleStatus.COMPLETED

    def _require(self, required: CycleStatus, action: str) -> None:
        if self.status != required:
            raise InvalidReviewCycleStateError(
                action=action,
                current_status=self.status,
                required_status=required,
            )

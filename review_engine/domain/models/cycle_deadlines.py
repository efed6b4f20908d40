"""Cycle deadlines value object.

A review cycle has five phases, each with a deadline. Deadlines must be
timezone-aware and strictly increasing in phase order:

    self review < peer feedback < manager evaluation < calibration < feedback delivery

Equal adjacent deadlines are rejected.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum

from review_engine.domain.errors.review_cycle import InvalidDeadlineOrderError
from review_engine.domain.errors.timestamp import NaiveTimestampError


class ReviewPhase(str, Enum):
    """The five deadline-bearing phases of a review cycle, in order."""

    SELF_REVIEW = "self_review"
    PEER_FEEDBACK = "peer_feedback"
    MANAGER_EVALUATION = "manager_evaluation"
    CALIBRATION = "calibration"
    FEEDBACK_DELIVERY = "feedback_delivery"

    @property
    def label(self) -> str:
        """Display name used in error messages ("Peer Feedback")."""
        return self.value.replace("_", " ").title()


@dataclass(frozen=True, eq=True)
class CycleDeadlines:
    """Deadlines for every phase of a review cycle.

    Attributes:
        self_review: Last moment to submit self reviews.
        peer_feedback: Last moment to submit peer feedback.
        manager_evaluation: Last moment for manager evaluations.
        calibration: End of calibration.
        feedback_delivery: Last moment to deliver feedback to employees.
    """

    self_review: datetime
    peer_feedback: datetime
    manager_evaluation: datetime
    calibration: datetime
    feedback_delivery: datetime

    def __post_init__(self) -> None:
        """Validate deadlines are timezone-aware and strictly increasing.

        Raises:
            NaiveTimestampError: A deadline has no tzinfo.
            InvalidDeadlineOrderError: On the first out-of-order phase.
        """
        phases = list(ReviewPhase)
        for phase in phases:
            if self.deadline_for(phase).tzinfo is None:
                raise NaiveTimestampError(f"{phase.label} deadline")
        for previous, current in zip(phases, phases[1:]):
            if self.deadline_for(current) <= self.deadline_for(previous):
                raise InvalidDeadlineOrderError(current, previous)

    @classmethod
    def create(cls, deadlines: Mapping[str, datetime]) -> CycleDeadlines:
        """Build deadlines from a mapping keyed by phase value.

        Args:
            deadlines: Mapping of ``ReviewPhase`` values to datetimes.
        """
        return cls(**{phase.value: deadlines[phase.value] for phase in ReviewPhase})

    def deadline_for(self, phase: ReviewPhase) -> datetime:
        """Return the deadline of one phase."""
        return getattr(self, ReviewPhase(phase).value)

    def has_passed_deadline(
        self, phase: ReviewPhase, now: datetime | None = None
    ) -> bool:
        """Check whether the deadline for a phase is in the past.

        Args:
            phase: The phase to check.
            now: Reference time; defaults to the current UTC time.

        Returns:
            True if now is strictly after the phase deadline.
        """
        reference = now or datetime.now(timezone.utc)
        if reference.tzinfo is None:
            raise NaiveTimestampError("now")
        return reference > self.deadline_for(phase)

    def to_dict(self) -> dict[str, datetime]:
        """Return the deadlines keyed by phase value."""
        return {phase.value: self.deadline_for(phase) for phase in ReviewPhase}

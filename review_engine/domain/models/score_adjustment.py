"""Score adjustment request record.

After final scores are locked, a manager may ask for one of their direct
reports' scores to be adjusted. Requests start PENDING and are reviewed
exactly once:

    PENDING -> APPROVED
    PENDING -> REJECTED
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum
from uuid import UUID

from review_engine.domain.errors.score_adjustment import (
    AdjustmentAlreadyReviewedError,
    AdjustmentReasonRequiredError,
    RejectionReasonRequiredError,
)
from review_engine.domain.models.identifiers import ReviewCycleId, UserId
from review_engine.domain.models.pillar_scores import PillarScores


class AdjustmentStatus(str, Enum):
    """Status of a score adjustment request."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"

    def is_terminal(self) -> bool:
        return self != AdjustmentStatus.PENDING


@dataclass(frozen=True, eq=True)
class ScoreAdjustmentRequest:
    """A manager's request to change a locked final score.

    Attributes:
        id: Request identifier.
        cycle_id: Cycle of the final score.
        employee_id: Employee whose score is disputed.
        requester_id: Manager who filed the request.
        reason: Free-text justification (required).
        proposed_scores: Pillar scores the manager proposes.
        requested_at: When the request was filed (UTC).
        status: Current status.
        reviewer_id: Who approved/rejected (None while PENDING).
        reviewed_at: When it was reviewed.
        review_notes: Approval notes or rejection reason.
    """

    id: UUID
    cycle_id: ReviewCycleId
    employee_id: UserId
    requester_id: UserId
    reason: str
    proposed_scores: PillarScores
    requested_at: datetime
    status: AdjustmentStatus = field(default=AdjustmentStatus.PENDING)
    reviewer_id: UserId | None = field(default=None)
    reviewed_at: datetime | None = field(default=None)
    review_notes: str | None = field(default=None)

    def __post_init__(self) -> None:
        if not self.reason or not self.reason.strip():
            raise AdjustmentReasonRequiredError(self.employee_id)
        if self.status.is_terminal() and self.reviewer_id is None:
            raise ValueError(f"reviewer_id required for status {self.status.value}")

    def approve(
        self, reviewer_id: UserId, notes: str | None = None
    ) -> ScoreAdjustmentRequest:
        """Return an APPROVED copy of this request.

        Raises:
            AdjustmentAlreadyReviewedError: If the request is not PENDING.
        """
        self._require_pending()
        return replace(
            self,
            status=AdjustmentStatus.APPROVED,
            reviewer_id=reviewer_id,
            reviewed_at=datetime.now(timezone.utc),
            review_notes=notes,
        )

    def reject(self, reviewer_id: UserId, reason: str | None) -> ScoreAdjustmentRequest:
        """Return a REJECTED copy of this request.

        Raises:
            AdjustmentAlreadyReviewedError: If the request is not PENDING.
            RejectionReasonRequiredError: If reason is empty.
        """
        self._require_pending()
        if not reason or not reason.strip():
            raise RejectionReasonRequiredError(self.id)
        return replace(
            self,
            status=AdjustmentStatus.REJECTED,
            reviewer_id=reviewer_id,
            reviewed_at=datetime.now(timezone.utc),
            review_notes=reason,
        )

    def _require_pending(self) -> None:
        if self.status != AdjustmentStatus.PENDING:
            raise AdjustmentAlreadyReviewedError(self.id, self.status.value)

"""Score adjustment DTOs for the application layer."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from review_engine.application.dtos.final_score import PillarScoresPayload
from review_engine.domain.models.score_adjustment import ScoreAdjustmentRequest


class ScoreAdjustmentSummary(BaseModel):
    """A score adjustment request as returned to callers."""

    model_config = ConfigDict(frozen=True)

    id: UUID
    cycle_id: UUID
    employee_id: UUID
    requester_id: UUID
    status: str
    reason: str
    proposed_scores: PillarScoresPayload
    requested_at: datetime

    @classmethod
    def from_request(cls, request: ScoreAdjustmentRequest) -> ScoreAdjustmentSummary:
        return cls(
            id=request.id,
            cycle_id=request.cycle_id.value,
            employee_id=request.employee_id.value,
            requester_id=request.requester_id.value,
            status=request.status.value,
            reason=request.reason,
            proposed_scores=PillarScoresPayload(**request.proposed_scores.to_dict()),
            requested_at=request.requested_at,
        )


class ScoreAdjustmentReviewResult(BaseModel):
    """Outcome of approving or rejecting a request."""

    model_config = ConfigDict(frozen=True)

    id: UUID
    status: str
    reviewed_at: datetime
    reviewed_by: UUID
    review_notes: str | None = None

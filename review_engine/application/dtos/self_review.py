"""Self review DTOs for the application layer."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from review_engine.application.dtos.final_score import PillarScoresPayload
from review_engine.domain.models.review_records import SelfReview


class SelfReviewDetail(BaseModel):
    """An employee's self review as stored."""

    model_config = ConfigDict(frozen=True)

    id: UUID
    cycle_id: UUID
    user_id: UUID
    scores: PillarScoresPayload
    narrative: str
    word_count: Annotated[int, Field(ge=0, le=1000)]
    status: str
    submitted_at: datetime | None = None
    updated_at: datetime

    @classmethod
    def from_self_review(cls, review: SelfReview) -> SelfReviewDetail:
        return cls(
            id=review.id,
            cycle_id=review.cycle_id.value,
            user_id=review.user_id.value,
            scores=PillarScoresPayload(**review.scores.to_dict()),
            narrative=review.narrative.text,
            word_count=review.narrative.word_count,
            status=review.status.value,
            submitted_at=review.submitted_at,
            updated_at=review.updated_at,
        )

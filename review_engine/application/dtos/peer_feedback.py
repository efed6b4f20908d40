"""Peer feedback DTOs for the application layer."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from review_engine.application.dtos.final_score import PillarScoresPayload
from review_engine.domain.models.review_records import PeerFeedback


class PeerFeedbackSubmission(BaseModel):
    """Stored peer feedback as confirmed to the reviewer.

    The reviewer id is left out; feedback is anonymous to the reviewee.
    """

    model_config = ConfigDict(frozen=True)

    id: UUID
    cycle_id: UUID
    reviewee_id: UUID
    scores: PillarScoresPayload
    strengths: str | None = None
    growth_areas: str | None = None
    general_comments: str | None = None
    submitted_at: datetime
    is_anonymized: bool = True

    @classmethod
    def from_feedback(cls, feedback: PeerFeedback) -> PeerFeedbackSubmission:
        return cls(
            id=feedback.id,
            cycle_id=feedback.cycle_id.value,
            reviewee_id=feedback.reviewee_id.value,
            scores=PillarScoresPayload(**feedback.scores.to_dict()),
            strengths=feedback.strengths,
            growth_areas=feedback.growth_areas,
            general_comments=feedback.general_comments,
            submitted_at=feedback.submitted_at,
            is_anonymized=feedback.is_anonymized,
        )

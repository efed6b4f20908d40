"""Final score DTOs for the application layer."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from review_engine.domain.models.bonus_tier import BonusTier
from review_engine.domain.models.final_score import FinalScore


class PillarScoresPayload(BaseModel):
    """Pillar scores as plain integers."""

    model_config = ConfigDict(frozen=True)

    project_impact: Annotated[int, Field(ge=0, le=4)]
    direction: Annotated[int, Field(ge=0, le=4)]
    engineering_excellence: Annotated[int, Field(ge=0, le=4)]
    operational_ownership: Annotated[int, Field(ge=0, le=4)]
    people_impact: Annotated[int, Field(ge=0, le=4)]


class FinalScoreDetail(BaseModel):
    """Full view of one final score."""

    model_config = ConfigDict(frozen=True)

    id: UUID
    employee_id: UUID
    cycle_id: UUID
    final_scores: PillarScoresPayload
    weighted_score: Annotated[float, Field(ge=0, le=4)]
    percentage_score: Annotated[float, Field(ge=0, le=100)]
    bonus_tier: BonusTier
    final_level: str
    calculated_at: datetime
    is_locked: bool
    locked_at: datetime | None = None
    feedback_delivered: bool
    feedback_notes: str | None = None
    delivered_at: datetime | None = None
    delivered_by: UUID | None = None

    @classmethod
    def from_final_score(cls, score: FinalScore) -> FinalScoreDetail:
        return cls(
            id=score.id.value,
            employee_id=score.user_id.value,
            cycle_id=score.cycle_id.value,
            final_scores=PillarScoresPayload(**score.pillar_scores.to_dict()),
            weighted_score=score.weighted_score.value,
            percentage_score=score.percentage_score,
            bonus_tier=score.bonus_tier,
            final_level=score.final_level.value,
            calculated_at=score.calculated_at,
            is_locked=score.locked,
            locked_at=score.locked_at,
            feedback_delivered=score.feedback_delivered,
            feedback_notes=score.feedback_notes,
            delivered_at=score.delivered_at,
            delivered_by=score.delivered_by.value if score.delivered_by else None,
        )


class EmployeeSummary(BaseModel):
    """Employee identity block on a personal score view."""

    model_config = ConfigDict(frozen=True)

    id: UUID
    name: str
    level: str


class CycleReference(BaseModel):
    """Cycle identity block on a personal score view."""

    model_config = ConfigDict(frozen=True)

    id: UUID
    name: str
    year: int


class PeerFeedbackSummary(BaseModel):
    """Averaged peer scores, present only when peers gave feedback."""

    model_config = ConfigDict(frozen=True)

    average_scores: PillarScoresPayload
    count: Annotated[int, Field(gt=0)]


class MyFinalScoreResult(BaseModel):
    """An employee's own view of their final score."""

    model_config = ConfigDict(frozen=True)

    employee: EmployeeSummary
    cycle: CycleReference
    scores: PillarScoresPayload
    peer_feedback_summary: PeerFeedbackSummary | None = None
    weighted_score: float
    percentage_score: float
    bonus_tier: BonusTier
    is_locked: bool
    feedback_delivered: bool
    feedback_delivered_at: datetime | None = None


class LockFinalScoresResult(BaseModel):
    """Outcome of locking every final score in a cycle."""

    model_config = ConfigDict(frozen=True)

    cycle_id: UUID
    total_scores_locked: Annotated[
        int,
        Field(ge=0, description="Scores in the cycle, including those already locked"),
    ]
    newly_locked: Annotated[int, Field(ge=0)]
    locked_at: datetime


class FeedbackDeliveryResult(BaseModel):
    """Outcome of marking feedback delivered."""

    model_config = ConfigDict(frozen=True)

    employee_id: UUID
    feedback_delivered: bool
    feedback_delivered_at: datetime
    delivered_by: UUID

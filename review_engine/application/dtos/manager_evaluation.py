"""Manager evaluation DTOs for the application layer."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from review_engine.application.dtos.final_score import PillarScoresPayload
from review_engine.domain.models.review_records import ManagerEvaluation


class ManagerEvaluationDetail(BaseModel):
    """A manager's evaluation of one direct report."""

    model_config = ConfigDict(frozen=True)

    id: UUID
    cycle_id: UUID
    employee_id: UUID
    manager_id: UUID
    scores: PillarScoresPayload
    narrative: str
    strengths: str
    growth_areas: str
    development_plan: str
    proposed_level: str | None = None
    status: str
    submitted_at: datetime | None = None
    calibrated_at: datetime | None = None
    updated_at: datetime

    @classmethod
    def from_evaluation(cls, evaluation: ManagerEvaluation) -> ManagerEvaluationDetail:
        return cls(
            id=evaluation.id,
            cycle_id=evaluation.cycle_id.value,
            employee_id=evaluation.employee_id.value,
            manager_id=evaluation.manager_id.value,
            scores=PillarScoresPayload(**evaluation.scores.to_dict()),
            narrative=evaluation.narrative,
            strengths=evaluation.strengths,
            growth_areas=evaluation.growth_areas,
            development_plan=evaluation.development_plan,
            proposed_level=(
                evaluation.proposed_level.value if evaluation.proposed_level else None
            ),
            status=evaluation.status.value,
            submitted_at=evaluation.submitted_at,
            calibrated_at=evaluation.calibrated_at,
            updated_at=evaluation.updated_at,
        )

"""Team aggregation DTOs (manager views over direct reports)."""

from __future__ import annotations

from typing import Annotated
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from review_engine.domain.models.bonus_tier import BonusTier

NOT_STARTED = "NOT_STARTED"
PEER_FEEDBACK_PENDING = "PENDING"
PEER_FEEDBACK_COMPLETE = "COMPLETE"


class TeamMemberReview(BaseModel):
    """Review progress of one direct report."""

    model_config = ConfigDict(frozen=True)

    employee_id: UUID
    employee_name: str
    employee_level: str
    self_review_status: Annotated[
        str,
        Field(description="Self review status, NOT_STARTED when absent"),
    ]
    peer_feedback_count: Annotated[int, Field(ge=0)]
    peer_feedback_status: Annotated[
        str,
        Field(description="COMPLETE once enough feedback arrived, else PENDING"),
    ]
    manager_eval_status: str
    has_submitted_evaluation: bool


class TeamReviewsResult(BaseModel):
    """Review progress for every direct report, in directory order."""

    model_config = ConfigDict(frozen=True)

    reviews: list[TeamMemberReview]
    total: Annotated[int, Field(ge=0)]


class TeamMemberScore(BaseModel):
    """Final score of one direct report (zeros when not yet scored)."""

    model_config = ConfigDict(frozen=True)

    employee_id: UUID
    employee_name: str
    level: str
    weighted_score: float
    percentage_score: float
    bonus_tier: BonusTier
    feedback_delivered: bool


class TeamFinalScoresResult(BaseModel):
    """Final scores for every direct report, in directory order."""

    model_config = ConfigDict(frozen=True)

    team_scores: list[TeamMemberScore]

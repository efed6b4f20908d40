"""Review cycle DTOs for the application layer."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from review_engine.domain.models.review_cycle import ReviewCycle


class ReviewCycleSummary(BaseModel):
    """A review cycle as returned to callers."""

    model_config = ConfigDict(frozen=True)

    id: UUID
    name: str
    year: int
    status: Annotated[
        str,
        Field(description="DRAFT, ACTIVE, CALIBRATION or COMPLETED"),
    ]
    deadlines: Annotated[
        dict[str, datetime],
        Field(description="Phase deadlines keyed by phase name"),
    ]
    start_date: datetime
    end_date: Annotated[
        datetime | None,
        Field(description="Set only once the cycle is COMPLETED"),
    ] = None

    @classmethod
    def from_cycle(cls, cycle: ReviewCycle) -> ReviewCycleSummary:
        return cls(
            id=cycle.id.value,
            name=cycle.name,
            year=cycle.year,
            status=cycle.status.value,
            deadlines=cycle.deadlines.to_dict(),
            start_date=cycle.start_date,
            end_date=cycle.end_date,
        )


class StartReviewCycleResult(BaseModel):
    """Result of opening a cycle."""

    model_config = ConfigDict(frozen=True)

    id: UUID
    status: str
    started_at: datetime

"""Calibration DTOs for the application layer."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from review_engine.application.dtos.final_score import PillarScoresPayload


class CalibrationSessionSummary(BaseModel):
    """A created calibration session."""

    model_config = ConfigDict(frozen=True)

    id: UUID
    cycle_id: UUID
    name: str
    status: str
    scheduled_at: datetime
    department: str | None = None
    participant_count: Annotated[int, Field(ge=0)]


class CalibrationAdjustmentResult(BaseModel):
    """Outcome of adjusting a manager evaluation during calibration."""

    model_config = ConfigDict(frozen=True)

    evaluation_id: UUID
    session_id: UUID
    original_scores: PillarScoresPayload
    adjusted_scores: PillarScoresPayload
    justification: Annotated[str, Field(min_length=1)]
    status: str
    calibrated_at: datetime | None = None

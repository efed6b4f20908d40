"""Scoring errors: value object bounds and final score lock state."""

from __future__ import annotations

from typing import TYPE_CHECKING

from review_engine.domain.errors.business_rule import BusinessRuleViolationError
from review_engine.domain.exceptions import ReviewEngineError

if TYPE_CHECKING:
    from review_engine.domain.models.identifiers import FinalScoreId


class InvalidPillarScoreError(ReviewEngineError):
    """Raised when a pillar score is not an integer in [0, 4].

    Attributes:
        pillar: Name of the offending pillar.
        value: The rejected value.
    """

    def __init__(self, pillar: str, value: object, reason: str) -> None:
        self.pillar = pillar
        self.value = value
        super().__init__(f"Pillar score '{pillar}' {reason}, got {value!r}")


class InvalidWeightedScoreError(ReviewEngineError):
    """Raised when a weighted score is missing, NaN, or outside [0, 4]."""

    def __init__(self, value: object, reason: str) -> None:
        self.value = value
        super().__init__(f"Weighted score {reason}, got {value!r}")


class InvalidEngineerLevelError(ReviewEngineError):
    """Raised when an engineer level string is not recognised."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class FinalScoreLockedError(ReviewEngineError):
    """Raised when scores are edited on a locked final score.

    Locked scores are frozen after calibration; an administrator must
    unlock them before correcting and re-lock afterwards.

    Attributes:
        final_score_id: The locked final score.
    """

    def __init__(self, final_score_id: FinalScoreId) -> None:
        self.final_score_id = final_score_id
        super().__init__("Cannot update scores when final score is locked")


class FinalScoreNotLockedError(BusinessRuleViolationError):
    """Raised when an adjustment is requested against an unlocked score."""

    def __init__(self, final_score_id: FinalScoreId) -> None:
        self.final_score_id = final_score_id
        super().__init__(
            "Cannot request score adjustment until final scores are locked"
        )

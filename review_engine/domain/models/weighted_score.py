"""Weighted score value object.

The weighted score is a single 0-4 aggregate of the pillar scores. How
it is computed from the pillars is decided outside this package; this
type only guards the range and derives percentage and bonus tier.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from review_engine.domain.errors.scoring import InvalidWeightedScoreError
from review_engine.domain.models.bonus_tier import BonusTier

WEIGHTED_SCORE_MIN: float = 0.0
WEIGHTED_SCORE_MAX: float = 4.0


@dataclass(frozen=True, eq=True)
class WeightedScore:
    """A validated weighted score in [0, 4].

    Attributes:
        value: The score as a float.
    """

    value: float

    def __post_init__(self) -> None:
        value = self.value
        if (
            value is None
            or isinstance(value, bool)
            or not isinstance(value, (int, float))
            or math.isnan(value)
        ):
            raise InvalidWeightedScoreError(value, "must be a valid number")
        if not WEIGHTED_SCORE_MIN <= value <= WEIGHTED_SCORE_MAX:
            raise InvalidWeightedScoreError(
                value,
                f"must be between {WEIGHTED_SCORE_MIN:g} and {WEIGHTED_SCORE_MAX:g}",
            )
        object.__setattr__(self, "value", float(value))

    @classmethod
    def from_value(cls, value: float) -> WeightedScore:
        """Create a weighted score, raising InvalidWeightedScoreError if invalid."""
        return cls(value)

    @property
    def percentage(self) -> float:
        """Score as a percentage of the 4.0 maximum."""
        return self.value / WEIGHTED_SCORE_MAX * 100

    @property
    def bonus_tier(self) -> BonusTier:
        return BonusTier.from_percentage(self.percentage)

    def __str__(self) -> str:
        return f"{self.value:g}"

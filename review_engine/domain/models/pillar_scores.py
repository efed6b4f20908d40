"""Pillar scores value object.

A review scores an engineer on five fixed pillars, each an integer in
the inclusive range 0-4. PillarScores is immutable; replacing a score
means building a new instance.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields

from review_engine.domain.errors.scoring import InvalidPillarScoreError

PILLAR_SCORE_MIN: int = 0
PILLAR_SCORE_MAX: int = 4

PILLAR_NAMES: tuple[str, ...] = (
    "project_impact",
    "direction",
    "engineering_excellence",
    "operational_ownership",
    "people_impact",
)


@dataclass(frozen=True, eq=True)
class PillarScores:
    """Scores for the five performance pillars.

    Attributes:
        project_impact: Delivery and impact of project work.
        direction: Technical direction and decision making.
        engineering_excellence: Code and design quality.
        operational_ownership: Reliability and operational care.
        people_impact: Mentoring, collaboration and hiring.
    """

    project_impact: int
    direction: int
    engineering_excellence: int
    operational_ownership: int
    people_impact: int

    def __post_init__(self) -> None:
        """Validate every pillar independently.

        Raises:
            InvalidPillarScoreError: If any pillar is not an integer in [0, 4].
        """
        for pillar in fields(self):
            value = getattr(self, pillar.name)
            # bool is an int subclass; True/False are not scores
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidPillarScoreError(pillar.name, value, "must be an integer")
            if not PILLAR_SCORE_MIN <= value <= PILLAR_SCORE_MAX:
                raise InvalidPillarScoreError(
                    pillar.name,
                    value,
                    f"must be between {PILLAR_SCORE_MIN} and {PILLAR_SCORE_MAX}",
                )

    @classmethod
    def create(cls, scores: Mapping[str, int]) -> PillarScores:
        """Build scores from a mapping keyed by pillar name.

        Raises:
            InvalidPillarScoreError: If a pillar is missing or out of range.
        """
        missing = [name for name in PILLAR_NAMES if name not in scores]
        if missing:
            raise InvalidPillarScoreError(missing[0], None, "is required")
        return cls(**{name: scores[name] for name in PILLAR_NAMES})

    @classmethod
    def zero(cls) -> PillarScores:
        """All pillars at 0, the starting point of a new draft."""
        return cls(**{name: PILLAR_SCORE_MIN for name in PILLAR_NAMES})

    def to_dict(self) -> dict[str, int]:
        """Return the scores keyed by pillar name."""
        return {name: getattr(self, name) for name in PILLAR_NAMES}

"""Unit tests for PillarScores, WeightedScore, BonusTier and EngineerLevel."""

from __future__ import annotations

import math

import pytest

from review_engine.domain.errors import (
    InvalidEngineerLevelError,
    InvalidPillarScoreError,
    InvalidWeightedScoreError,
)
from review_engine.domain.models.bonus_tier import BonusTier
from review_engine.domain.models.engineer_level import EngineerLevel
from review_engine.domain.models.pillar_scores import PillarScores
from review_engine.domain.models.weighted_score import WeightedScore

VALID = {
    "project_impact": 4,
    "direction": 3,
    "engineering_excellence": 2,
    "operational_ownership": 1,
    "people_impact": 0,
}


class TestPillarScores:
    """Tests for PillarScores validation."""

    def test_create_accepts_boundary_values(self) -> None:
        scores = PillarScores.create(VALID)
        assert scores.to_dict() == VALID

    @pytest.mark.parametrize("bad", [-1, 5])
    def test_out_of_range_names_the_pillar(self, bad: int) -> None:
        with pytest.raises(InvalidPillarScoreError, match="direction") as exc_info:
            PillarScores.create({**VALID, "direction": bad})
        assert exc_info.value.pillar == "direction"
        assert exc_info.value.value == bad

    @pytest.mark.parametrize("bad", [2.5, "3", True, None])
    def test_non_integer_rejected(self, bad: object) -> None:
        with pytest.raises(InvalidPillarScoreError, match="must be an integer"):
            scores = {**VALID, "people_impact": bad}
            PillarScores.create(scores)  # type: ignore[arg-type]

    def test_missing_pillar_rejected(self) -> None:
        incomplete = {k: v for k, v in VALID.items() if k != "people_impact"}
        with pytest.raises(InvalidPillarScoreError, match="people_impact"):
            PillarScores.create(incomplete)

    def test_scores_are_immutable(self) -> None:
        scores = PillarScores.create(VALID)
        with pytest.raises(AttributeError):
            scores.direction = 1  # type: ignore[misc]

    def test_zero_is_a_valid_draft_starting_point(self) -> None:
        assert set(PillarScores.zero().to_dict().values()) == {0}


class TestWeightedScore:
    """Tests for WeightedScore range, percentage and tier."""

    @pytest.mark.parametrize(
        ("value", "percentage", "tier"),
        [
            (0.0, 0.0, BonusTier.BELOW),
            (1.99, 49.75, BonusTier.BELOW),
            (2.0, 50.0, BonusTier.MEETS),
            (3.2, 80.0, BonusTier.MEETS),
            (3.4, 85.0, BonusTier.EXCEEDS),
            (3.5, 87.5, BonusTier.EXCEEDS),
            (4, 100.0, BonusTier.EXCEEDS),
        ],
    )
    def test_percentage_and_tier(
        self, value: float, percentage: float, tier: BonusTier
    ) -> None:
        score = WeightedScore.from_value(value)
        assert score.percentage == pytest.approx(percentage)
        assert score.bonus_tier == tier

    def test_integer_input_stored_as_float(self) -> None:
        assert isinstance(WeightedScore(3).value, float)

    @pytest.mark.parametrize("bad", [-0.01, 4.01, 10])
    def test_out_of_range_rejected(self, bad: float) -> None:
        with pytest.raises(InvalidWeightedScoreError, match="between 0 and 4"):
            WeightedScore(bad)

    @pytest.mark.parametrize("bad", [None, math.nan, "3.0", True])
    def test_invalid_number_rejected(self, bad: object) -> None:
        with pytest.raises(InvalidWeightedScoreError, match="valid number"):
            WeightedScore(bad)  # type: ignore[arg-type]


class TestBonusTier:
    """Tests for BonusTier classification."""

    @pytest.mark.parametrize(
        ("percentage", "tier"),
        [
            (100, BonusTier.EXCEEDS),
            (85, BonusTier.EXCEEDS),
            (84.99, BonusTier.MEETS),
            (50, BonusTier.MEETS),
            (49.99, BonusTier.BELOW),
            (-10, BonusTier.BELOW),
        ],
    )
    def test_from_percentage(self, percentage: float, tier: BonusTier) -> None:
        assert BonusTier.from_percentage(percentage) is tier

    def test_members_compare_by_value(self) -> None:
        assert BonusTier("MEETS") is BonusTier.MEETS
        assert BonusTier.MEETS == "MEETS"

    def test_predicates(self) -> None:
        assert BonusTier.EXCEEDS.is_exceeds()
        assert BonusTier.MEETS.is_meets()
        assert BonusTier.BELOW.is_below()
        assert not BonusTier.BELOW.is_meets()


class TestEngineerLevel:
    """Tests for EngineerLevel parsing."""

    def test_from_string_normalises(self) -> None:
        assert EngineerLevel.from_string("  senior ") is EngineerLevel.SENIOR

    def test_unknown_level_lists_valid_levels(self) -> None:
        with pytest.raises(InvalidEngineerLevelError, match="Valid levels: JUNIOR"):
            EngineerLevel.from_string("principal")

    def test_empty_level_rejected(self) -> None:
        with pytest.raises(InvalidEngineerLevelError, match="cannot be empty"):
            EngineerLevel.from_string("  ")

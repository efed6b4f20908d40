"""Unit tests for ReviewPolicyConfig."""

from __future__ import annotations

import pytest

from review_engine.config.review_policy_config import (
    DEFAULT_REVIEW_POLICY_CONFIG,
    ReviewPolicyConfig,
)


class TestReviewPolicyConfig:
    def test_defaults(self) -> None:
        config = DEFAULT_REVIEW_POLICY_CONFIG
        assert config.min_peer_nominations == 3
        assert config.max_peer_nominations == 5
        assert config.peer_feedback_complete_threshold == 3
        assert config.min_rejection_reason_length == 1
        assert config.min_calibration_justification_length == 20

    @pytest.mark.parametrize(
        ("count", "accepted"), [(2, False), (3, True), (5, True), (6, False)]
    )
    def test_accepts_nomination_count(self, count: int, accepted: bool) -> None:
        assert DEFAULT_REVIEW_POLICY_CONFIG.accepts_nomination_count(count) is accepted

    def test_min_above_max_rejected(self) -> None:
        with pytest.raises(ValueError, match="max_peer_nominations"):
            ReviewPolicyConfig(min_peer_nominations=4, max_peer_nominations=3)

    def test_non_positive_minimum_rejected(self) -> None:
        with pytest.raises(ValueError, match="min_peer_nominations"):
            ReviewPolicyConfig(min_peer_nominations=0)

    def test_negative_threshold_rejected(self) -> None:
        with pytest.raises(ValueError, match="peer_feedback_complete_threshold"):
            ReviewPolicyConfig(peer_feedback_complete_threshold=-1)

    def test_zero_justification_length_rejected(self) -> None:
        with pytest.raises(ValueError, match="min_calibration_justification_length"):
            ReviewPolicyConfig(min_calibration_justification_length=0)


class TestFromEnvironment:
    def test_reads_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("REVIEW_MIN_PEER_NOMINATIONS", "2")
        monkeypatch.setenv("REVIEW_MAX_PEER_NOMINATIONS", "8")
        monkeypatch.setenv("REVIEW_PEER_FEEDBACK_COMPLETE_THRESHOLD", "4")
        monkeypatch.setenv("REVIEW_MIN_CALIBRATION_JUSTIFICATION_LENGTH", "40")

        config = ReviewPolicyConfig.from_environment()

        assert config.min_peer_nominations == 2
        assert config.max_peer_nominations == 8
        assert config.peer_feedback_complete_threshold == 4
        assert config.min_calibration_justification_length == 40

    def test_unparseable_values_fall_back(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("REVIEW_MAX_PEER_NOMINATIONS", "five")
        monkeypatch.delenv("REVIEW_MIN_PEER_NOMINATIONS", raising=False)

        config = ReviewPolicyConfig.from_environment()

        assert config.max_peer_nominations == 5
        assert config.min_peer_nominations == 3

"""Review policy configuration.

Tunable bounds for the review workflow, with environment variable
overrides for deployments that run a different nomination policy.

Environment Variables:
- REVIEW_MIN_PEER_NOMINATIONS: Fewest peers a nominator may pick (default: 3)
- REVIEW_MAX_PEER_NOMINATIONS: Most peers a nominator may pick (default: 5)
- REVIEW_PEER_FEEDBACK_COMPLETE_THRESHOLD: Feedback count at which peer
  feedback is reported COMPLETE (default: 3)
- REVIEW_MIN_REJECTION_REASON_LENGTH: Shortest accepted rejection reason
  for score adjustment requests (default: 1)
- REVIEW_MIN_CALIBRATION_JUSTIFICATION_LENGTH: Shortest accepted
  justification for a calibration adjustment (default: 20)
"""

from __future__ import annotations

import os
from dataclasses import dataclass


def _get_int_env(key: str, default: int) -> int:
    """Get integer environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed integer value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


@dataclass(frozen=True)
class ReviewPolicyConfig:
    """Configuration for review workflow rules.

    Attributes:
        min_peer_nominations: Lower bound on nominees per request.
        max_peer_nominations: Upper bound on nominees per request.
        peer_feedback_complete_threshold: Peer feedback count reported
            as COMPLETE in team views.
        min_rejection_reason_length: Minimum stripped length of a
            rejection reason.
        min_calibration_justification_length: Minimum stripped length of
            a calibration adjustment justification.
    """

    min_peer_nominations: int = 3
    max_peer_nominations: int = 5
    peer_feedback_complete_threshold: int = 3
    min_rejection_reason_length: int = 1
    min_calibration_justification_length: int = 20

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.min_peer_nominations < 1:
            raise ValueError(
                "min_peer_nominations must be positive, "
                f"got {self.min_peer_nominations}"
            )
        if self.max_peer_nominations < self.min_peer_nominations:
            raise ValueError(
                f"max_peer_nominations ({self.max_peer_nominations}) must be >= "
                f"min_peer_nominations ({self.min_peer_nominations})"
            )
        if self.peer_feedback_complete_threshold < 0:
            raise ValueError(
                "peer_feedback_complete_threshold must be non-negative, "
                f"got {self.peer_feedback_complete_threshold}"
            )
        if self.min_rejection_reason_length < 1:
            raise ValueError(
                "min_rejection_reason_length must be positive, "
                f"got {self.min_rejection_reason_length}"
            )
        if self.min_calibration_justification_length < 1:
            raise ValueError(
                "min_calibration_justification_length must be positive, "
                f"got {self.min_calibration_justification_length}"
            )

    @classmethod
    def from_environment(cls) -> ReviewPolicyConfig:
        """Create config from environment variables with defaults."""
        return cls(
            min_peer_nominations=_get_int_env("REVIEW_MIN_PEER_NOMINATIONS", 3),
            max_peer_nominations=_get_int_env("REVIEW_MAX_PEER_NOMINATIONS", 5),
            peer_feedback_complete_threshold=_get_int_env(
                "REVIEW_PEER_FEEDBACK_COMPLETE_THRESHOLD", 3
            ),
            min_rejection_reason_length=_get_int_env(
                "REVIEW_MIN_REJECTION_REASON_LENGTH", 1
            ),
            min_calibration_justification_length=_get_int_env(
                "REVIEW_MIN_CALIBRATION_JUSTIFICATION_LENGTH", 20
            ),
        )

    def accepts_nomination_count(self, count: int) -> bool:
        return self.min_peer_nominations <= count <= self.max_peer_nominations


DEFAULT_REVIEW_POLICY_CONFIG = ReviewPolicyConfig()
"""Default policy: 3-5 nominees, peer feedback complete at 3."""

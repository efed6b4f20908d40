"""Configuration for the review engine."""

from review_engine.config.review_policy_config import (
    DEFAULT_REVIEW_POLICY_CONFIG,
    ReviewPolicyConfig,
)

__all__: list[str] = ["DEFAULT_REVIEW_POLICY_CONFIG", "ReviewPolicyConfig"]

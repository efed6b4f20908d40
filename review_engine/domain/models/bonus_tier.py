"""Bonus tier classification.

Tiers are derived from the percentage of the maximum weighted score:

- EXCEEDS: percentage >= 85
- MEETS:   50 <= percentage < 85
- BELOW:   percentage < 50 (negative percentages included)
"""

from __future__ import annotations

from enum import Enum

EXCEEDS_THRESHOLD: float = 85.0
"""Minimum percentage for the EXCEEDS tier."""

MEETS_THRESHOLD: float = 50.0
"""Minimum percentage for the MEETS tier."""


class BonusTier(str, Enum):
    """Bonus tier derived from a percentage score.

    Members compare by value, so a tier rebuilt from its string form
    (e.g. when loaded from storage) equals the original member.
    """

    EXCEEDS = "EXCEEDS"
    MEETS = "MEETS"
    BELOW = "BELOW"

    @classmethod
    def from_percentage(cls, percentage: float) -> BonusTier:
        """Classify a percentage score into a tier.

        Args:
            percentage: Score as a percentage of the maximum (normally 0-100).

        Returns:
            The matching BonusTier.
        """
        if percentage >= EXCEEDS_THRESHOLD:
            return cls.EXCEEDS
        if percentage >= MEETS_THRESHOLD:
            return cls.MEETS
        return cls.BELOW

    def is_exceeds(self) -> bool:
        return self is BonusTier.EXCEEDS

    def is_meets(self) -> bool:
        return self is BonusTier.MEETS

    def is_below(self) -> bool:
        return self is BonusTier.BELOW

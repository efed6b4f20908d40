"""Test helpers for review engine tests."""

from tests.helpers.factories import (
    BASE_TIME,
    make_cycle,
    make_deadlines,
    make_final_score,
    make_pillars,
    make_user,
)
from tests.helpers.fake_time_authority import FakeTimeAuthority

__all__ = [
    "BASE_TIME",
    "FakeTimeAuthority",
    "make_cycle",
    "make_deadlines",
    "make_final_score",
    "make_pillars",
    "make_user",
]

"""FakeTimeAuthority - controllable clock for deadline tests.

Usage:
    >>> clock = FakeTimeAuthority(frozen_at=BASE_TIME)
    >>> service = SelfReviewService(repo, cycle_repo, time_authority=clock)
    >>> clock.advance(timedelta(weeks=2))  # past the self-review deadline
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from review_engine.application.ports.time_authority import TimeAuthorityProtocol

DEFAULT_FROZEN_AT = datetime(2026, 1, 5, 9, 0, tzinfo=timezone.utc)


class FakeTimeAuthority(TimeAuthorityProtocol):
    """Clock that only moves when told to."""

    def __init__(self, frozen_at: datetime | None = None) -> None:
        """Initialize the fake clock.

        Args:
            frozen_at: Time to freeze at. Naive values are taken as UTC.
        """
        frozen_at = frozen_at or DEFAULT_FROZEN_AT
        if frozen_at.tzinfo is None:
            frozen_at = frozen_at.replace(tzinfo=timezone.utc)
        self._current_time = frozen_at

    def now(self) -> datetime:
        return self._current_time

    def advance(self, delta: timedelta) -> None:
        if delta < timedelta(0):
            raise ValueError("Cannot advance time backwards; use set_time()")
        self._current_time += delta

    def set_time(self, when: datetime) -> None:
        self._current_time = when

"""
Pytest configuration and shared fixtures for review engine tests.

Testing Standards:
- All async tests use pytest.mark.asyncio (auto mode enabled in pyproject.toml)
- Use AsyncMock for async repository mocking
- Unit tests go in tests/unit/
- Integration tests go in tests/integration/
"""

from __future__ import annotations

import pytest

from review_engine.domain.models.cycle_deadlines import CycleDeadlines
from review_engine.domain.models.review_cycle import ReviewCycle
from tests.helpers import BASE_TIME, FakeTimeAuthority, make_cycle, make_deadlines


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from review_engine import __version__

    return __version__


@pytest.fixture
def deadlines() -> CycleDeadlines:
    return make_deadlines()


@pytest.fixture
def draft_cycle() -> ReviewCycle:
    return make_cycle()


@pytest.fixture
def active_cycle() -> ReviewCycle:
    cycle = make_cycle()
    cycle.start()
    return cycle


@pytest.fixture
def fake_time_authority() -> FakeTimeAuthority:
    """Clock frozen at BASE_TIME, before every deadline of make_deadlines()."""
    return FakeTimeAuthority(frozen_at=BASE_TIME)

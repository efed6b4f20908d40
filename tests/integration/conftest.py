"""
Integration test configuration.

Services are wired through the bootstrap composition root against the
in-memory stubs. Dependency singletons are reset around every test.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from review_engine.bootstrap import review_services
from review_engine.config.review_policy_config import ReviewPolicyConfig
from review_engine.infrastructure.stubs import (
    FinalScoreRepositoryStub,
    UserDirectoryStub,
)


@pytest.fixture(autouse=True)
def fresh_dependencies() -> Iterator[None]:
    review_services.reset_review_dependencies()
    review_services.set_review_policy_config(ReviewPolicyConfig())
    yield
    review_services.reset_review_dependencies()


@pytest.fixture
def directory() -> UserDirectoryStub:
    stub = UserDirectoryStub()
    review_services.set_user_directory(stub)
    return stub


@pytest.fixture
def final_scores() -> FinalScoreRepositoryStub:
    stub = FinalScoreRepositoryStub()
    review_services.set_final_score_repository(stub)
    return stub

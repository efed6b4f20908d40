"""Unit tests for ReviewCycleService."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from review_engine.application.services.review_cycle_service import ReviewCycleService
from review_engine.domain.errors import (
    AnotherCycleActiveError,
    InvalidDeadlineOrderError,
    InvalidReviewCycleStateError,
    ReviewNotFoundError,
)
from review_engine.domain.models.identifiers import ReviewCycleId
from review_engine.domain.models.review_cycle import CycleStatus, ReviewCycle
from tests.helpers import make_cycle, make_deadlines


@pytest.fixture
def cycle_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.find_by_id = AsyncMock(return_value=None)
    repo.find_active = AsyncMock(return_value=None)
    repo.find_by_year = AsyncMock(return_value=[])
    repo.save = AsyncMock(side_effect=lambda cycle: cycle)
    return repo


@pytest.fixture
def service(cycle_repo: AsyncMock) -> ReviewCycleService:
    return ReviewCycleService(cycle_repo=cycle_repo)


class TestCreateCycle:
    @pytest.mark.asyncio
    async def test_creates_draft_cycle(
        self, service: ReviewCycleService, cycle_repo: AsyncMock
    ) -> None:
        result = await service.create_cycle("2026 Annual", 2026, make_deadlines())

        assert result.status == "DRAFT"
        assert result.end_date is None
        assert set(result.deadlines) == {
            "self_review",
            "peer_feedback",
            "manager_evaluation",
            "calibration",
            "feedback_delivery",
        }
        cycle_repo.save.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_accepts_deadline_mapping(self, service: ReviewCycleService) -> None:
        result = await service.create_cycle(
            "2026 Annual", 2026, make_deadlines().to_dict()
        )
        assert result.year == 2026

    @pytest.mark.asyncio
    async def test_invalid_deadlines_not_saved(
        self, service: ReviewCycleService, cycle_repo: AsyncMock
    ) -> None:
        deadlines = make_deadlines().to_dict()
        deadlines["calibration"] = deadlines["self_review"]

        with pytest.raises(InvalidDeadlineOrderError):
            await service.create_cycle("2026 Annual", 2026, deadlines)
        cycle_repo.save.assert_not_awaited()


class TestStartCycle:
    @pytest.mark.asyncio
    async def test_missing_cycle(
        self, service: ReviewCycleService, cycle_repo: AsyncMock
    ) -> None:
        cycle_id = ReviewCycleId.generate()

        with pytest.raises(
            ReviewNotFoundError, match=f"Review cycle with ID {cycle_id} not found"
        ):
            await service.start_cycle(cycle_id)
        cycle_repo.find_active.assert_not_awaited()
        cycle_repo.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_starts_draft_cycle(
        self,
        service: ReviewCycleService,
        cycle_repo: AsyncMock,
        draft_cycle: ReviewCycle,
    ) -> None:
        cycle_repo.find_by_id.return_value = draft_cycle

        result = await service.start_cycle(draft_cycle.id)

        assert result.status == "ACTIVE"
        assert result.id == draft_cycle.id.value
        assert result.started_at == draft_cycle.start_date
        cycle_repo.save.assert_awaited_once_with(draft_cycle)

    @pytest.mark.asyncio
    async def test_rejects_when_another_cycle_active(
        self,
        service: ReviewCycleService,
        cycle_repo: AsyncMock,
        draft_cycle: ReviewCycle,
        active_cycle: ReviewCycle,
    ) -> None:
        cycle_repo.find_by_id.return_value = draft_cycle
        cycle_repo.find_active.return_value = active_cycle

        with pytest.raises(
            AnotherCycleActiveError,
            match="Another review cycle is already active. Please complete it first.",
        ):
            await service.start_cycle(draft_cycle.id)

        assert draft_cycle.status is CycleStatus.DRAFT
        cycle_repo.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_restarting_active_cycle_fails_on_state(
        self,
        service: ReviewCycleService,
        cycle_repo: AsyncMock,
        active_cycle: ReviewCycle,
    ) -> None:
        cycle_repo.find_by_id.return_value = active_cycle
        cycle_repo.find_active.return_value = active_cycle

        with pytest.raises(InvalidReviewCycleStateError, match="Must be DRAFT"):
            await service.start_cycle(active_cycle.id)
        cycle_repo.save.assert_not_awaited()


class TestLaterTransitions:
    @pytest.mark.asyncio
    async def test_enter_calibration_then_complete(
        self,
        service: ReviewCycleService,
        cycle_repo: AsyncMock,
        active_cycle: ReviewCycle,
    ) -> None:
        cycle_repo.find_by_id.return_value = active_cycle

        calibrating = await service.enter_calibration(active_cycle.id)
        completed = await service.complete_cycle(active_cycle.id)

        assert calibrating.status == "CALIBRATION"
        assert completed.status == "COMPLETED"
        assert completed.end_date is not None
        assert cycle_repo.save.await_count == 2

    @pytest.mark.asyncio
    async def test_complete_from_active_fails(
        self,
        service: ReviewCycleService,
        cycle_repo: AsyncMock,
        active_cycle: ReviewCycle,
    ) -> None:
        cycle_repo.find_by_id.return_value = active_cycle

        with pytest.raises(InvalidReviewCycleStateError):
            await service.complete_cycle(active_cycle.id)
        cycle_repo.save.assert_not_awaited()


class TestReads:
    @pytest.mark.asyncio
    async def test_get_active_cycle_none(self, service: ReviewCycleService) -> None:
        assert await service.get_active_cycle() is None

    @pytest.mark.asyncio
    async def test_get_cycle_missing(self, service: ReviewCycleService) -> None:
        with pytest.raises(ReviewNotFoundError):
            await service.get_cycle(ReviewCycleId.generate())

    @pytest.mark.asyncio
    async def test_list_cycles_for_year(
        self, service: ReviewCycleService, cycle_repo: AsyncMock
    ) -> None:
        cycle_repo.find_by_year.return_value = [make_cycle("H1"), make_cycle("H2")]

        result = await service.list_cycles_for_year(2026)

        assert [c.name for c in result] == ["H1", "H2"]
        cycle_repo.find_by_year.assert_awaited_once_with(2026)

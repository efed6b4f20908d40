"""Unit tests for FinalScoreService."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from review_engine.application.services.final_score_service import FinalScoreService
from review_engine.domain.errors import (
    FinalScoreLockedError,
    NotDirectReportError,
    ReviewNotFoundError,
)
from review_engine.domain.models.bonus_tier import BonusTier
from review_engine.domain.models.final_score import FinalScore
from review_engine.domain.models.identifiers import UserId
from review_engine.domain.models.review_cycle import ReviewCycle
from review_engine.domain.models.user import DirectoryUser
from tests.helpers import make_final_score, make_pillars, make_user


@pytest.fixture
def manager_id() -> UserId:
    return UserId.generate()


@pytest.fixture
def employee(manager_id: UserId) -> DirectoryUser:
    return make_user("Eli", manager_id=manager_id, level=None)


@pytest.fixture
def score(active_cycle: ReviewCycle, employee: DirectoryUser) -> FinalScore:
    return make_final_score(active_cycle.id, employee.id, weighted=3.2)


@pytest.fixture
def cycle_repo(active_cycle: ReviewCycle) -> AsyncMock:
    repo = AsyncMock()
    repo.find_by_id = AsyncMock(return_value=active_cycle)
    return repo


@pytest.fixture
def final_score_repo(score: FinalScore) -> AsyncMock:
    repo = AsyncMock()
    repo.find_by_user_and_cycle = AsyncMock(return_value=score)
    repo.find_by_bonus_tier = AsyncMock(return_value=[score])
    repo.save = AsyncMock(side_effect=lambda s: s)
    return repo


@pytest.fixture
def user_directory(employee: DirectoryUser) -> AsyncMock:
    directory = AsyncMock()
    directory.find_by_id = AsyncMock(return_value=employee)
    return directory


@pytest.fixture
def service(
    final_score_repo: AsyncMock, cycle_repo: AsyncMock, user_directory: AsyncMock
) -> FinalScoreService:
    return FinalScoreService(
        final_score_repo=final_score_repo,
        cycle_repo=cycle_repo,
        user_directory=user_directory,
    )


class TestGetFinalScore:
    @pytest.mark.asyncio
    async def test_returns_detail(
        self,
        service: FinalScoreService,
        active_cycle: ReviewCycle,
        employee: DirectoryUser,
    ) -> None:
        detail = await service.get_final_score(employee.id, active_cycle.id)

        assert detail is not None
        assert detail.percentage_score == pytest.approx(80.0)
        assert detail.bonus_tier is BonusTier.MEETS
        assert detail.final_scores.project_impact == 3
        assert detail.final_level == "SENIOR"

    @pytest.mark.asyncio
    async def test_returns_none_when_absent(
        self,
        service: FinalScoreService,
        final_score_repo: AsyncMock,
        active_cycle: ReviewCycle,
    ) -> None:
        final_score_repo.find_by_user_and_cycle.return_value = None
        assert await service.get_final_score(UserId.generate(), active_cycle.id) is None


class TestGetMyFinalScore:
    @pytest.mark.asyncio
    async def test_without_peer_summary(
        self,
        service: FinalScoreService,
        active_cycle: ReviewCycle,
        employee: DirectoryUser,
    ) -> None:
        result = await service.get_my_final_score(active_cycle.id, employee.id)

        assert result.employee.level == "Unknown"
        assert result.cycle.name == active_cycle.name
        assert result.peer_feedback_summary is None
        assert result.bonus_tier is BonusTier.MEETS

    @pytest.mark.asyncio
    async def test_with_peer_summary(
        self,
        service: FinalScoreService,
        score: FinalScore,
        active_cycle: ReviewCycle,
        employee: DirectoryUser,
    ) -> None:
        score.peer_average_scores = make_pillars(2)
        score.peer_feedback_count = 4

        result = await service.get_my_final_score(active_cycle.id, employee.id)

        assert result.peer_feedback_summary is not None
        assert result.peer_feedback_summary.count == 4
        assert result.peer_feedback_summary.average_scores.direction == 2

    @pytest.mark.asyncio
    async def test_averages_without_count_are_omitted(
        self,
        service: FinalScoreService,
        score: FinalScore,
        active_cycle: ReviewCycle,
        employee: DirectoryUser,
    ) -> None:
        score.peer_average_scores = make_pillars(2)

        result = await service.get_my_final_score(active_cycle.id, employee.id)

        assert result.peer_feedback_summary is None

    @pytest.mark.asyncio
    async def test_missing_user(
        self,
        service: FinalScoreService,
        user_directory: AsyncMock,
        active_cycle: ReviewCycle,
    ) -> None:
        user_directory.find_by_id.return_value = None

        with pytest.raises(ReviewNotFoundError, match="User not found"):
            await service.get_my_final_score(active_cycle.id, UserId.generate())

    @pytest.mark.asyncio
    async def test_missing_score(
        self,
        service: FinalScoreService,
        final_score_repo: AsyncMock,
        active_cycle: ReviewCycle,
        employee: DirectoryUser,
    ) -> None:
        final_score_repo.find_by_user_and_cycle.return_value = None

        with pytest.raises(
            ReviewNotFoundError, match="Final score not found for this user and cycle"
        ):
            await service.get_my_final_score(active_cycle.id, employee.id)


class TestCorrection:
    @pytest.mark.asyncio
    async def test_correct_locked_score_fails_without_saving(
        self,
        service: FinalScoreService,
        final_score_repo: AsyncMock,
        score: FinalScore,
        active_cycle: ReviewCycle,
        employee: DirectoryUser,
    ) -> None:
        score.lock()

        with pytest.raises(FinalScoreLockedError):
            await service.correct_final_score(
                employee.id, active_cycle.id, make_pillars(4), 3.5
            )
        final_score_repo.save.assert_not_awaited()
        assert score.percentage_score == pytest.approx(80.0)

    @pytest.mark.asyncio
    async def test_unlock_correct_relock(
        self,
        service: FinalScoreService,
        final_score_repo: AsyncMock,
        score: FinalScore,
        active_cycle: ReviewCycle,
        employee: DirectoryUser,
    ) -> None:
        score.lock()

        unlocked = await service.unlock_final_score(employee.id, active_cycle.id)
        corrected = await service.correct_final_score(
            employee.id, active_cycle.id, make_pillars(4).to_dict(), 3.5
        )
        relocked = await service.relock_final_score(employee.id, active_cycle.id)

        assert not unlocked.is_locked
        assert corrected.percentage_score == pytest.approx(87.5)
        assert corrected.bonus_tier is BonusTier.EXCEEDS
        assert relocked.is_locked
        assert final_score_repo.save.await_count == 3

    @pytest.mark.asyncio
    async def test_unlock_missing_score(
        self,
        service: FinalScoreService,
        final_score_repo: AsyncMock,
        active_cycle: ReviewCycle,
    ) -> None:
        final_score_repo.find_by_user_and_cycle.return_value = None

        with pytest.raises(ReviewNotFoundError, match="Final score not found"):
            await service.unlock_final_score(UserId.generate(), active_cycle.id)


class TestMarkFeedbackDelivered:
    @pytest.mark.asyncio
    async def test_marks_and_saves(
        self,
        service: FinalScoreService,
        final_score_repo: AsyncMock,
        score: FinalScore,
        active_cycle: ReviewCycle,
        employee: DirectoryUser,
        manager_id: UserId,
    ) -> None:
        result = await service.mark_feedback_delivered(
            active_cycle.id, employee.id, manager_id, "Discussed growth areas"
        )

        assert result.feedback_delivered
        assert result.delivered_by == manager_id.value
        assert score.feedback_notes == "Discussed growth areas"
        final_score_repo.save.assert_awaited_once_with(score)

    @pytest.mark.asyncio
    async def test_not_direct_report_checked_before_score_lookup(
        self,
        service: FinalScoreService,
        final_score_repo: AsyncMock,
        active_cycle: ReviewCycle,
        employee: DirectoryUser,
    ) -> None:
        with pytest.raises(
            NotDirectReportError,
            match="You can only mark feedback delivered for your direct reports",
        ):
            await service.mark_feedback_delivered(
                active_cycle.id, employee.id, UserId.generate()
            )
        final_score_repo.find_by_user_and_cycle.assert_not_awaited()
        final_score_repo.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_employee(
        self,
        service: FinalScoreService,
        user_directory: AsyncMock,
        active_cycle: ReviewCycle,
        manager_id: UserId,
    ) -> None:
        user_directory.find_by_id.return_value = None

        with pytest.raises(ReviewNotFoundError, match="Employee not found"):
            await service.mark_feedback_delivered(
                active_cycle.id, UserId.generate(), manager_id
            )

    @pytest.mark.asyncio
    async def test_missing_score(
        self,
        service: FinalScoreService,
        final_score_repo: AsyncMock,
        active_cycle: ReviewCycle,
        employee: DirectoryUser,
        manager_id: UserId,
    ) -> None:
        final_score_repo.find_by_user_and_cycle.return_value = None

        with pytest.raises(ReviewNotFoundError, match="Final score not found"):
            await service.mark_feedback_delivered(
                active_cycle.id, employee.id, manager_id
            )
        final_score_repo.save.assert_not_awaited()


class TestListByBonusTier:
    @pytest.mark.asyncio
    async def test_delegates_to_repository(
        self,
        service: FinalScoreService,
        final_score_repo: AsyncMock,
        active_cycle: ReviewCycle,
    ) -> None:
        result = await service.list_by_bonus_tier(active_cycle.id, BonusTier.MEETS)

        assert len(result) == 1
        final_score_repo.find_by_bonus_tier.assert_awaited_once_with(
            active_cycle.id, BonusTier.MEETS
        )

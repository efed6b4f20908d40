"""Unit tests for ManagerEvaluationService.

Covers the shared write chain (cycle, deadline, employee, reporting
line) and the DRAFT -> SUBMITTED transition.
"""

from __future__ import annotations

from datetime import timedelta
from unittest.mock import AsyncMock

import pytest

from review_engine.application.services.manager_evaluation_service import (
    ManagerEvaluationService,
)
from review_engine.domain.errors import (
    DeadlinePassedError,
    InvalidEngineerLevelError,
    NotDirectReportError,
    ReviewAlreadySubmittedError,
    ReviewNotFoundError,
)
from review_engine.domain.models.cycle_deadlines import ReviewPhase
from review_engine.domain.models.review_cycle import ReviewCycle
from review_engine.domain.models.review_records import ManagerEvaluation, ReviewStatus
from review_engine.domain.models.user import DirectoryUser
from tests.helpers import FakeTimeAuthority, make_pillars, make_user


@pytest.fixture
def manager() -> DirectoryUser:
    return make_user("Morgan", level="MANAGER")


@pytest.fixture
def employee(manager: DirectoryUser) -> DirectoryUser:
    return make_user("Riley", manager_id=manager.id)


@pytest.fixture
def cycle_repo(active_cycle: ReviewCycle) -> AsyncMock:
    repo = AsyncMock()
    repo.find_by_id = AsyncMock(return_value=active_cycle)
    return repo


@pytest.fixture
def user_directory(employee: DirectoryUser) -> AsyncMock:
    directory = AsyncMock()
    directory.find_by_id = AsyncMock(return_value=employee)
    return directory


@pytest.fixture
def evaluation_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.find_by_employee_and_cycle = AsyncMock(return_value=None)
    repo.save = AsyncMock(side_effect=lambda evaluation: evaluation)
    return repo


@pytest.fixture
def service(
    evaluation_repo: AsyncMock,
    cycle_repo: AsyncMock,
    user_directory: AsyncMock,
    fake_time_authority: FakeTimeAuthority,
) -> ManagerEvaluationService:
    return ManagerEvaluationService(
        evaluation_repo=evaluation_repo,
        cycle_repo=cycle_repo,
        user_directory=user_directory,
        time_authority=fake_time_authority,
    )


@pytest.fixture
def existing_draft(
    active_cycle: ReviewCycle,
    manager: DirectoryUser,
    employee: DirectoryUser,
    evaluation_repo: AsyncMock,
) -> ManagerEvaluation:
    evaluation = ManagerEvaluation.create(
        cycle_id=active_cycle.id,
        employee_id=employee.id,
        manager_id=manager.id,
        scores=make_pillars(2),
    )
    evaluation_repo.find_by_employee_and_cycle.return_value = evaluation
    return evaluation


class TestSubmitManagerEvaluation:
    @pytest.mark.asyncio
    async def test_creates_and_submits(
        self,
        service: ManagerEvaluationService,
        evaluation_repo: AsyncMock,
        active_cycle: ReviewCycle,
        manager: DirectoryUser,
        employee: DirectoryUser,
    ) -> None:
        result = await service.submit_manager_evaluation(
            active_cycle.id,
            manager.id,
            employee.id,
            scores=make_pillars(3).to_dict(),
            narrative="Consistently strong delivery",
            proposed_level=" lead ",
        )

        assert result.status == "SUBMITTED"
        assert result.submitted_at is not None
        assert result.proposed_level == "LEAD"
        assert result.narrative == "Consistently strong delivery"
        assert result.scores.engineering_excellence == 3
        evaluation_repo.save.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_submits_existing_draft_in_place(
        self,
        service: ManagerEvaluationService,
        active_cycle: ReviewCycle,
        manager: DirectoryUser,
        employee: DirectoryUser,
        existing_draft: ManagerEvaluation,
    ) -> None:
        result = await service.submit_manager_evaluation(
            active_cycle.id, manager.id, employee.id, scores=make_pillars(4)
        )

        assert result.id == existing_draft.id
        assert existing_draft.status is ReviewStatus.SUBMITTED

    @pytest.mark.asyncio
    async def test_deadline_passed(
        self,
        service: ManagerEvaluationService,
        user_directory: AsyncMock,
        evaluation_repo: AsyncMock,
        fake_time_authority: FakeTimeAuthority,
        active_cycle: ReviewCycle,
        manager: DirectoryUser,
        employee: DirectoryUser,
    ) -> None:
        fake_time_authority.set_time(
            active_cycle.deadlines.manager_evaluation + timedelta(seconds=1)
        )

        with pytest.raises(
            DeadlinePassedError, match="Manager evaluation deadline has passed"
        ) as exc_info:
            await service.submit_manager_evaluation(
                active_cycle.id, manager.id, employee.id, scores=make_pillars(3)
            )

        assert exc_info.value.phase is ReviewPhase.MANAGER_EVALUATION
        user_directory.find_by_id.assert_not_awaited()
        evaluation_repo.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_employee_not_found(
        self,
        service: ManagerEvaluationService,
        user_directory: AsyncMock,
        evaluation_repo: AsyncMock,
        active_cycle: ReviewCycle,
        manager: DirectoryUser,
        employee: DirectoryUser,
    ) -> None:
        user_directory.find_by_id.return_value = None

        with pytest.raises(ReviewNotFoundError, match="Employee not found"):
            await service.submit_manager_evaluation(
                active_cycle.id, manager.id, employee.id, scores=make_pillars(3)
            )
        evaluation_repo.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_not_direct_report(
        self,
        service: ManagerEvaluationService,
        evaluation_repo: AsyncMock,
        active_cycle: ReviewCycle,
        employee: DirectoryUser,
    ) -> None:
        stranger = make_user("Quinn", level="MANAGER")

        with pytest.raises(
            NotDirectReportError,
            match="You can only submit evaluations for your direct reports",
        ):
            await service.submit_manager_evaluation(
                active_cycle.id, stranger.id, employee.id, scores=make_pillars(3)
            )
        evaluation_repo.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_already_submitted(
        self,
        service: ManagerEvaluationService,
        evaluation_repo: AsyncMock,
        active_cycle: ReviewCycle,
        manager: DirectoryUser,
        employee: DirectoryUser,
        existing_draft: ManagerEvaluation,
    ) -> None:
        existing_draft.submit()

        with pytest.raises(ReviewAlreadySubmittedError):
            await service.submit_manager_evaluation(
                active_cycle.id, manager.id, employee.id, scores=make_pillars(3)
            )
        evaluation_repo.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_level_leaves_draft_unchanged(
        self,
        service: ManagerEvaluationService,
        evaluation_repo: AsyncMock,
        active_cycle: ReviewCycle,
        manager: DirectoryUser,
        employee: DirectoryUser,
        existing_draft: ManagerEvaluation,
    ) -> None:
        with pytest.raises(InvalidEngineerLevelError):
            await service.submit_manager_evaluation(
                active_cycle.id,
                manager.id,
                employee.id,
                scores=make_pillars(4),
                proposed_level="PRINCIPAL",
            )

        assert existing_draft.scores == make_pillars(2)
        assert existing_draft.status is ReviewStatus.DRAFT
        evaluation_repo.save.assert_not_awaited()


class TestUpdateManagerEvaluation:
    @pytest.mark.asyncio
    async def test_saves_draft_changes(
        self,
        service: ManagerEvaluationService,
        active_cycle: ReviewCycle,
        manager: DirectoryUser,
        employee: DirectoryUser,
        existing_draft: ManagerEvaluation,
    ) -> None:
        result = await service.update_manager_evaluation(
            active_cycle.id,
            manager.id,
            employee.id,
            development_plan="Lead the Q3 platform migration",
        )

        assert result.status == "DRAFT"
        assert result.development_plan == "Lead the Q3 platform migration"
        assert result.scores.people_impact == 2

    @pytest.mark.asyncio
    async def test_starts_draft_when_absent(
        self,
        service: ManagerEvaluationService,
        evaluation_repo: AsyncMock,
        active_cycle: ReviewCycle,
        manager: DirectoryUser,
        employee: DirectoryUser,
    ) -> None:
        result = await service.update_manager_evaluation(
            active_cycle.id, manager.id, employee.id, strengths="Calm under pressure"
        )

        assert result.status == "DRAFT"
        assert result.scores.project_impact == 0
        evaluation_repo.save.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_deadline_passed(
        self,
        service: ManagerEvaluationService,
        evaluation_repo: AsyncMock,
        fake_time_authority: FakeTimeAuthority,
        active_cycle: ReviewCycle,
        manager: DirectoryUser,
        employee: DirectoryUser,
        existing_draft: ManagerEvaluation,
    ) -> None:
        fake_time_authority.advance(timedelta(weeks=3, hours=1))

        with pytest.raises(
            DeadlinePassedError, match="Manager evaluation deadline has passed"
        ):
            await service.update_manager_evaluation(
                active_cycle.id, manager.id, employee.id, narrative="Late edit"
            )

        assert existing_draft.narrative == ""
        evaluation_repo.save.assert_not_awaited()

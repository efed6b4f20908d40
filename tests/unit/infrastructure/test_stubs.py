"""Unit tests for the in-memory repository stubs."""

from __future__ import annotations

from datetime import datetime, timezone
from uuid import uuid4

import pytest

from review_engine.domain.models.bonus_tier import BonusTier
from review_engine.domain.models.identifiers import ReviewCycleId, UserId
from review_engine.domain.models.peer_nomination import PeerNomination
from review_engine.domain.models.review_records import (
    ManagerEvaluation,
    PeerFeedback,
    SelfReview,
)
from review_engine.domain.models.score_adjustment import ScoreAdjustmentRequest
from review_engine.infrastructure.stubs import (
    FinalScoreRepositoryStub,
    ManagerEvaluationRepositoryStub,
    PeerFeedbackRepositoryStub,
    PeerNominationRepositoryStub,
    ReviewCycleRepositoryStub,
    ScoreAdjustmentRepositoryStub,
    SelfReviewRepositoryStub,
    UserDirectoryStub,
)
from tests.helpers import (
    BASE_TIME,
    make_cycle,
    make_final_score,
    make_pillars,
    make_user,
)


class TestReviewCycleRepositoryStub:
    @pytest.mark.asyncio
    async def test_find_active_and_by_year(self) -> None:
        stub = ReviewCycleRepositoryStub()
        draft = make_cycle("Draft")
        active = make_cycle("Active")
        active.start()
        older = make_cycle("2025", year=2025)
        stub.seed([draft, active, older])

        assert await stub.find_active() is active
        assert {c.name for c in await stub.find_by_year(2026)} == {"Draft", "Active"}
        assert stub.save_count == 0

    @pytest.mark.asyncio
    async def test_delete(self) -> None:
        stub = ReviewCycleRepositoryStub()
        cycle = await stub.save(make_cycle())

        await stub.delete(cycle.id)

        assert await stub.find_by_id(cycle.id) is None
        assert stub.save_count == 1


class TestFinalScoreRepositoryStub:
    @pytest.mark.asyncio
    async def test_unique_per_user_and_cycle(self) -> None:
        stub = FinalScoreRepositoryStub()
        cycle_id, user_id = ReviewCycleId.generate(), UserId.generate()
        first = make_final_score(cycle_id, user_id, weighted=2.0)
        replacement = make_final_score(cycle_id, user_id, weighted=3.6)

        await stub.save(first)
        await stub.save(replacement)

        assert await stub.find_by_user_and_cycle(user_id, cycle_id) is replacement
        assert len(await stub.find_by_cycle(cycle_id)) == 1

    @pytest.mark.asyncio
    async def test_find_by_bonus_tier(self) -> None:
        stub = FinalScoreRepositoryStub()
        cycle_id = ReviewCycleId.generate()
        stub.seed(
            [
                make_final_score(cycle_id, UserId.generate(), weighted=w)
                for w in (1.0, 2.5, 3.0, 3.8)
            ]
        )

        meets = await stub.find_by_bonus_tier(cycle_id, BonusTier.MEETS)
        exceeds = await stub.find_by_bonus_tier(cycle_id, BonusTier.EXCEEDS)

        assert len(meets) == 2
        assert len(exceeds) == 1
        other_cycle = ReviewCycleId.generate()
        assert await stub.find_by_bonus_tier(other_cycle, BonusTier.MEETS) == []


class TestUserDirectoryStub:
    @pytest.mark.asyncio
    async def test_direct_reports_in_insertion_order(self) -> None:
        directory = UserDirectoryStub()
        manager = make_user("Mo")
        directory.add_user(manager)
        for name in ("Zed", "Amy", "Kit"):
            directory.add_user(make_user(name, manager_id=manager.id))
        directory.add_user(make_user("Other", manager_id=UserId.generate()))

        reports = await directory.find_by_manager_id(manager.id)

        assert [u.name for u in reports] == ["Zed", "Amy", "Kit"]


class TestScoreAdjustmentRepositoryStub:
    @pytest.mark.asyncio
    async def test_saving_reviewed_copy_replaces_pending(self) -> None:
        stub = ScoreAdjustmentRepositoryStub()
        employee_id = UserId.generate()
        request = ScoreAdjustmentRequest(
            id=uuid4(),
            cycle_id=ReviewCycleId.generate(),
            employee_id=employee_id,
            requester_id=UserId.generate(),
            reason="Recalibrate",
            proposed_scores=make_pillars(4),
            requested_at=datetime.now(timezone.utc),
        )
        await stub.save(request)
        assert len(await stub.find_pending()) == 1

        await stub.save(request.approve(UserId.generate()))

        assert await stub.find_pending() == []
        assert len(await stub.find_by_employee(employee_id)) == 1


def _nomination(cycle_id: ReviewCycleId, nominator_id: UserId) -> PeerNomination:
    return PeerNomination(
        id=uuid4(),
        cycle_id=cycle_id,
        nominator_id=nominator_id,
        nominee_id=UserId.generate(),
        nominated_at=BASE_TIME,
    )


class TestPeerNominationRepositoryStub:
    @pytest.mark.asyncio
    async def test_seed_does_not_count_as_save(self) -> None:
        stub = PeerNominationRepositoryStub()
        cycle_id, nominator_id = ReviewCycleId.generate(), UserId.generate()
        stub.seed([_nomination(cycle_id, nominator_id) for _ in range(3)])

        found = await stub.find_by_nominator_and_cycle(nominator_id, cycle_id)

        assert len(found) == 3
        assert stub.save_count == 0

    @pytest.mark.asyncio
    async def test_save_counts_and_reset_clears(self) -> None:
        stub = PeerNominationRepositoryStub()
        cycle_id, nominator_id = ReviewCycleId.generate(), UserId.generate()
        for _ in range(2):
            await stub.save(_nomination(cycle_id, nominator_id))
        assert stub.save_count == 2
        assert len(stub.nominations) == 2

        stub.reset()

        assert stub.save_count == 0
        assert stub.nominations == []
        assert await stub.find_by_nominator_and_cycle(nominator_id, cycle_id) == []


class TestSelfReviewRepositoryStub:
    @pytest.mark.asyncio
    async def test_save_replaces_per_user_and_cycle(self) -> None:
        stub = SelfReviewRepositoryStub()
        cycle_id, user_id = ReviewCycleId.generate(), UserId.generate()
        first = SelfReview.create(cycle_id, user_id)
        second = SelfReview.create(cycle_id, user_id, scores=make_pillars(2))

        await stub.save(first)
        await stub.save(second)

        assert await stub.find_by_user_and_cycle(user_id, cycle_id) is second
        assert stub.save_count == 2

        stub.reset()
        assert await stub.find_by_user_and_cycle(user_id, cycle_id) is None


class TestPeerFeedbackRepositoryStub:
    @pytest.mark.asyncio
    async def test_lookup_by_reviewer_and_reviewee(self) -> None:
        stub = PeerFeedbackRepositoryStub()
        cycle_id = ReviewCycleId.generate()
        reviewer, reviewee = UserId.generate(), UserId.generate()
        stub.seed(
            [
                PeerFeedback(
                    id=uuid4(),
                    cycle_id=cycle_id,
                    reviewer_id=reviewer,
                    reviewee_id=UserId.generate(),
                    submitted_at=BASE_TIME,
                )
            ]
        )
        await stub.save(
            PeerFeedback(
                id=uuid4(),
                cycle_id=cycle_id,
                reviewer_id=reviewer,
                reviewee_id=reviewee,
                submitted_at=BASE_TIME,
            )
        )

        assert len(await stub.find_by_reviewer_and_cycle(reviewer, cycle_id)) == 2
        assert len(await stub.find_by_reviewee_and_cycle(reviewee, cycle_id)) == 1
        assert stub.save_count == 1


class TestManagerEvaluationRepositoryStub:
    @pytest.mark.asyncio
    async def test_new_evaluation_replaces_old_for_same_employee(self) -> None:
        stub = ManagerEvaluationRepositoryStub()
        cycle_id = ReviewCycleId.generate()
        employee_id, manager_id = UserId.generate(), UserId.generate()
        old = ManagerEvaluation.create(
            cycle_id, employee_id, manager_id, scores=make_pillars(1)
        )
        new = ManagerEvaluation.create(
            cycle_id, employee_id, manager_id, scores=make_pillars(3)
        )
        stub.seed([old])

        await stub.save(new)

        assert await stub.find_by_id(old.id) is None
        assert await stub.find_by_id(new.id) is new
        assert await stub.find_by_employee_and_cycle(employee_id, cycle_id) is new
        assert stub.save_count == 1

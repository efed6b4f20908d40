"""In-memory stores for self reviews, peer feedback and manager evaluations."""

from __future__ import annotations

from uuid import UUID

from review_engine.application.ports.review_record_repositories import (
    ManagerEvaluationRepositoryProtocol,
    PeerFeedbackRepositoryProtocol,
    SelfReviewRepositoryProtocol,
)
from review_engine.domain.models.identifiers import ReviewCycleId, UserId
from review_engine.domain.models.review_records import (
    ManagerEvaluation,
    PeerFeedback,
    SelfReview,
)


class SelfReviewRepositoryStub(SelfReviewRepositoryProtocol):
    """Self reviews keyed by (user, cycle)."""

    def __init__(self) -> None:
        self._reviews: dict[tuple[UserId, ReviewCycleId], SelfReview] = {}
        self.save_count = 0

    def seed(self, reviews: list[SelfReview]) -> None:
        for review in reviews:
            self._reviews[(review.user_id, review.cycle_id)] = review

    def reset(self) -> None:
        self._reviews.clear()
        self.save_count = 0

    async def find_by_user_and_cycle(
        self, user_id: UserId, cycle_id: ReviewCycleId
    ) -> SelfReview | None:
        return self._reviews.get((user_id, cycle_id))

    async def save(self, review: SelfReview) -> SelfReview:
        self._reviews[(review.user_id, review.cycle_id)] = review
        self.save_count += 1
        return review


class PeerFeedbackRepositoryStub(PeerFeedbackRepositoryProtocol):
    """Peer feedback in submission order."""

    def __init__(self) -> None:
        self._feedback: list[PeerFeedback] = []
        self.save_count = 0

    def seed(self, feedback: list[PeerFeedback]) -> None:
        self._feedback.extend(feedback)

    def reset(self) -> None:
        self._feedback.clear()
        self.save_count = 0

    async def find_by_reviewee_and_cycle(
        self, reviewee_id: UserId, cycle_id: ReviewCycleId
    ) -> list[PeerFeedback]:
        return [
            f
            for f in self._feedback
            if f.reviewee_id == reviewee_id and f.cycle_id == cycle_id
        ]

    async def find_by_reviewer_and_cycle(
        self, reviewer_id: UserId, cycle_id: ReviewCycleId
    ) -> list[PeerFeedback]:
        return [
            f
            for f in self._feedback
            if f.reviewer_id == reviewer_id and f.cycle_id == cycle_id
        ]

    async def save(self, feedback: PeerFeedback) -> PeerFeedback:
        self._feedback.append(feedback)
        self.save_count += 1
        return feedback


class ManagerEvaluationRepositoryStub(ManagerEvaluationRepositoryProtocol):
    """Manager evaluations keyed by id.

    Saving an evaluation for an (employee, cycle) pair that already has
    one with a different id replaces it.
    """

    def __init__(self) -> None:
        self._evaluations: dict[UUID, ManagerEvaluation] = {}
        self.save_count = 0

    def seed(self, evaluations: list[ManagerEvaluation]) -> None:
        for evaluation in evaluations:
            self._evaluations[evaluation.id] = evaluation

    def reset(self) -> None:
        self._evaluations.clear()
        self.save_count = 0

    async def find_by_id(self, evaluation_id: UUID) -> ManagerEvaluation | None:
        return self._evaluations.get(evaluation_id)

    async def find_by_employee_and_cycle(
        self, employee_id: UserId, cycle_id: ReviewCycleId
    ) -> ManagerEvaluation | None:
        for evaluation in self._evaluations.values():
            if (
                evaluation.employee_id == employee_id
                and evaluation.cycle_id == cycle_id
            ):
                return evaluation
        return None

    async def save(self, evaluation: ManagerEvaluation) -> ManagerEvaluation:
        existing = await self.find_by_employee_and_cycle(
            evaluation.employee_id, evaluation.cycle_id
        )
        if existing is not None and existing.id != evaluation.id:
            del self._evaluations[existing.id]
        self._evaluations[evaluation.id] = evaluation
        self.save_count += 1
        return evaluation

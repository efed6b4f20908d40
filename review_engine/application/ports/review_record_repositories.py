"""Repository ports for self reviews, peer feedback and manager evaluations.

Each lookup returns None (or an empty list) when nothing was submitted;
absence is a normal state during an open cycle, not an error.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from uuid import UUID

    from review_engine.domain.models.identifiers import ReviewCycleId, UserId
    from review_engine.domain.models.review_records import (
        ManagerEvaluation,
        PeerFeedback,
        SelfReview,
    )


class SelfReviewRepositoryProtocol(Protocol):
    """Storage for self reviews, one per (user, cycle)."""

    @abstractmethod
    async def find_by_user_and_cycle(
        self, user_id: UserId, cycle_id: ReviewCycleId
    ) -> SelfReview | None:
        ...

    @abstractmethod
    async def save(self, review: SelfReview) -> SelfReview:
        """Insert or replace a self review.

        Args:
            review: The self review to persist.

        Returns:
            The stored self review.
        """
        ...


class PeerFeedbackRepositoryProtocol(Protocol):
    """Storage for peer feedback."""

    @abstractmethod
    async def find_by_reviewee_and_cycle(
        self, reviewee_id: UserId, cycle_id: ReviewCycleId
    ) -> list[PeerFeedback]:
        ...

    @abstractmethod
    async def find_by_reviewer_and_cycle(
        self, reviewer_id: UserId, cycle_id: ReviewCycleId
    ) -> list[PeerFeedback]:
        """Feedback a reviewer has given in a cycle, for duplicate checks."""
        ...

    @abstractmethod
    async def save(self, feedback: PeerFeedback) -> PeerFeedback:
        ...


class ManagerEvaluationRepositoryProtocol(Protocol):
    """Storage for manager evaluations, one per (employee, cycle)."""

    @abstractmethod
    async def find_by_id(self, evaluation_id: UUID) -> ManagerEvaluation | None:
        ...

    @abstractmethod
    async def find_by_employee_and_cycle(
        self, employee_id: UserId, cycle_id: ReviewCycleId
    ) -> ManagerEvaluation | None:
        ...

    @abstractmethod
    async def save(self, evaluation: ManagerEvaluation) -> ManagerEvaluation:
        """Insert or replace a manager evaluation.

        Args:
            evaluation: The evaluation to persist.

        Returns:
            The stored evaluation.
        """
        ...

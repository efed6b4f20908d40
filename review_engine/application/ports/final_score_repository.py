"""Final score repository port."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from review_engine.domain.models.bonus_tier import BonusTier
    from review_engine.domain.models.final_score import FinalScore
    from review_engine.domain.models.identifiers import (
        FinalScoreId,
        ReviewCycleId,
        UserId,
    )


class FinalScoreRepositoryProtocol(Protocol):
    """Repository protocol for final score persistence.

    Implementations must serialize concurrent writes to the same score.
    """

    @abstractmethod
    async def find_by_user_and_cycle(
        self, user_id: UserId, cycle_id: ReviewCycleId
    ) -> FinalScore | None:
        """Retrieve the final score of one employee in one cycle.

        Returns:
            The FinalScore if found, None otherwise.
        """
        ...

    @abstractmethod
    async def find_by_cycle(self, cycle_id: ReviewCycleId) -> list[FinalScore]:
        """Retrieve every final score of a cycle."""
        ...

    @abstractmethod
    async def find_by_bonus_tier(
        self, cycle_id: ReviewCycleId, tier: BonusTier
    ) -> list[FinalScore]:
        """Retrieve the final scores of a cycle whose current tier is ``tier``."""
        ...

    @abstractmethod
    async def save(self, score: FinalScore) -> FinalScore:
        """Insert or update a final score."""
        ...

    @abstractmethod
    async def delete(self, score_id: FinalScoreId) -> None:
        """Remove a final score."""
        ...

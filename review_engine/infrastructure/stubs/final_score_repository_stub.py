"""FinalScoreRepositoryStub for testing."""

from __future__ import annotations

from review_engine.application.ports.final_score_repository import (
    FinalScoreRepositoryProtocol,
)
from review_engine.domain.models.bonus_tier import BonusTier
from review_engine.domain.models.final_score import FinalScore
from review_engine.domain.models.identifiers import (
    FinalScoreId,
    ReviewCycleId,
    UserId,
)


class FinalScoreRepositoryStub(FinalScoreRepositoryProtocol):
    """In-memory stub implementation of FinalScoreRepositoryProtocol.

    Saving a score for a (user, cycle) pair that already has one with a
    different ID replaces it, matching a unique key on that pair.
    """

    def __init__(self) -> None:
        self._scores: dict[FinalScoreId, FinalScore] = {}
        self.save_count = 0

    def seed(self, scores: list[FinalScore]) -> None:
        for score in scores:
            self._scores[score.id] = score

    def reset(self) -> None:
        self._scores.clear()
        self.save_count = 0

    async def find_by_user_and_cycle(
        self, user_id: UserId, cycle_id: ReviewCycleId
    ) -> FinalScore | None:
        for score in self._scores.values():
            if score.user_id == user_id and score.cycle_id == cycle_id:
                return score
        return None

    async def find_by_cycle(self, cycle_id: ReviewCycleId) -> list[FinalScore]:
        return [s for s in self._scores.values() if s.cycle_id == cycle_id]

    async def find_by_bonus_tier(
        self, cycle_id: ReviewCycleId, tier: BonusTier
    ) -> list[FinalScore]:
        return [
            s
            for s in self._scores.values()
            if s.cycle_id == cycle_id and s.bonus_tier == tier
        ]

    async def save(self, score: FinalScore) -> FinalScore:
        existing = await self.find_by_user_and_cycle(score.user_id, score.cycle_id)
        if existing is not None and existing.id != score.id:
            del self._scores[existing.id]
        self._scores[score.id] = score
        self.save_count += 1
        return score

    async def delete(self, score_id: FinalScoreId) -> None:
        self._scores.pop(score_id, None)

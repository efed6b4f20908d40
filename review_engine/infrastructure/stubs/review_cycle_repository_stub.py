"""ReviewCycleRepositoryStub for testing.

In-memory implementation of ReviewCycleRepositoryProtocol for unit and
integration tests and the development composition root.
"""

from __future__ import annotations

from review_engine.application.ports.review_cycle_repository import (
    ReviewCycleRepositoryProtocol,
)
from review_engine.domain.models.identifiers import ReviewCycleId
from review_engine.domain.models.review_cycle import CycleStatus, ReviewCycle


class ReviewCycleRepositoryStub(ReviewCycleRepositoryProtocol):
    """In-memory stub implementation of ReviewCycleRepositoryProtocol.

    Cycles are stored by identity, so a saved aggregate and a later
    lookup return the same object.

    Example:
        >>> stub = ReviewCycleRepositoryStub()
        >>> stub.seed([cycle])
        >>> await stub.find_active()
    """

    def __init__(self) -> None:
        self._cycles: dict[ReviewCycleId, ReviewCycle] = {}
        self.save_count = 0

    def seed(self, cycles: list[ReviewCycle]) -> None:
        """Add cycles without counting them as saves."""
        for cycle in cycles:
            self._cycles[cycle.id] = cycle

    def reset(self) -> None:
        self._cycles.clear()
        self.save_count = 0

    async def find_by_id(self, cycle_id: ReviewCycleId) -> ReviewCycle | None:
        return self._cycles.get(cycle_id)

    async def find_active(self) -> ReviewCycle | None:
        for cycle in self._cycles.values():
            if cycle.status == CycleStatus.ACTIVE:
                return cycle
        return None

    async def find_by_year(self, year: int) -> list[ReviewCycle]:
        return [cycle for cycle in self._cycles.values() if cycle.year == year]

    async def save(self, cycle: ReviewCycle) -> ReviewCycle:
        self._cycles[cycle.id] = cycle
        self.save_count += 1
        return cycle

    async def delete(self, cycle_id: ReviewCycleId) -> None:
        self._cycles.pop(cycle_id, None)

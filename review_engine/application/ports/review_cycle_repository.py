"""Review cycle repository port.

Implementations must serialize concurrent writes to the same cycle
(unique-key upsert or optimistic versioning); services assume at most
one in-flight mutation per cycle.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from review_engine.domain.models.identifiers import ReviewCycleId
    from review_engine.domain.models.review_cycle import ReviewCycle


class ReviewCycleRepositoryProtocol(Protocol):
    """Repository protocol for review cycle persistence."""

    @abstractmethod
    async def find_by_id(self, cycle_id: ReviewCycleId) -> ReviewCycle | None:
        """Retrieve a cycle by ID.

        Returns:
            The ReviewCycle if found, None otherwise.
        """
        ...

    @abstractmethod
    async def find_active(self) -> ReviewCycle | None:
        """Retrieve the cycle currently in ACTIVE status, if any."""
        ...

    @abstractmethod
    async def find_by_year(self, year: int) -> list[ReviewCycle]:
        """Retrieve all cycles for a calendar year."""
        ...

    @abstractmethod
    async def save(self, cycle: ReviewCycle) -> ReviewCycle:
        """Insert or update a cycle.

        Returns:
            The persisted cycle.
        """
        ...

    @abstractmethod
    async def delete(self, cycle_id: ReviewCycleId) -> None:
        """Remove a cycle."""
        ...

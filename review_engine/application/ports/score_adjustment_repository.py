"""Score adjustment request repository port."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from uuid import UUID

    from review_engine.domain.models.identifiers import UserId
    from review_engine.domain.models.score_adjustment import ScoreAdjustmentRequest


class ScoreAdjustmentRepositoryProtocol(Protocol):
    """Repository protocol for score adjustment requests."""

    @abstractmethod
    async def save(self, request: ScoreAdjustmentRequest) -> ScoreAdjustmentRequest:
        """Insert or update a request."""
        ...

    @abstractmethod
    async def find_by_id(self, request_id: UUID) -> ScoreAdjustmentRequest | None:
        """Retrieve a request by ID, or None."""
        ...

    @abstractmethod
    async def find_pending(self) -> list[ScoreAdjustmentRequest]:
        """Retrieve all requests awaiting review."""
        ...

    @abstractmethod
    async def find_by_employee(
        self, employee_id: UserId
    ) -> list[ScoreAdjustmentRequest]:
        """Retrieve all requests filed about an employee."""
        ...

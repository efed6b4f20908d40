"""ScoreAdjustmentRepositoryStub for testing."""

from __future__ import annotations

from uuid import UUID

from review_engine.application.ports.score_adjustment_repository import (
    ScoreAdjustmentRepositoryProtocol,
)
from review_engine.domain.models.identifiers import UserId
from review_engine.domain.models.score_adjustment import (
    AdjustmentStatus,
    ScoreAdjustmentRequest,
)


class ScoreAdjustmentRepositoryStub(ScoreAdjustmentRepositoryProtocol):
    """In-memory stub implementation of ScoreAdjustmentRepositoryProtocol.

    Requests are immutable, so saving a reviewed copy replaces the
    stored request with the same ID.
    """

    def __init__(self) -> None:
        self._requests: dict[UUID, ScoreAdjustmentRequest] = {}

    def clear(self) -> None:
        self._requests.clear()

    async def save(self, request: ScoreAdjustmentRequest) -> ScoreAdjustmentRequest:
        self._requests[request.id] = request
        return request

    async def find_by_id(self, request_id: UUID) -> ScoreAdjustmentRequest | None:
        return self._requests.get(request_id)

    async def find_pending(self) -> list[ScoreAdjustmentRequest]:
        return [
            r for r in self._requests.values() if r.status == AdjustmentStatus.PENDING
        ]

    async def find_by_employee(
        self, employee_id: UserId
    ) -> list[ScoreAdjustmentRequest]:
        return [r for r in self._requests.values() if r.employee_id == employee_id]

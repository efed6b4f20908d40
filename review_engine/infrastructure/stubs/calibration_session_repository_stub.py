"""CalibrationSessionRepositoryStub for testing."""

from __future__ import annotations

from uuid import UUID

from review_engine.application.ports.calibration_session_repository import (
    CalibrationSessionRepositoryProtocol,
)
from review_engine.domain.models.calibration_session import CalibrationSession
from review_engine.domain.models.identifiers import ReviewCycleId


class CalibrationSessionRepositoryStub(CalibrationSessionRepositoryProtocol):
    """In-memory stub implementation of CalibrationSessionRepositoryProtocol."""

    def __init__(self) -> None:
        self._sessions: dict[UUID, CalibrationSession] = {}

    def clear(self) -> None:
        self._sessions.clear()

    async def save(self, session: CalibrationSession) -> CalibrationSession:
        self._sessions[session.id] = session
        return session

    async def find_by_id(self, session_id: UUID) -> CalibrationSession | None:
        return self._sessions.get(session_id)

    async def find_by_cycle(self, cycle_id: ReviewCycleId) -> list[CalibrationSession]:
        return [s for s in self._sessions.values() if s.cycle_id == cycle_id]

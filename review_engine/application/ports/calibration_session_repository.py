"""Calibration session repository port."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from uuid import UUID

    from review_engine.domain.models.calibration_session import CalibrationSession
    from review_engine.domain.models.identifiers import ReviewCycleId


class CalibrationSessionRepositoryProtocol(Protocol):
    """Repository protocol for calibration sessions."""

    @abstractmethod
    async def save(self, session: CalibrationSession) -> CalibrationSession:
        """Insert or update a session."""
        ...

    @abstractmethod
    async def find_by_id(self, session_id: UUID) -> CalibrationSession | None:
        """Retrieve a session by ID, or None."""
        ...

    @abstractmethod
    async def find_by_cycle(self, cycle_id: ReviewCycleId) -> list[CalibrationSession]:
        """Retrieve all sessions of a cycle."""
        ...

"""PeerNominationRepositoryStub for testing."""

from __future__ import annotations

from uuid import UUID

from review_engine.application.ports.peer_nomination_repository import (
    PeerNominationRepositoryProtocol,
)
from review_engine.domain.models.identifiers import ReviewCycleId, UserId
from review_engine.domain.models.peer_nomination import PeerNomination


class PeerNominationRepositoryStub(PeerNominationRepositoryProtocol):
    """In-memory stub implementation of PeerNominationRepositoryProtocol.

    Nominations are kept in save order.
    """

    def __init__(self) -> None:
        self._nominations: dict[UUID, PeerNomination] = {}
        self.save_count = 0

    def seed(self, nominations: list[PeerNomination]) -> None:
        for nomination in nominations:
            self._nominations[nomination.id] = nomination

    def reset(self) -> None:
        self._nominations.clear()
        self.save_count = 0

    @property
    def nominations(self) -> list[PeerNomination]:
        return list(self._nominations.values())

    async def find_by_nominator_and_cycle(
        self, nominator_id: UserId, cycle_id: ReviewCycleId
    ) -> list[PeerNomination]:
        return [
            n
            for n in self._nominations.values()
            if n.nominator_id == nominator_id and n.cycle_id == cycle_id
        ]

    async def save(self, nomination: PeerNomination) -> PeerNomination:
        self._nominations[nomination.id] = nomination
        self.save_count += 1
        return nomination

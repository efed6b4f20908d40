"""Peer nomination repository port."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from review_engine.domain.models.identifiers import ReviewCycleId, UserId
    from review_engine.domain.models.peer_nomination import PeerNomination


class PeerNominationRepositoryProtocol(Protocol):
    """Repository protocol for peer nomination persistence."""

    @abstractmethod
    async def find_by_nominator_and_cycle(
        self, nominator_id: UserId, cycle_id: ReviewCycleId
    ) -> list[PeerNomination]:
        """Retrieve every nomination a nominator made in a cycle."""
        ...

    @abstractmethod
    async def save(self, nomination: PeerNomination) -> PeerNomination:
        """Persist a nomination."""
        ...

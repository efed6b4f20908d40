"""Peer nomination record.

A nominator picks 3-5 peers per cycle to give them feedback. Records
are created PENDING by PeerNominationService; the nominee (or the
nominator's manager) moves them on from there.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from uuid import UUID

from review_engine.domain.errors.nomination import SelfNominationError
from review_engine.domain.errors.timestamp import NaiveTimestampError
from review_engine.domain.models.identifiers import ReviewCycleId, UserId


class NominationStatus(str, Enum):
    """Status of a peer nomination."""

    PENDING = "PENDING"
    ACCEPTED = "ACCEPTED"
    DECLINED = "DECLINED"
    OVERRIDDEN_BY_MANAGER = "OVERRIDDEN_BY_MANAGER"


@dataclass(frozen=True, eq=True)
class PeerNomination:
    """One nominator -> nominee request for peer feedback in a cycle.

    Attributes:
        id: Nomination identifier.
        cycle_id: The cycle the feedback belongs to.
        nominator_id: The employee asking for feedback.
        nominee_id: The peer asked to give feedback.
        nominated_at: When the nomination was made (UTC).
        status: Current status.
    """

    id: UUID
    cycle_id: ReviewCycleId
    nominator_id: UserId
    nominee_id: UserId
    nominated_at: datetime
    status: NominationStatus = field(default=NominationStatus.PENDING)

    def __post_init__(self) -> None:
        if self.nominator_id == self.nominee_id:
            raise SelfNominationError(self.nominator_id)
        if self.nominated_at.tzinfo is None:
            raise NaiveTimestampError("nominated_at")

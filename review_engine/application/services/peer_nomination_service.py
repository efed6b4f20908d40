"""Peer nomination service.

A nominator picks peers to give them feedback in a cycle. The
validation chain runs in a fixed order and every step short-circuits:

1. Cycle exists
2. Nominee count within policy bounds (3-5 by default)
3. Nominator exists
4. For each nominee, in input order:
   a. not the nominator
   b. exists in the user directory
   c. not the nominator's recorded manager
   d. not already stored as a nomination by this nominator in this cycle
5. Persist one PENDING nomination per nominee

Nothing is saved unless every nominee passes every check.

The duplicate check in 4d runs against stored nominations only, so the
same nominee listed twice in one request is saved twice.
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from datetime import datetime, timezone
from typing import TYPE_CHECKING
from uuid import uuid4

from review_engine.application.dtos.peer_nomination import (
    MyNominationsResult,
    NominatePeersResult,
    NominationSummary,
)
from review_engine.application.services.base import LoggingMixin, require_cycle
from review_engine.config.review_policy_config import (
    DEFAULT_REVIEW_POLICY_CONFIG,
    ReviewPolicyConfig,
)
from review_engine.domain.errors.nomination import (
    DuplicateNominationError,
    InvalidNominationCountError,
    ManagerNominationError,
    SelfNominationError,
)
from review_engine.domain.errors.not_found import UserNotFoundError
from review_engine.domain.models.peer_nomination import NominationStatus, PeerNomination

if TYPE_CHECKING:
    from review_engine.application.ports.peer_nomination_repository import (
        PeerNominationRepositoryProtocol,
    )
    from review_engine.application.ports.review_cycle_repository import (
        ReviewCycleRepositoryProtocol,
    )
    from review_engine.application.ports.user_directory import UserDirectoryProtocol
    from review_engine.domain.models.identifiers import ReviewCycleId, UserId

UNKNOWN_NOMINEE_NAME = "Unknown"


class PeerNominationService(LoggingMixin):
    """Service for nominating peers and listing one's nominations.

    Example:
        >>> service = PeerNominationService(
        ...     nomination_repo=nomination_repo,
        ...     cycle_repo=cycle_repo,
        ...     user_directory=user_directory,
        ... )
        >>> result = await service.nominate_peers(cycle_id, me, [a, b, c])
    """

    def __init__(
        self,
        nomination_repo: PeerNominationRepositoryProtocol,
        cycle_repo: ReviewCycleRepositoryProtocol,
        user_directory: UserDirectoryProtocol,
        config: ReviewPolicyConfig | None = None,
    ) -> None:
        """Initialize the peer nomination service.

        Args:
            nomination_repo: Repository for nomination persistence.
            cycle_repo: Repository for cycle lookup.
            user_directory: Directory for nominator/nominee lookup.
            config: Review policy (nomination bounds).
        """
        self._nomination_repo = nomination_repo
        self._cycle_repo = cycle_repo
        self._user_directory = user_directory
        self._config = config or DEFAULT_REVIEW_POLICY_CONFIG
        self._init_logger()

    async def nominate_peers(
        self,
        cycle_id: ReviewCycleId,
        nominator_id: UserId,
        nominee_ids: Sequence[UserId],
    ) -> NominatePeersResult:
        """Nominate peers to give feedback to the nominator.

        Args:
            cycle_id: Cycle the feedback belongs to.
            nominator_id: Employee requesting feedback.
            nominee_ids: Peers to ask, in the order given by the caller.

        Returns:
            One summary per saved nomination, in input order.

        Raises:
            ReviewNotFoundError: Cycle doesn't exist.
            InvalidNominationCountError: Too few or too many nominees.
            UserNotFoundError: Nominator or a nominee is unknown.
            SelfNominationError: A nominee is the nominator.
            ManagerNominationError: A nominee is the nominator's manager.
            DuplicateNominationError: A nominee was already nominated.
        """
        log = self._log_operation(
            "nominate_peers",
            cycle_id=str(cycle_id),
            nominator_id=str(nominator_id),
            nominee_count=len(nominee_ids),
        )
        log.info("Starting peer nomination")

        # Step 1: Cycle exists
        await require_cycle(self._cycle_repo, cycle_id)

        # Step 2: Count within bounds
        if not self._config.accepts_nomination_count(len(nominee_ids)):
            log.warning("Nomination count out of bounds")
            raise InvalidNominationCountError(
                count=len(nominee_ids),
                minimum=self._config.min_peer_nominations,
                maximum=self._config.max_peer_nominations,
            )

        # Step 3: Nominator exists
        nominator = await self._user_directory.find_by_id(nominator_id)
        if nominator is None:
            raise UserNotFoundError("Nominator user not found", user_id=nominator_id)

        # Step 4: Validate every nominee before anything is written
        now = datetime.now(timezone.utc)
        nominations: list[PeerNomination] = []
        for nominee_id in nominee_ids:
            if nominee_id == nominator_id:
                log.warning("Self nomination rejected")
                raise SelfNominationError(nominator_id)

            nominee = await self._user_directory.find_by_id(nominee_id)
            if nominee is None:
                raise UserNotFoundError(
                    f"Nominee with ID {nominee_id} not found", user_id=nominee_id
                )

            if nominator.manager_id is not None and nominee.id == nominator.manager_id:
                log.warning("Manager nomination rejected", nominee_id=str(nominee_id))
                raise ManagerNominationError(nominator_id, nominator.manager_id)

            # Re-read per nominee: stored state is the source of truth
            existing = await self._nomination_repo.find_by_nominator_and_cycle(
                nominator_id, cycle_id
            )
            if any(nomination.nominee_id == nominee_id for nomination in existing):
                log.warning("Duplicate nomination rejected", nominee_id=str(nominee_id))
                raise DuplicateNominationError(nominee_id)

            nominations.append(
                PeerNomination(
                    id=uuid4(),
                    cycle_id=cycle_id,
                    nominator_id=nominator_id,
                    nominee_id=nominee_id,
                    nominated_at=now,
                    status=NominationStatus.PENDING,
                )
            )

        # Step 5: Persist
        saved = await asyncio.gather(
            *(self._nomination_repo.save(nomination) for nomination in nominations)
        )

        # Step 6: Shape output with nominee names
        summaries = await asyncio.gather(
            *(self._summarize(nomination) for nomination in saved)
        )

        log.info("Peer nominations saved", saved_count=len(saved))
        return NominatePeersResult(nominations=list(summaries))

    async def get_my_nominations(
        self, cycle_id: ReviewCycleId, nominator_id: UserId
    ) -> MyNominationsResult:
        """List the nominations a nominator has made in a cycle.

        Raises:
            ReviewNotFoundError: Cycle doesn't exist.
        """
        await require_cycle(self._cycle_repo, cycle_id)

        nominations = await self._nomination_repo.find_by_nominator_and_cycle(
            nominator_id, cycle_id
        )
        summaries = await asyncio.gather(
            *(self._summarize(nomination) for nomination in nominations)
        )
        return MyNominationsResult(nominations=list(summaries), total=len(summaries))

    async def _summarize(self, nomination: PeerNomination) -> NominationSummary:
        nominee = await self._user_directory.find_by_id(nomination.nominee_id)
        return NominationSummary(
            id=nomination.id,
            nominee_id=nomination.nominee_id.value,
            nominee_name=(nominee.name if nominee else None) or UNKNOWN_NOMINEE_NAME,
            status=nomination.status.value,
            nominated_at=nomination.nominated_at,
        )

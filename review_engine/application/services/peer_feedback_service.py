"""Peer feedback service.

A nominated peer gives feedback to the reviewee who nominated them.
Submission runs a fixed chain and saves only at the end:

1. Cycle exists
2. Peer feedback deadline has not passed
3. The reviewee nominated this reviewer in the cycle
4. The nomination is still PENDING or ACCEPTED
5. The reviewer has not already given feedback to this reviewee
6. Persist the feedback
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING
from uuid import uuid4

from review_engine.application.dtos.peer_feedback import PeerFeedbackSubmission
from review_engine.application.services.base import LoggingMixin, require_cycle
from review_engine.application.services.time_authority_service import (
    TimeAuthorityService,
)
from review_engine.domain.errors.review_cycle import DeadlinePassedError
from review_engine.domain.errors.review_submission import (
    DuplicatePeerFeedbackError,
    InactiveNominationError,
    PeerNominationNotFoundError,
)
from review_engine.domain.models.cycle_deadlines import ReviewPhase
from review_engine.domain.models.peer_nomination import NominationStatus
from review_engine.domain.models.pillar_scores import PillarScores
from review_engine.domain.models.review_records import PeerFeedback

if TYPE_CHECKING:
    from review_engine.application.ports.peer_nomination_repository import (
        PeerNominationRepositoryProtocol,
    )
    from review_engine.application.ports.review_cycle_repository import (
        ReviewCycleRepositoryProtocol,
    )
    from review_engine.application.ports.review_record_repositories import (
        PeerFeedbackRepositoryProtocol,
    )
    from review_engine.application.ports.time_authority import TimeAuthorityProtocol
    from review_engine.domain.models.identifiers import ReviewCycleId, UserId

ACTIVE_NOMINATION_STATUSES = frozenset(
    {NominationStatus.PENDING, NominationStatus.ACCEPTED}
)


def _clean(text: str | None) -> str | None:
    if text is None:
        return None
    return text.strip() or None


class PeerFeedbackService(LoggingMixin):
    """Service for submitting peer feedback."""

    def __init__(
        self,
        feedback_repo: PeerFeedbackRepositoryProtocol,
        nomination_repo: PeerNominationRepositoryProtocol,
        cycle_repo: ReviewCycleRepositoryProtocol,
        time_authority: TimeAuthorityProtocol | None = None,
    ) -> None:
        self._feedback_repo = feedback_repo
        self._nomination_repo = nomination_repo
        self._cycle_repo = cycle_repo
        self._time = time_authority or TimeAuthorityService()
        self._init_logger()

    async def submit_peer_feedback(
        self,
        cycle_id: ReviewCycleId,
        reviewer_id: UserId,
        reviewee_id: UserId,
        scores: PillarScores | Mapping[str, int],
        strengths: str | None = None,
        growth_areas: str | None = None,
        general_comments: str | None = None,
    ) -> PeerFeedbackSubmission:
        """Record a nominated peer's feedback about the reviewee.

        Args:
            cycle_id: Cycle the feedback belongs to.
            reviewer_id: Peer giving the feedback.
            reviewee_id: Employee who nominated the peer.
            scores: Pillar scores from the peer.
            strengths: Optional strengths comment.
            growth_areas: Optional growth areas comment.
            general_comments: Optional free comment.

        Returns:
            The stored feedback, without the reviewer's identity.

        Raises:
            ReviewNotFoundError: Cycle doesn't exist.
            DeadlinePassedError: Peer feedback deadline has passed.
            PeerNominationNotFoundError: Reviewer was not nominated.
            InactiveNominationError: Nomination declined or overridden.
            DuplicatePeerFeedbackError: Feedback already given.
            InvalidPillarScoreError: Scores out of range.
        """
        log = self._log_operation(
            "submit_peer_feedback",
            cycle_id=str(cycle_id),
            reviewer_id=str(reviewer_id),
            reviewee_id=str(reviewee_id),
        )
        log.info("Submitting peer feedback")

        # Step 1: Cycle exists
        cycle = await require_cycle(self._cycle_repo, cycle_id)

        # Step 2: Deadline
        now = self._time.now()
        if cycle.has_deadline_passed(ReviewPhase.PEER_FEEDBACK, now=now):
            log.warning("Peer feedback deadline passed")
            raise DeadlinePassedError(cycle_id, ReviewPhase.PEER_FEEDBACK)

        # Steps 3-4: Reviewer holds an active nomination from the reviewee
        nominations = await self._nomination_repo.find_by_nominator_and_cycle(
            reviewee_id, cycle_id
        )
        nomination = next(
            (n for n in nominations if n.nominee_id == reviewer_id), None
        )
        if nomination is None:
            log.warning("Reviewer was not nominated")
            raise PeerNominationNotFoundError(reviewer_id, reviewee_id)
        if nomination.status not in ACTIVE_NOMINATION_STATUSES:
            log.warning("Nomination not active", status=nomination.status.value)
            raise InactiveNominationError(nomination.id, nomination.status.value)

        # Step 5: One submission per reviewer and reviewee
        given = await self._feedback_repo.find_by_reviewer_and_cycle(
            reviewer_id, cycle_id
        )
        if any(feedback.reviewee_id == reviewee_id for feedback in given):
            log.warning("Duplicate peer feedback rejected")
            raise DuplicatePeerFeedbackError(reviewer_id, reviewee_id)

        if not isinstance(scores, PillarScores):
            scores = PillarScores.create(scores)

        # Step 6: Persist
        feedback = PeerFeedback(
            id=uuid4(),
            cycle_id=cycle_id,
            reviewer_id=reviewer_id,
            reviewee_id=reviewee_id,
            submitted_at=now,
            scores=scores,
            strengths=_clean(strengths),
            growth_areas=_clean(growth_areas),
            general_comments=_clean(general_comments),
        )
        saved = await self._feedback_repo.save(feedback)

        log.info("Peer feedback submitted", feedback_id=str(saved.id))
        return PeerFeedbackSubmission.from_feedback(saved)

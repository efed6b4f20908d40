"""Self review service.

Employees draft a self review and submit it before the self-review
deadline. Every write checks the deadline first:

1. Cycle exists
2. Self-review deadline has not passed
3. Self review exists for (user, cycle)
4. Apply the change (update) or submit (narrative required)
5. Persist

Reading one's own self review creates an empty DRAFT on first access.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from review_engine.application.dtos.self_review import SelfReviewDetail
from review_engine.application.services.base import LoggingMixin, require_cycle
from review_engine.application.services.time_authority_service import (
    TimeAuthorityService,
)
from review_engine.domain.errors.not_found import ReviewNotFoundError
from review_engine.domain.errors.review_cycle import DeadlinePassedError
from review_engine.domain.errors.review_submission import IncompleteSelfReviewError
from review_engine.domain.models.cycle_deadlines import ReviewPhase
from review_engine.domain.models.narrative import Narrative
from review_engine.domain.models.pillar_scores import PillarScores
from review_engine.domain.models.review_records import SelfReview

if TYPE_CHECKING:
    import structlog

    from review_engine.application.ports.review_cycle_repository import (
        ReviewCycleRepositoryProtocol,
    )
    from review_engine.application.ports.review_record_repositories import (
        SelfReviewRepositoryProtocol,
    )
    from review_engine.application.ports.time_authority import TimeAuthorityProtocol
    from review_engine.domain.models.identifiers import ReviewCycleId, UserId


class SelfReviewService(LoggingMixin):
    """Service for drafting and submitting self reviews."""

    def __init__(
        self,
        self_review_repo: SelfReviewRepositoryProtocol,
        cycle_repo: ReviewCycleRepositoryProtocol,
        time_authority: TimeAuthorityProtocol | None = None,
    ) -> None:
        """Initialize the self review service.

        Args:
            self_review_repo: Repository for self reviews.
            cycle_repo: Repository for cycle lookup.
            time_authority: Clock for deadline checks (system UTC by default).
        """
        self._self_review_repo = self_review_repo
        self._cycle_repo = cycle_repo
        self._time = time_authority or TimeAuthorityService()
        self._init_logger()

    async def get_my_self_review(
        self, cycle_id: ReviewCycleId, user_id: UserId
    ) -> SelfReviewDetail:
        """Return the user's self review, creating an empty draft if absent.

        Raises:
            ReviewNotFoundError: Cycle doesn't exist.
        """
        await require_cycle(self._cycle_repo, cycle_id)

        review = await self._self_review_repo.find_by_user_and_cycle(user_id, cycle_id)
        if review is None:
            review = await self._self_review_repo.save(
                SelfReview.create(cycle_id, user_id)
            )
            self._log_operation(
                "get_my_self_review", cycle_id=str(cycle_id), user_id=str(user_id)
            ).info("Draft self review created", review_id=str(review.id))
        return SelfReviewDetail.from_self_review(review)

    async def update_self_review(
        self,
        cycle_id: ReviewCycleId,
        user_id: UserId,
        scores: PillarScores | Mapping[str, int] | None = None,
        narrative: str | None = None,
    ) -> SelfReviewDetail:
        """Change the scores and/or narrative of a draft self review.

        Args:
            cycle_id: Cycle of the self review.
            user_id: Author of the self review.
            scores: New pillar scores, if changing.
            narrative: New narrative text, if changing.

        Raises:
            ReviewNotFoundError: Cycle or self review missing.
            DeadlinePassedError: Self-review deadline has passed.
            ReviewAlreadySubmittedError: Self review already submitted.
            InvalidPillarScoreError: Scores out of range.
            NarrativeTooLongError: Narrative over 1000 words.
        """
        log = self._log_operation(
            "update_self_review", cycle_id=str(cycle_id), user_id=str(user_id)
        )

        review = await self._load_open_review(cycle_id, user_id, log)

        if scores is not None and not isinstance(scores, PillarScores):
            scores = PillarScores.create(scores)
        text = Narrative.create(narrative) if narrative is not None else None

        if scores is not None:
            review.update_scores(scores)
        if text is not None:
            review.update_narrative(text)

        saved = await self._self_review_repo.save(review)

        log.info("Self review updated", review_id=str(saved.id))
        return SelfReviewDetail.from_self_review(saved)

    async def submit_self_review(
        self, cycle_id: ReviewCycleId, user_id: UserId
    ) -> SelfReviewDetail:
        """Submit a draft self review.

        Raises:
            ReviewNotFoundError: Cycle or self review missing.
            DeadlinePassedError: Self-review deadline has passed.
            IncompleteSelfReviewError: Narrative is empty.
            ReviewAlreadySubmittedError: Already submitted.
        """
        log = self._log_operation(
            "submit_self_review", cycle_id=str(cycle_id), user_id=str(user_id)
        )
        log.info("Submitting self review")

        review = await self._load_open_review(cycle_id, user_id, log)

        if review.narrative.is_empty:
            log.warning("Self review narrative missing")
            raise IncompleteSelfReviewError(review.id)

        review.submit()
        saved = await self._self_review_repo.save(review)

        log.info("Self review submitted", review_id=str(saved.id))
        return SelfReviewDetail.from_self_review(saved)

    async def _load_open_review(
        self,
        cycle_id: ReviewCycleId,
        user_id: UserId,
        log: structlog.BoundLogger,
    ) -> SelfReview:
        # Steps 1-3: cycle, deadline, record
        cycle = await require_cycle(self._cycle_repo, cycle_id)

        if cycle.has_deadline_passed(ReviewPhase.SELF_REVIEW, now=self._time.now()):
            log.warning("Self-review deadline passed")
            raise DeadlinePassedError(cycle_id, ReviewPhase.SELF_REVIEW)

        review = await self._self_review_repo.find_by_user_and_cycle(user_id, cycle_id)
        if review is None:
            raise ReviewNotFoundError(
                "Self-review not found for this user and cycle", resource_id=user_id
            )
        return review

"""Manager evaluation service.

Managers draft and submit evaluations of their direct reports before
the manager-evaluation deadline. Both writes share the same checks:

1. Cycle exists
2. Manager evaluation deadline has not passed
3. Employee exists
4. Employee reports to the acting manager
5. Find the (employee, cycle) evaluation, or start a DRAFT
6. Apply the change, submitting when asked
7. Persist

Evaluations are frozen once submitted; only calibration changes them
after that.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from review_engine.application.dtos.manager_evaluation import ManagerEvaluationDetail
from review_engine.application.services.base import LoggingMixin, require_cycle
from review_engine.application.services.time_authority_service import (
    TimeAuthorityService,
)
from review_engine.domain.errors.not_found import ReviewNotFoundError
from review_engine.domain.errors.review_cycle import DeadlinePassedError
from review_engine.domain.errors.score_adjustment import NotDirectReportError
from review_engine.domain.models.cycle_deadlines import ReviewPhase
from review_engine.domain.models.engineer_level import EngineerLevel
from review_engine.domain.models.narrative import Narrative
from review_engine.domain.models.pillar_scores import PillarScores
from review_engine.domain.models.review_records import ManagerEvaluation

if TYPE_CHECKING:
    import structlog

    from review_engine.application.ports.review_cycle_repository import (
        ReviewCycleRepositoryProtocol,
    )
    from review_engine.application.ports.review_record_repositories import (
        ManagerEvaluationRepositoryProtocol,
    )
    from review_engine.application.ports.time_authority import TimeAuthorityProtocol
    from review_engine.application.ports.user_directory import UserDirectoryProtocol
    from review_engine.domain.models.identifiers import ReviewCycleId, UserId


def _narrative(text: str | None) -> Narrative | None:
    return None if text is None else Narrative.create(text)


class ManagerEvaluationService(LoggingMixin):
    """Service for drafting and submitting manager evaluations.

    Example:
        >>> service = ManagerEvaluationService(
        ...     evaluation_repo=evaluation_repo,
        ...     cycle_repo=cycle_repo,
        ...     user_directory=user_directory,
        ... )
        >>> await service.submit_manager_evaluation(
        ...     cycle_id, manager_id, employee_id, scores, narrative="..."
        ... )
    """

    def __init__(
        self,
        evaluation_repo: ManagerEvaluationRepositoryProtocol,
        cycle_repo: ReviewCycleRepositoryProtocol,
        user_directory: UserDirectoryProtocol,
        time_authority: TimeAuthorityProtocol | None = None,
    ) -> None:
        """Initialize the manager evaluation service.

        Args:
            evaluation_repo: Repository for manager evaluations.
            cycle_repo: Repository for cycle lookup.
            user_directory: Directory for reporting-line checks.
            time_authority: Clock for deadline checks (system UTC by default).
        """
        self._evaluation_repo = evaluation_repo
        self._cycle_repo = cycle_repo
        self._user_directory = user_directory
        self._time = time_authority or TimeAuthorityService()
        self._init_logger()

    async def submit_manager_evaluation(
        self,
        cycle_id: ReviewCycleId,
        manager_id: UserId,
        employee_id: UserId,
        scores: PillarScores | Mapping[str, int],
        narrative: str | None = None,
        strengths: str | None = None,
        growth_areas: str | None = None,
        development_plan: str | None = None,
        proposed_level: str | None = None,
    ) -> ManagerEvaluationDetail:
        """Write the final content of an evaluation and submit it.

        A DRAFT saved earlier is updated in place; otherwise a new
        evaluation is created and submitted in one step.

        Raises:
            ReviewNotFoundError: Cycle or employee missing.
            DeadlinePassedError: Manager evaluation deadline has passed.
            NotDirectReportError: Employee does not report to manager_id.
            ReviewAlreadySubmittedError: Evaluation already submitted.
            InvalidPillarScoreError: Scores out of range.
            InvalidEngineerLevelError: Unknown proposed level.
            NarrativeTooLongError: A text field is over 1000 words.
        """
        log = self._log_operation(
            "submit_manager_evaluation",
            cycle_id=str(cycle_id),
            manager_id=str(manager_id),
            employee_id=str(employee_id),
        )
        log.info("Submitting manager evaluation")

        evaluation = await self._load_draft(cycle_id, manager_id, employee_id, log)
        self._apply(
            evaluation,
            scores=scores,
            narrative=narrative,
            strengths=strengths,
            growth_areas=growth_areas,
            development_plan=development_plan,
            proposed_level=proposed_level,
        )
        evaluation.submit()

        saved = await self._evaluation_repo.save(evaluation)

        log.info("Manager evaluation submitted", evaluation_id=str(saved.id))
        return ManagerEvaluationDetail.from_evaluation(saved)

    async def update_manager_evaluation(
        self,
        cycle_id: ReviewCycleId,
        manager_id: UserId,
        employee_id: UserId,
        scores: PillarScores | Mapping[str, int] | None = None,
        narrative: str | None = None,
        strengths: str | None = None,
        growth_areas: str | None = None,
        development_plan: str | None = None,
        proposed_level: str | None = None,
    ) -> ManagerEvaluationDetail:
        """Save draft changes to an evaluation without submitting.

        Only the fields given are changed.

        Raises:
            ReviewNotFoundError: Cycle or employee missing.
            DeadlinePassedError: Manager evaluation deadline has passed.
            NotDirectReportError: Employee does not report to manager_id.
            ReviewAlreadySubmittedError: Evaluation already submitted.
        """
        log = self._log_operation(
            "update_manager_evaluation",
            cycle_id=str(cycle_id),
            manager_id=str(manager_id),
            employee_id=str(employee_id),
        )

        evaluation = await self._load_draft(cycle_id, manager_id, employee_id, log)
        self._apply(
            evaluation,
            scores=scores,
            narrative=narrative,
            strengths=strengths,
            growth_areas=growth_areas,
            development_plan=development_plan,
            proposed_level=proposed_level,
        )

        saved = await self._evaluation_repo.save(evaluation)

        log.info("Manager evaluation updated", evaluation_id=str(saved.id))
        return ManagerEvaluationDetail.from_evaluation(saved)

    async def _load_draft(
        self,
        cycle_id: ReviewCycleId,
        manager_id: UserId,
        employee_id: UserId,
        log: structlog.BoundLogger,
    ) -> ManagerEvaluation:
        # Step 1: Cycle exists
        cycle = await require_cycle(self._cycle_repo, cycle_id)

        # Step 2: Deadline
        if cycle.has_deadline_passed(
            ReviewPhase.MANAGER_EVALUATION, now=self._time.now()
        ):
            log.warning("Manager evaluation deadline passed")
            raise DeadlinePassedError(cycle_id, ReviewPhase.MANAGER_EVALUATION)

        # Steps 3-4: Employee reports to the manager
        employee = await self._user_directory.find_by_id(employee_id)
        if employee is None:
            raise ReviewNotFoundError("Employee not found", resource_id=employee_id)
        if not employee.reports_to(manager_id):
            log.warning("Evaluator is not the employee's manager")
            raise NotDirectReportError(
                manager_id, employee_id, action="submit evaluations"
            )

        # Step 5: Existing evaluation or a fresh draft
        evaluation = await self._evaluation_repo.find_by_employee_and_cycle(
            employee_id, cycle_id
        )
        if evaluation is None:
            evaluation = ManagerEvaluation.create(
                cycle_id=cycle_id,
                employee_id=employee_id,
                manager_id=manager_id,
                scores=PillarScores.zero(),
            )
        return evaluation

    @staticmethod
    def _apply(
        evaluation: ManagerEvaluation,
        scores: PillarScores | Mapping[str, int] | None,
        narrative: str | None,
        strengths: str | None,
        growth_areas: str | None,
        development_plan: str | None,
        proposed_level: str | None,
    ) -> None:
        # Parse everything before the first mutation
        if scores is not None and not isinstance(scores, PillarScores):
            scores = PillarScores.create(scores)
        level = (
            EngineerLevel.from_string(proposed_level)
            if proposed_level is not None
            else None
        )
        texts = {
            "narrative": _narrative(narrative),
            "strengths": _narrative(strengths),
            "growth_areas": _narrative(growth_areas),
            "development_plan": _narrative(development_plan),
        }

        if scores is not None:
            evaluation.update_scores(scores)
        evaluation.update_text(**texts)
        if level is not None:
            evaluation.update_proposed_level(level)

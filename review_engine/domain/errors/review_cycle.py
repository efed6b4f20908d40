"""Review cycle lifecycle errors.

The cycle moves strictly DRAFT -> ACTIVE -> CALIBRATION -> COMPLETED.
Transitions from any other state raise InvalidReviewCycleStateError;
deadline sets that are not strictly increasing raise
InvalidDeadlineOrderError at construction time.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from review_engine.domain.errors.business_rule import BusinessRuleViolationError
from review_engine.domain.exceptions import ReviewEngineError

if TYPE_CHECKING:
    from review_engine.domain.models.cycle_deadlines import ReviewPhase
    from review_engine.domain.models.identifiers import ReviewCycleId
    from review_engine.domain.models.review_cycle import CycleStatus


class InvalidReviewCycleStateError(ReviewEngineError):
    """Raised when a lifecycle transition is invoked from the wrong state.

    Attributes:
        action: Human-readable action name ("start cycle", ...).
        current_status: Status the cycle was in.
        required_status: Status the transition requires.
    """

    def __init__(
        self,
        action: str,
        current_status: CycleStatus,
        required_status: CycleStatus,
    ) -> None:
        self.action = action
        self.current_status = current_status
        self.required_status = required_status
        super().__init__(
            f"Cannot {action} from {current_status.value} status. "
            f"Must be {required_status.value}"
        )


class InvalidDeadlineOrderError(ReviewEngineError):
    """Raised when a phase deadline is not strictly after the previous one.

    Attributes:
        phase: The phase whose deadline is out of order.
        previous_phase: The phase it must follow.
    """

    def __init__(self, phase: ReviewPhase, previous_phase: ReviewPhase) -> None:
        self.phase = phase
        self.previous_phase = previous_phase
        super().__init__(
            f"{phase.label} deadline must be after {previous_phase.label} deadline"
        )


class AnotherCycleActiveError(BusinessRuleViolationError):
    """Raised when starting a cycle while a different cycle is ACTIVE.

    Only one cycle may be active system-wide. The check is performed by
    the starting service against the cycle store, since a cycle cannot
    see other instances.
    """

    def __init__(self, active_cycle_id: ReviewCycleId) -> None:
        self.active_cycle_id = active_cycle_id
        super().__init__(
            "Another review cycle is already active. Please complete it first."
        )


_DEADLINE_PASSED_MESSAGES: dict[str, str] = {
    "self_review": "Self-review deadline has passed",
    "peer_feedback": "Peer feedback deadline has passed",
    "manager_evaluation": "Manager evaluation deadline has passed",
}


class DeadlinePassedError(BusinessRuleViolationError):
    """Raised when a submission arrives after its phase deadline.

    Attributes:
        cycle_id: The cycle whose deadline passed.
        phase: The phase being submitted to.
    """

    def __init__(self, cycle_id: ReviewCycleId, phase: ReviewPhase) -> None:
        self.cycle_id = cycle_id
        self.phase = phase
        super().__init__(
            _DEADLINE_PASSED_MESSAGES.get(
                phase.value, f"{phase.label} deadline has passed"
            )
        )

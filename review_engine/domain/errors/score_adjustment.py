"""Score adjustment workflow errors."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from review_engine.domain.errors.business_rule import BusinessRuleViolationError

if TYPE_CHECKING:
    from review_engine.domain.models.identifiers import UserId


class NotDirectReportError(BusinessRuleViolationError):
    """Raised when a manager acts on an employee who does not report to them.

    Attributes:
        manager_id: The acting manager.
        employee_id: The employee acted upon.
    """

    def __init__(self, manager_id: UserId, employee_id: UserId, action: str) -> None:
        self.manager_id = manager_id
        self.employee_id = employee_id
        super().__init__(f"You can only {action} for your direct reports")


class AdjustmentAlreadyReviewedError(BusinessRuleViolationError):
    """Raised when approving or rejecting a request that is no longer PENDING."""

    def __init__(self, request_id: UUID, status: str) -> None:
        self.request_id = request_id
        self.status = status
        super().__init__("Score adjustment request has already been reviewed")


class RejectionReasonRequiredError(BusinessRuleViolationError):
    """Raised when a rejection is submitted without a reason."""

    def __init__(self, request_id: UUID) -> None:
        self.request_id = request_id
        super().__init__("Rejection reason is required when rejecting a request")


class AdjustmentReasonRequiredError(BusinessRuleViolationError):
    """Raised when a score adjustment is requested without a reason."""

    def __init__(self, employee_id: UserId) -> None:
        self.employee_id = employee_id
        super().__init__("A reason is required to request a score adjustment")

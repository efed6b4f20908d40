"""Not-found errors for review engine lookups.

Raised by application services when a record required by the current
operation is absent from its store. Absence of optional records (a
missing self-review during team aggregation, for example) is not an
error and never raises these.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from review_engine.domain.exceptions import ReviewEngineError

if TYPE_CHECKING:
    from review_engine.domain.models.identifiers import ReviewCycleId, UserId


class ReviewNotFoundError(ReviewEngineError):
    """Raised when a required review record does not exist.

    Covers review cycles, final scores, employees, calibration sessions
    and score adjustment requests.

    Attributes:
        resource_id: Identifier of the missing record, when known.
    """

    def __init__(self, message: str, resource_id: object | None = None) -> None:
        """Initialize the error.

        Args:
            message: Human-readable description of what is missing.
            resource_id: Identifier of the missing record, when known.
        """
        self.resource_id = resource_id
        super().__init__(message)

    @classmethod
    def for_cycle(cls, cycle_id: ReviewCycleId) -> ReviewNotFoundError:
        """Build the error for a missing review cycle."""
        return cls(f"Review cycle with ID {cycle_id} not found", resource_id=cycle_id)


class UserNotFoundError(ReviewNotFoundError):
    """Raised when the user directory has no record for a required user.

    Attributes:
        user_id: The user that could not be resolved.
    """

    def __init__(self, message: str, user_id: UserId | None = None) -> None:
        self.user_id = user_id
        super().__init__(message, resource_id=user_id)

"""Peer nomination rule errors.

Each nominator picks a bounded number of peers per cycle. Nominations
may never target the nominator, the nominator's manager, or a peer
already nominated in the same cycle.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from review_engine.domain.errors.business_rule import BusinessRuleViolationError

if TYPE_CHECKING:
    from review_engine.domain.models.identifiers import UserId


class InvalidNominationCountError(BusinessRuleViolationError):
    """Raised when the nominee list size is outside the allowed bounds."""

    def __init__(self, count: int, minimum: int, maximum: int) -> None:
        self.count = count
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(f"Must nominate between {minimum} and {maximum} peers")


class SelfNominationError(BusinessRuleViolationError):
    """Raised when a nominator lists themselves."""

    def __init__(self, nominator_id: UserId) -> None:
        self.nominator_id = nominator_id
        super().__init__("Cannot nominate yourself for peer feedback")


class ManagerNominationError(BusinessRuleViolationError):
    """Raised when a nominator lists their recorded manager."""

    def __init__(self, nominator_id: UserId, manager_id: UserId) -> None:
        self.nominator_id = nominator_id
        self.manager_id = manager_id
        super().__init__("Cannot nominate your manager for peer feedback")


class DuplicateNominationError(BusinessRuleViolationError):
    """Raised when the nominee is already stored for this nominator and cycle."""

    def __init__(self, nominee_id: UserId) -> None:
        self.nominee_id = nominee_id
        super().__init__(f"Already nominated peer with ID {nominee_id}")

"""Identifier parsing errors."""

from __future__ import annotations

from review_engine.domain.exceptions import ReviewEngineError


class InvalidIdentifierError(ReviewEngineError):
    """Raised when an identifier string is not a valid UUID.

    Attributes:
        raw_value: The rejected input.
        kind: The identifier type name (e.g. "ReviewCycleId").
    """

    def __init__(self, raw_value: object, kind: str) -> None:
        self.raw_value = raw_value
        self.kind = kind
        if raw_value is None or (isinstance(raw_value, str) and not raw_value.strip()):
            message = f"Invalid {kind}: ID cannot be empty"
        else:
            message = f"Invalid {kind}: {raw_value!r} is not a valid UUID"
        super().__init__(message)

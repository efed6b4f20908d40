"""Identifier value objects for review engine records.

Identifiers wrap a UUID so that a cycle id can never be passed where a
user id is expected. Two identifiers are equal when their UUIDs are
equal; construction from text normalises case and surrounding
whitespace.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeVar
from uuid import UUID, uuid4

from review_engine.domain.errors.identifier import InvalidIdentifierError

_IdT = TypeVar("_IdT", bound="_EntityId")


@dataclass(frozen=True)
class _EntityId:
    """Base for UUID-backed identifiers."""

    value: UUID

    def __post_init__(self) -> None:
        if not isinstance(self.value, UUID):
            raise InvalidIdentifierError(self.value, type(self).__name__)

    @classmethod
    def generate(cls: type[_IdT]) -> _IdT:
        """Create a new random identifier."""
        return cls(uuid4())

    @classmethod
    def from_string(cls: type[_IdT], raw: str) -> _IdT:
        """Parse an identifier from its textual form.

        Args:
            raw: UUID text, any case, surrounding whitespace allowed.

        Returns:
            The parsed identifier.

        Raises:
            InvalidIdentifierError: If raw is empty or not a UUID.
        """
        if not isinstance(raw, str) or not raw.strip():
            raise InvalidIdentifierError(raw, cls.__name__)
        try:
            return cls(UUID(raw.strip()))
        except ValueError as e:
            raise InvalidIdentifierError(raw, cls.__name__) from e

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class ReviewCycleId(_EntityId):
    """Identifier of a review cycle."""


@dataclass(frozen=True)
class FinalScoreId(_EntityId):
    """Identifier of a final score."""


@dataclass(frozen=True)
class UserId(_EntityId):
    """Identifier of a user in the user directory."""

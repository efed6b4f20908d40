"""User directory port.

The directory belongs to the identity system; the review engine only
reads names, levels and reporting lines from it.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from review_engine.domain.models.identifiers import UserId
    from review_engine.domain.models.user import DirectoryUser


class UserDirectoryProtocol(Protocol):
    """Read-only access to users and their managers."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> DirectoryUser | None:
        """Retrieve a user by ID, or None if unknown."""
        ...

    @abstractmethod
    async def find_by_manager_id(self, manager_id: UserId) -> list[DirectoryUser]:
        """Retrieve the direct reports of a manager.

        Returns:
            Users whose recorded manager is ``manager_id``, in directory
            order. Empty if the manager has no reports.
        """
        ...

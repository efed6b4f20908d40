"""UserDirectoryStub for testing."""

from __future__ import annotations

from review_engine.application.ports.user_directory import UserDirectoryProtocol
from review_engine.domain.models.identifiers import UserId
from review_engine.domain.models.user import DirectoryUser


class UserDirectoryStub(UserDirectoryProtocol):
    """In-memory user directory.

    Direct reports are returned in insertion order.

    Example:
        >>> directory = UserDirectoryStub()
        >>> directory.add_user(DirectoryUser(id=UserId.generate(), name="Ada"))
    """

    def __init__(self) -> None:
        self._users: dict[UserId, DirectoryUser] = {}

    def add_user(self, user: DirectoryUser) -> None:
        self._users[user.id] = user

    def remove_user(self, user_id: UserId) -> None:
        self._users.pop(user_id, None)

    def clear(self) -> None:
        self._users.clear()

    async def find_by_id(self, user_id: UserId) -> DirectoryUser | None:
        return self._users.get(user_id)

    async def find_by_manager_id(self, manager_id: UserId) -> list[DirectoryUser]:
        return [user for user in self._users.values() if user.reports_to(manager_id)]

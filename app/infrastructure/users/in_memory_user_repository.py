"""
Adapter: In-memory user storage.

Implements the UserRepository port with a plain list.
Contents live only as long as the adapter instance.
"""

from app.domain.users.entities import User
from app.domain.users.ports import UserRepository


class InMemoryUserRepositoryAdapter(UserRepository):
    """Keeps added users in insertion order."""

    def __init__(self) -> None:
        self._users: list[User] = []

    def add(self, user: User) -> None:
        self._users.append(user)

    @property
    def users(self) -> list[User]:
        """Return a copy of the stored users."""
        return list(self._users)

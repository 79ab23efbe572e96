"""
Port interfaces (ABCs) for the users bounded context.

Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod

from app.domain.users.entities import User


class UserRepository(ABC):
    """Port for storing users.

    Contract:
    - add() accepts one user and returns nothing.
    - Failures the adapter recognises are raised as UserStorageError.
    """

    @abstractmethod
    def add(self, user: User) -> None:
        """Store a user.

        Args:
            user: The user entity to store.

        Raises:
            UserStorageError: If the adapter fails to store the user.
        """
        raise NotImplementedError

"""
Adapter: Console user storage.

Implements the UserRepository port by writing one line per user
to a text stream. Nothing is persisted.
"""

import logging
import sys
from typing import TextIO

from app.domain.users.entities import User
from app.domain.users.errors import UserStorageError
from app.domain.users.ports import UserRepository

logger = logging.getLogger(__name__)


class ConsoleUserRepositoryAdapter(UserRepository):
    """Writes "User <name> added." for every stored user."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        """The target stream; sys.stdout is looked up on every write when unset."""
        return self._stream if self._stream is not None else sys.stdout

    def add(self, user: User) -> None:
        """Write the user to the console stream.

        Args:
            user: User entity to store.

        Raises:
            UserStorageError: If the stream cannot be written.
        """
        try:
            stream = self.stream
            stream.write(f"User {user.name} added.\n")
            stream.flush()
        except (OSError, ValueError) as exc:
            # ValueError: write to a closed stream
            raise UserStorageError(str(exc)) from exc
        logger.debug("User id=%s written to console", user.id)

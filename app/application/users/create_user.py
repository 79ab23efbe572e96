"""
Use case: Create a user.

Input: CreateUserCommand (name, email, optional user_id)
Output: None
Side effects: Hands the user to the UserRepository.
Failure cases: UserNameRequiredError, UserStorageError.
"""

import logging
from uuid import uuid4

from app.application.users.dtos import CreateUserCommand
from app.domain.users.entities import User
from app.domain.users.errors import UserNameRequiredError
from app.domain.users.ports import UserRepository

logger = logging.getLogger(__name__)


class CreateUserUseCase:
    """Validates a new user and forwards it to storage."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def execute(self, command: CreateUserCommand) -> None:
        """Run the create user use case.

        Args:
            command: The requested user fields.

        Raises:
            UserNameRequiredError: If the name is missing or empty.
        """
        if not command.name:
            logger.info("Rejected user creation: name is required")
            raise UserNameRequiredError()

        user = User(
            id=command.user_id or uuid4(),
            name=command.name,
            email=command.email,
        )
        logger.info("Creating user id=%s", user.id)
        self._user_repo.add(user)

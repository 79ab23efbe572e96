"""
Dependency injection for the users bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into use cases via constructor injection.
These are the composition root for the users context.
"""

from functools import lru_cache

from fastapi import Depends

from app.application.users.create_user import CreateUserUseCase
from app.core.config import settings
from app.domain.users.ports import UserRepository
from app.infrastructure.users.console_user_repository import (
    ConsoleUserRepositoryAdapter,
)
from app.infrastructure.users.in_memory_user_repository import (
    InMemoryUserRepositoryAdapter,
)

_REPOSITORY_BACKENDS = {
    "console": ConsoleUserRepositoryAdapter,
    "memory": InMemoryUserRepositoryAdapter,
}


@lru_cache
def build_user_repository(backend: str) -> UserRepository:
    """Return the process-wide adapter for a storage backend.

    One adapter is built per backend and reused across requests.

    Raises:
        ValueError: If the backend is unknown.
    """
    try:
        adapter_cls = _REPOSITORY_BACKENDS[backend]
    except KeyError:
        raise ValueError(f"Unknown user repository backend: {backend}") from None
    return adapter_cls()


def get_user_repository() -> UserRepository:
    """Return the UserRepository adapter selected in settings."""
    return build_user_repository(settings.user_repository_backend)


def get_create_user_use_case(
    user_repo: UserRepository = Depends(get_user_repository),
) -> CreateUserUseCase:
    """Build CreateUserUseCase with its infrastructure dependencies."""
    return CreateUserUseCase(user_repo=user_repo)

"""Shared pytest fixtures for the test suite."""

import os

# Settings are read at import time; keep the limiter out of functional tests.
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

import pytest
from fastapi.testclient import TestClient

from app.infrastructure.users.in_memory_user_repository import (
    InMemoryUserRepositoryAdapter,
)
from app.interfaces.users.dependencies import get_user_repository
from app.main import app


@pytest.fixture
def user_repo() -> InMemoryUserRepositoryAdapter:
    """An empty in-memory user repository."""
    return InMemoryUserRepositoryAdapter()


@pytest.fixture
def client(user_repo: InMemoryUserRepositoryAdapter):
    """A test client whose use cases store users in ``user_repo``."""
    app.dependency_overrides[get_user_repository] = lambda: user_repo
    yield TestClient(app)
    app.dependency_overrides.clear()

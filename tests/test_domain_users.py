"""
Tests for the users domain layer.

Tests domain entities and error classes in isolation.
No external dependencies or IO required.
"""

from dataclasses import FrozenInstanceError
from uuid import UUID, uuid4

import pytest

from app.domain.users.entities import User
from app.domain.users.errors import (
    UserDomainError,
    UserErrorKind,
    UserNameRequiredError,
    UserStorageError,
)
from app.domain.users.ports import UserRepository


class TestUserEntity:
    """Tests for the User entity."""

    def test_user_creation(self) -> None:
        user_id = uuid4()
        user = User(id=user_id, name="John Doe", email="john.doe@example.com")
        assert user.id == user_id
        assert user.name == "John Doe"
        assert user.email == "john.doe@example.com"

    def test_id_generated_when_omitted(self) -> None:
        first = User(name="a")
        second = User(name="a")
        assert isinstance(first.id, UUID)
        assert first.id != second.id

    def test_no_invariants_enforced(self) -> None:
        """The entity accepts an empty name and any email text."""
        user = User(name="", email="not-an-email")
        assert user.name == ""

    def test_user_is_immutable(self) -> None:
        user = User(name="John")
        with pytest.raises(FrozenInstanceError):
            user.name = "Jane"


class TestDomainErrors:
    """Tests for domain error classes."""

    def test_name_required_error_message(self) -> None:
        error = UserNameRequiredError()
        assert str(error) == "User name is required."
        assert error.kind is UserErrorKind.VALIDATION
        assert isinstance(error, UserDomainError)

    def test_storage_error_hides_reason(self) -> None:
        error = UserStorageError("disk full")
        assert error.message == "User could not be stored."
        assert "disk full" not in str(error)
        assert error.reason == "disk full"
        assert error.kind is UserErrorKind.STORAGE


class TestUserRepositoryPort:
    """Tests for the UserRepository port."""

    def test_port_cannot_be_instantiated(self) -> None:
        with pytest.raises(TypeError):
            UserRepository()

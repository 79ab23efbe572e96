"""
Domain-specific errors for the users bounded context.

All errors raised from the domain and application layers are defined here.
Each error carries an explicit kind and a message that is safe to return
to clients. These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""

from enum import Enum


class UserErrorKind(Enum):
    """Classification of user errors, used for HTTP mapping."""

    VALIDATION = "validation"
    STORAGE = "storage"


class UserDomainError(Exception):
    """Base error for all users domain errors."""

    def __init__(self, message: str, kind: UserErrorKind) -> None:
        self.message = message
        self.kind = kind
        super().__init__(self.message)


class UserNameRequiredError(UserDomainError):
    """Raised when a user is created without a name."""

    def __init__(self) -> None:
        super().__init__("User name is required.", UserErrorKind.VALIDATION)


class UserStorageError(UserDomainError):
    """Raised by repository adapters when a user cannot be stored.

    The reason is kept for logging only and never sent to clients.
    """

    def __init__(self, reason: str) -> None:
        super().__init__("User could not be stored.", UserErrorKind.STORAGE)
        self.reason = reason

"""
Domain entities for the users bounded context.

Entities represent core business objects with identity.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass, field
from uuid import UUID, uuid4


@dataclass(frozen=True)
class User:
    """A user record.

    The type enforces no invariants of its own; creation rules are
    applied by the application layer.

    Attributes:
        name: Display name of the user.
        email: Contact email. Stored as given, never validated.
        id: Opaque unique identifier.
    """

    name: str
    email: str = ""
    id: UUID = field(default_factory=uuid4)

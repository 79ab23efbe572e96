"""
Data Transfer Objects for the users application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class CreateUserCommand:
    """Input DTO for creating a user.

    Attributes:
        name: Requested user name. None when the client omitted it.
        email: Contact email, passed through unvalidated.
        user_id: Client-supplied identifier. A new one is generated when None.
    """

    name: str | None
    email: str = ""
    user_id: UUID | None = None

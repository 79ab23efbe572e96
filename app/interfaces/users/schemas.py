"""
Pydantic schemas for users API request/response validation.

These schemas define the API contract. Name emptiness is checked by
the application layer, so the request schema accepts a missing name.
No business logic belongs here.
"""

from uuid import UUID

from pydantic import BaseModel, Field

USERS_STATUS_MESSAGE = "Users API is working!"
USER_CREATED_MESSAGE = "User created successfully."


class CreateUserRequest(BaseModel):
    """Request schema for the create user endpoint.

    Attributes:
        name: User name. Required to be non-empty by the use case.
        email: Contact email, not validated.
        id: Optional client-supplied identifier.
    """

    name: str | None = Field(default=None, description="User name")
    email: str = Field(default="", description="Contact email")
    id: UUID | None = Field(default=None, description="Optional user identifier")


class UsersStatusResponse(BaseModel):
    """Response schema for the users status endpoint."""

    message: str = USERS_STATUS_MESSAGE


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str
    users_backend: str


class ErrorResponse(BaseModel):
    """Standard error response returned by all error handlers."""

    error: str
    detail: str | None = None

"""
FastAPI router for the users bounded context.

All routes delegate to use cases. No business logic here.
Error mapping is handled by centralized error handlers.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from app.application.users.create_user import CreateUserUseCase
from app.application.users.dtos import CreateUserCommand
from app.core.config import settings
from app.interfaces.users.dependencies import get_create_user_use_case
from app.interfaces.users.schemas import (
    USER_CREATED_MESSAGE,
    CreateUserRequest,
    ErrorResponse,
    UsersStatusResponse,
)
from app.shared.security.rate_limiting import limiter

router = APIRouter(prefix="/users", tags=["users"])


@router.get(
    "",
    response_model=UsersStatusResponse,
    summary="Users API status",
    description="Returns a fixed acknowledgment that the users API is up.",
)
def get_users() -> UsersStatusResponse:
    """Return the users API acknowledgment."""
    return UsersStatusResponse()


@router.post(
    "",
    response_class=PlainTextResponse,
    responses={400: {"model": ErrorResponse}},
    summary="Create a user",
    description="Validates the user name and hands the user to storage.",
)
@limiter.limit(lambda: settings.rate_limit_default)
def create_user(
    request: Request,
    payload: CreateUserRequest,
    use_case: CreateUserUseCase = Depends(get_create_user_use_case),
) -> PlainTextResponse:
    """Create a user from the request body."""
    command = CreateUserCommand(
        name=payload.name,
        email=payload.email,
        user_id=payload.id,
    )
    use_case.execute(command)
    return PlainTextResponse(USER_CREATED_MESSAGE)

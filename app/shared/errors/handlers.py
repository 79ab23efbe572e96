"""
Centralized error handlers for FastAPI.

Maps domain-specific errors to HTTP responses.
Every failure of the users API is reported as a client error.
No stack traces or raw exception text are exposed to clients.
All error responses use the ErrorResponse schema.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.domain.users.errors import UserDomainError, UserStorageError
from app.shared.security.headers import apply_security_headers

logger = logging.getLogger(__name__)

HTTP_400 = 400

INVALID_REQUEST_MESSAGE = "Invalid request body."
UNEXPECTED_ERROR_MESSAGE = "User could not be created."


def _error_response(status_code: int, error: str, detail: str | None = None) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, str | None] = {"error": error}
    if detail:
        body["detail"] = detail
    return JSONResponse(status_code=status_code, content=body)


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(UserDomainError)
    async def handle_user_domain(
        _request: Request, exc: UserDomainError
    ) -> JSONResponse:
        """Handle validation and storage errors from the users context."""
        if isinstance(exc, UserStorageError):
            logger.error("User storage failed: %s", exc.reason)
        else:
            logger.warning("User validation failed: %s", exc.message)
        return _error_response(HTTP_400, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle malformed request bodies."""
        logger.warning("Request validation failed: %d error(s)", len(exc.errors()))
        return _error_response(HTTP_400, INVALID_REQUEST_MESSAGE)

    @app.exception_handler(Exception)
    async def handle_unexpected(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals.

        Runs outside SecurityHeadersMiddleware, so it sets the secure
        headers on its own response.
        """
        logger.exception("Unexpected error: %s", type(exc).__name__)
        response = _error_response(HTTP_400, UNEXPECTED_ERROR_MESSAGE)
        return apply_security_headers(response, request.url.path)

"""
Secure HTTP headers middleware.

Adds security-related headers to every response.
Responses built by the server-error handler never pass through the
middleware, so that handler applies the headers itself.
No business logic. Pure cross-cutting concern.
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

SECURE_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
}

# Docs pages load Swagger UI assets from a CDN and skip the CSP header.
CONTENT_SECURITY_POLICY = "default-src 'self'"
DOCS_PATHS = ("/docs", "/redoc")


def apply_security_headers(response: Response, path: str) -> Response:
    """Set the secure headers on a response for the given request path."""
    for header_name, header_value in SECURE_HEADERS.items():
        response.headers[header_name] = header_value
    if not path.startswith(DOCS_PATHS):
        response.headers["Content-Security-Policy"] = CONTENT_SECURITY_POLICY
    return response


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Middleware that adds secure HTTP headers to every response."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Process request and add security headers to response."""
        response = await call_next(request)
        return apply_security_headers(response, request.url.path)

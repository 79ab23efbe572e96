"""
Development server entry point.

Usage:
    python -m app
"""

import uvicorn

from app.core.config import settings


def main() -> None:
    """Serve the ASGI application with uvicorn."""
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()

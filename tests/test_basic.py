"""
Basic application tests.

Validates that the FastAPI app starts correctly and the
health endpoint responds as expected.
"""

import json
import logging
from wsgiref.util import setup_testing_defaults

from fastapi.testclient import TestClient

from app.core.config import Settings, settings
from app.main import app
from app.shared.logging import configure_logging

client = TestClient(app)


class TestHealthEndpoint:
    """Tests for the health check endpoint."""

    def test_health_returns_200(self) -> None:
        """Health endpoint must return HTTP 200 with status ok."""
        response = client.get("/health")
        assert response.status_code == 200

    def test_health_response_body(self) -> None:
        """Health endpoint must return status and version fields."""
        body = client.get("/health").json()
        assert body["status"] == "ok"
        assert "version" in body

    def test_health_reports_users_backend(self) -> None:
        """Health reports the configured users storage backend."""
        body = client.get("/health").json()
        assert body["users_backend"] == settings.user_repository_backend
        assert set(body) == {"status", "version", "users_backend"}


class TestAppConfiguration:
    """Tests for settings, docs exposure and the WSGI wrapper."""

    def test_default_settings(self, monkeypatch) -> None:
        monkeypatch.delenv("USER_REPOSITORY_BACKEND", raising=False)
        monkeypatch.delenv("DEBUG", raising=False)
        settings = Settings(_env_file=None)
        assert settings.user_repository_backend == "console"
        assert settings.debug is False

    def test_settings_read_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("USER_REPOSITORY_BACKEND", "memory")
        monkeypatch.setenv("PORT", "9000")
        settings = Settings(_env_file=None)
        assert settings.user_repository_backend == "memory"
        assert settings.port == 9000

    def test_docs_hidden_outside_debug(self) -> None:
        """OpenAPI docs are only served in debug mode."""
        assert client.get("/docs").status_code == 404

    def test_wsgi_application_serves_requests(self) -> None:
        """The WSGI wrapper answers a plain WSGI call."""
        from app.wsgi import application

        environ: dict = {}
        setup_testing_defaults(environ)
        environ["PATH_INFO"] = "/api/users"
        statuses: list[str] = []

        def start_response(status, headers, exc_info=None):
            statuses.append(status)

        body = b"".join(application(environ, start_response))

        assert statuses == ["200 OK"]
        assert json.loads(body) == {"message": "Users API is working!"}


class TestLoggingConfiguration:
    """Tests for configure_logging."""

    def test_sets_root_level(self) -> None:
        configure_logging("DEBUG")
        assert logging.getLogger().level == logging.DEBUG
        configure_logging("INFO")

    def test_unknown_level_falls_back_to_info(self) -> None:
        configure_logging("CHATTY")
        assert logging.getLogger().level == logging.INFO

    def test_uvicorn_loggers_quietened(self) -> None:
        configure_logging("DEBUG")
        assert logging.getLogger("uvicorn.access").level == logging.WARNING
        configure_logging("INFO")

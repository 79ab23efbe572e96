"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here.
"""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Exposes the OpenAPI docs. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        host: Interface the development server binds to.
        port: Port the development server listens on.
        rate_limit_default: Rate limit applied to write endpoints.
        rate_limit_enabled: Turn rate limiting on or off.
        user_repository_backend: Storage adapter for users ("console" or "memory").
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "CleanArchitecture"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000
    rate_limit_default: str = "60/minute"
    rate_limit_enabled: bool = True
    user_repository_backend: Literal["console", "memory"] = "console"


settings = Settings()

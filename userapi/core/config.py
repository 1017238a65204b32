"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
            Also provisions the users table at startup.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        host: Bind address used by ``userapi.cli serve``.
        port: Bind port used by ``userapi.cli serve``.
        database_url: SQLAlchemy URL of the user store.
        rate_limit_enabled: Toggle the per-client rate limiter.
        rate_limit_default: Default rate limit for all endpoints.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "User Directory API"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 5500
    database_url: str = "sqlite:///./users.db"
    rate_limit_enabled: bool = True
    rate_limit_default: str = "60/minute"


settings = Settings()

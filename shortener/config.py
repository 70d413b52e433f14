"""Application configuration."""

import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from typing import Any, Literal

import structlog
from pydantic import computed_field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

MIN_SHORT_CODE_LENGTH = 6
MAX_SHORT_CODE_LENGTH = 8


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Server
    PORT: int = 3000
    BASE_URL: str = "http://localhost:3000"

    # API (constants, not from env)
    API_V1_PREFIX: str = "/api/v1"
    PROJECT_NAME: str = "URL Shortener API"
    VERSION: str = "0.1.0"

    # Environment
    ENVIRONMENT: Literal["development", "production", "test"] = "development"

    # CORS
    CORS_ORIGINS: list[str] = ["*"]

    # Backing store
    STORE_BACKEND: Literal["sql", "redis"] = "sql"
    STORE_HOST: str = "localhost"
    STORE_PORT: int = 5432
    STORE_USER: str = "shortener"
    STORE_PASSWORD: str = "shortener_dev_password"  # noqa: S105
    STORE_NAME: str = "shortener"
    DATABASE_URL: str | None = None
    REDIS_URL: str = "redis://localhost:6379/0"
    REDIS_SOCKET_TIMEOUT_SECONDS: float = 2.0
    ANONYMOUS_URL_TTL_DAYS: int = 7

    # Short codes
    SHORT_CODE_LENGTH: int = 7
    SHORT_CODE_MAX_ATTEMPTS: int = 8
    SHORTEN_TIMEOUT_SECONDS: float = 5.0
    RESOLVE_TIMEOUT_SECONDS: float = 2.0

    # Auth
    SECRET_KEY: str = ""
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 10
    ACCESS_TOKEN_ISSUER: str = "urlShortenerAPI"
    ACCESS_TOKEN_AUDIENCE: str = "urlShortenerAPI"
    SESSION_TTL_DAYS: int = 30
    SESSION_SECRET_LENGTH: int = 16
    REFRESH_TOKEN_SECRET: str = ""
    REFRESH_TOKEN_DIGEST_ALGORITHM: str = "sha256"
    COOKIE_SECURE: bool = True
    PASSWORD_PEPPER: str = ""

    @computed_field  # type: ignore[prop-decorator]
    @property
    def database_url(self) -> str:
        """SQLAlchemy URL, either given directly or composed from the STORE_* parts."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql://{self.STORE_USER}:{self.STORE_PASSWORD}"
            f"@{self.STORE_HOST}:{self.STORE_PORT}/{self.STORE_NAME}"
        )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def session_ttl_seconds(self) -> int:
        return self.SESSION_TTL_DAYS * 24 * 60 * 60

    @field_validator("BASE_URL", mode="after")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        """Short links are composed as BASE_URL + "/" + code."""
        return value.rstrip("/")

    @field_validator("SHORT_CODE_LENGTH", mode="after")
    @classmethod
    def validate_short_code_length(cls, value: int) -> int:
        if not MIN_SHORT_CODE_LENGTH <= value <= MAX_SHORT_CODE_LENGTH:
            msg = (
                f"SHORT_CODE_LENGTH must be between {MIN_SHORT_CODE_LENGTH} "
                f"and {MAX_SHORT_CODE_LENGTH}"
            )
            raise ValueError(msg)
        return value

    @field_validator("SHORT_CODE_MAX_ATTEMPTS", mode="after")
    @classmethod
    def validate_max_attempts(cls, value: int) -> int:
        if value < 1:
            msg = "SHORT_CODE_MAX_ATTEMPTS must be at least 1"
            raise ValueError(msg)
        return value

    @model_validator(mode="after")
    def validate_production_secrets(self) -> "Settings":
        """Refuse to run in production with the empty development secrets."""
        if self.ENVIRONMENT != "production":
            return self
        if not self.SECRET_KEY:
            msg = "SECRET_KEY is required in production"
            raise ValueError(msg)
        if not self.REFRESH_TOKEN_SECRET:
            msg = "REFRESH_TOKEN_SECRET is required in production"
            raise ValueError(msg)
        return self


def configure_logging(environment: str = "development") -> None:
    """Configure structured logging with structlog."""
    # Determine if we should use JSON output (production) or console output (dev)
    use_json = environment == "production"

    # Configure stdlib logging
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=logging.DEBUG if environment == "development" else logging.INFO,
    )

    # Configure structlog
    processors: list[Callable[..., Any]] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if use_json:
        # Production: JSON output
        processors.append(structlog.processors.JSONRenderer())
    else:
        # Development: Console output with colors
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

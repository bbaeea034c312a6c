"""Application configuration."""

import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

import structlog
from pydantic import computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Path constants - calculated once at module load
PROJECT_ROOT = Path(__file__).parent.parent.resolve()


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Database
    DATABASE_URL: str = f"sqlite:///{PROJECT_ROOT / 'flashdeck.db'}"

    # API (constants, not from env)
    API_V1_PREFIX: str = "/api/v1"
    PROJECT_NAME: str = "flashdeck API"
    VERSION: str = "0.1.0"

    # Environment
    ENVIRONMENT: Literal["development", "production", "test"] = "development"

    # CORS
    CORS_ORIGINS: list[str] = ["*"]

    # Text extraction (OCR.space compatible API)
    OCR_API_URL: str = "https://api.ocr.space/parse/image"
    OCR_API_KEY: str | None = None
    OCR_LANGUAGE: str = "eng"
    OCR_TIMEOUT_SECONDS: float = 30.0
    OCR_RATE_LIMIT: str = "5/minute"

    # Quiz sessions
    QUIZ_FEEDBACK_SECONDS: float = 1.2
    QUIZ_DEFAULT_QUESTION_COUNT: int = 10
    QUIZ_MAX_TIME_LIMIT_SECONDS: int = 600

    # Study sessions
    STUDY_WRAP_AROUND: bool = True

    # Live session registry
    LIVE_SESSION_TTL_SECONDS: int = 3600

    @computed_field  # type: ignore[prop-decorator]
    @property
    def ocr_enabled(self) -> bool:
        """Whether image import is available."""
        return bool(self.OCR_API_KEY)

    @field_validator(
        "QUIZ_FEEDBACK_SECONDS", "OCR_TIMEOUT_SECONDS", "LIVE_SESSION_TTL_SECONDS", mode="after"
    )
    @classmethod
    def non_negative(cls, value: float) -> float:
        """Reject negative timings."""
        if value < 0:
            msg = "must not be negative"
            raise ValueError(msg)
        return value

    @field_validator("QUIZ_DEFAULT_QUESTION_COUNT", "QUIZ_MAX_TIME_LIMIT_SECONDS", mode="after")
    @classmethod
    def positive(cls, value: int) -> int:
        """Reject zero or negative counts."""
        if value <= 0:
            msg = "must be positive"
            raise ValueError(msg)
        return value


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

    processors: list[Callable[..., Any]] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if use_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
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

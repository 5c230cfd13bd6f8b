"""Configuration for resultkit.

All settings can be overridden via environment variables with the
RESULTKIT_ prefix. Example: RESULTKIT_LOG_LEVEL=DEBUG, RESULTKIT_REPR_LIMIT=80
"""

from __future__ import annotations

from enum import Enum
from functools import lru_cache
from typing import Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings


class LogLevel(str, Enum):
    """Accepted logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class ResultSettings(BaseSettings):
    """Library-wide settings."""

    model_config = {"env_prefix": "RESULTKIT_"}

    log_level: LogLevel = Field(
        default=LogLevel.WARNING, description="Log level used by the CLI"
    )
    repr_limit: int = Field(
        default=200,
        ge=8,
        description="Max characters of a payload repr shown in misuse messages",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.upper()
        return value


@lru_cache(maxsize=1)
def get_settings() -> ResultSettings:
    """Return the process-wide settings, read once from the environment."""
    return ResultSettings()


def describe(value: object, limit: Optional[int] = None) -> str:
    """Return ``repr(value)`` cut down to ``limit`` characters.

    Never raises: a failing ``__repr__`` falls back to ``object.__repr__``,
    and invalid settings leave the text untruncated.
    """
    if limit is None:
        try:
            limit = get_settings().repr_limit
        except ValidationError:
            limit = None
    try:
        text = repr(value)
    except Exception:
        text = object.__repr__(value)
    if limit is None or len(text) <= limit:
        return text
    return text[: limit - 3] + "..."

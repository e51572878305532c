# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: simplify-result
"""
Environment-driven settings for the loggers behind error sinks.

Every field can be set with a ``SIMPLIFY_RESULT_LOGGING_`` variable, for
example ``SIMPLIFY_RESULT_LOGGING_LEVEL=debug``.
"""

from __future__ import annotations

import logging
from typing import Any, Literal, get_args

from pydantic import Field, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from simplify_result.errors import LoggingError

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LOG_LEVELS: tuple[str, ...] = get_args(LogLevel)


def normalize_level(value: Any) -> str:
    """Return the upper-case level name, or raise ValueError for unknown levels."""
    if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
        raise ValueError(f"Invalid log level: {value!r}")
    return value.upper()


class LoggingSettings(BaseSettings):
    """Output options for ``ResultLogger`` and the default error sink."""

    model_config = SettingsConfigDict(
        env_prefix="SIMPLIFY_RESULT_LOGGING_",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
    )

    level: LogLevel = "INFO"
    json_format: bool = False
    include_timestamp: bool = True
    include_level: bool = True
    console_enabled: bool = True
    file_enabled: bool = False
    file_path: str | None = None
    sink_logger_name: str = Field(
        default="simplify_result.hooks",
        description="Logger used by LoggerErrorSink when none is given",
    )

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, v: Any) -> str:
        return normalize_level(v)

    @model_validator(mode="after")
    def _file_needs_path(self) -> LoggingSettings:
        if self.file_enabled and not self.file_path:
            raise ValueError("file_enabled requires file_path")
        return self

    @property
    def stdlib_level(self) -> int:
        return logging.getLevelName(self.level)

    @classmethod
    def load(cls) -> LoggingSettings:
        """
        Read settings from the environment.

        Raises:
            LoggingError: If a variable holds an invalid value
        """
        try:
            return cls()
        except ValidationError as e:
            raise LoggingError(
                f"Invalid logging configuration: {e.error_count()} error(s)",
                errors=[err["msg"] for err in e.errors()],
            ) from e

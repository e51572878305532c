# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: simplify-result
"""
Logger implementation for the simplify-result package.

This module provides the default logger implementation based on Python's
standard logging module, enhanced with structured logging capabilities.
"""

from __future__ import annotations

import datetime
import enum
import json
import logging
import sys
import uuid
from logging import StreamHandler
from typing import Any

from simplify_result.errors import LoggingError
from simplify_result.logging.config import LoggingSettings, normalize_level

# Record attribute holding the structured context of a log call
CONTEXT_ATTR = "structured_context"


class ResultJsonEncoder(json.JSONEncoder):
    """JSON encoder for values that commonly appear in log context."""

    def default(self, obj: Any) -> Any:
        if isinstance(obj, datetime.datetime | datetime.date):
            return obj.isoformat()
        if isinstance(obj, uuid.UUID):
            return str(obj)
        if isinstance(obj, enum.Enum):
            return obj.value
        if isinstance(obj, BaseException):
            return {"type": type(obj).__name__, "message": str(obj)}
        if isinstance(obj, set | frozenset | tuple):
            return list(obj)
        if hasattr(obj, "to_dict"):
            return obj.to_dict()
        return str(obj)


class StructuredFormatter(logging.Formatter):
    """Formatter that supports structured logging with context data."""

    def __init__(
        self,
        json_format: bool = False,
        include_timestamp: bool = True,
        include_level: bool = True,
    ) -> None:
        """Initialize a structured formatter.

        Args:
            json_format: Whether to format logs as JSON
            include_timestamp: Whether to include timestamps in logs
            include_level: Whether to include log level in logs
        """
        self.json_format = json_format
        self.include_timestamp = include_timestamp
        self.include_level = include_level

        fmt = "%(message)s"
        if include_timestamp:
            fmt = "%(asctime)s " + fmt
        if include_level and not json_format:
            fmt = fmt + " [%(levelname)s]"

        super().__init__(fmt=fmt, datefmt="%Y-%m-%d %H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record with structured data.

        Args:
            record: The log record to format

        Returns:
            Formatted log string
        """
        extra: dict[str, Any] = dict(getattr(record, CONTEXT_ATTR, None) or {})

        if self.json_format:
            return self._format_json(record, extra)
        message = super().format(record)
        return self._format_text(message, extra)

    def _format_json(self, record: logging.LogRecord, extra: dict[str, Any]) -> str:
        log_data: dict[str, Any] = {"message": record.getMessage(), **extra}
        log_data["logger"] = record.name

        if self.include_level:
            log_data["level"] = record.levelname

        if self.include_timestamp:
            log_data["timestamp"] = self.formatTime(record, self.datefmt)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
            log_data["error"] = str(record.exc_info[1])

        return json.dumps(log_data, cls=ResultJsonEncoder)

    def _format_text(self, message: str, extra: dict[str, Any]) -> str:
        if not extra:
            return message
        ctx_str = " ".join(f"{k}={self._format_value(v)}" for k, v in extra.items())
        # Keep any traceback after the context
        head, sep, tail = message.partition("\n")
        return f"{head} {ctx_str}{sep}{tail}"

    def _format_value(self, value: Any) -> str:
        """Format a value for text output."""
        if isinstance(value, str):
            if " " in value:
                return f'"{value}"'
            return value
        if isinstance(value, datetime.datetime | datetime.date):
            return value.isoformat()
        if isinstance(value, enum.Enum):
            return str(value.value)
        if isinstance(value, dict | list | tuple):
            return json.dumps(value, cls=ResultJsonEncoder)
        return str(value)


class ResultLogger:
    """Default synchronous logger for simplify-result.

    Wraps a stdlib logger and attaches keyword arguments of each call as
    structured context. Context given to ``bind`` is attached to every call.
    """

    def __init__(
        self,
        name: str,
        settings: LoggingSettings | None = None,
        level: str | None = None,
    ) -> None:
        """
        Initialize a new logger.

        Args:
            name: Logger name
            settings: Optional logger settings (loads from environment if None)
            level: Optional level overriding the settings
        """
        self.name = name
        self._settings = settings or LoggingSettings.load()
        self._logger = logging.getLogger(name)
        self._bound_context: dict[str, Any] = {}
        self._configure(level or self._settings.level)

    def _configure(self, level: str) -> None:
        self.set_level(level)

        for handler in list(self._logger.handlers):
            self._logger.removeHandler(handler)

        formatter = StructuredFormatter(
            json_format=self._settings.json_format,
            include_timestamp=self._settings.include_timestamp,
            include_level=self._settings.include_level,
        )

        if self._settings.console_enabled:
            console = StreamHandler(sys.stdout)
            console.setFormatter(formatter)
            self._logger.addHandler(console)

        if self._settings.file_enabled:
            file_handler = logging.FileHandler(self._settings.file_path)
            file_handler.setFormatter(formatter)
            self._logger.addHandler(file_handler)

        self._logger.propagate = False

    @property
    def settings(self) -> LoggingSettings:
        return self._settings

    def set_level(self, level: str) -> None:
        """Set the minimum level of this logger."""
        try:
            name = normalize_level(level)
        except ValueError as e:
            raise LoggingError(str(e), logger_name=self.name) from e
        self._logger.setLevel(logging.getLevelName(name))

    def bind(self, **context: Any) -> ResultLogger:
        """Return a logger sharing this one's handlers with extra bound context."""
        bound = object.__new__(ResultLogger)
        bound.name = self.name
        bound._settings = self._settings
        bound._logger = self._logger
        bound._bound_context = {**self._bound_context, **context}
        return bound

    def _log(
        self,
        level: int,
        msg: str,
        *args: Any,
        exc_info: Any = None,
        **context: Any,
    ) -> None:
        if not self._logger.isEnabledFor(level):
            return
        combined = {**self._bound_context, **context}
        self._logger.log(
            level,
            msg,
            *args,
            exc_info=exc_info,
            extra={CONTEXT_ATTR: combined},
            stacklevel=3,
        )

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log a debug message."""
        self._log(logging.DEBUG, msg, *args, **kwargs)

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log an info message."""
        self._log(logging.INFO, msg, *args, **kwargs)

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log a warning message."""
        self._log(logging.WARNING, msg, *args, **kwargs)

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log an error message."""
        self._log(logging.ERROR, msg, *args, **kwargs)

    def critical(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log a critical message."""
        self._log(logging.CRITICAL, msg, *args, **kwargs)

    def exception(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log an error message with the active exception attached."""
        kwargs.setdefault("exc_info", True)
        self._log(logging.ERROR, msg, *args, **kwargs)


_loggers: dict[str, ResultLogger] = {}


def get_logger(name: str, level: str | None = None) -> ResultLogger:
    """Get a logger for the specified name.

    Loggers are created once per name and reused.

    Args:
        name: Logger name (typically __name__)
        level: Optional log level override

    Returns:
        Configured logger instance
    """
    logger = _loggers.get(name)
    if logger is None:
        logger = ResultLogger(name, settings=LoggingSettings.load())
        _loggers[name] = logger
    if level is not None:
        logger.set_level(level)
    return logger


def clear_loggers() -> None:
    """Forget cached loggers so the next lookup re-reads the settings."""
    _loggers.clear()

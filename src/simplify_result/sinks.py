# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: simplify-result
"""Error sinks backed by loggers."""

from __future__ import annotations

import logging

from simplify_result.logging import LoggerProtocol, LoggingSettings, get_logger


class LoggerErrorSink:
    """Reports hook callback failures to a logger at ERROR level."""

    def __init__(self, logger: LoggerProtocol | logging.Logger | None = None) -> None:
        """
        Args:
            logger: Target logger. Defaults to the logger named by
                ``LoggingSettings.sink_logger_name``.
        """
        if logger is None:
            logger = get_logger(LoggingSettings.load().sink_logger_name)
        self.logger = logger

    def log_error(self, error: Exception, message: str) -> None:
        self.logger.error(message, exc_info=error)

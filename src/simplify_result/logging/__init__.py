# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: simplify-result
"""
Public API for the simplify-result logging system.
"""

from __future__ import annotations

from simplify_result.logging.config import (
    LOG_LEVELS,
    LoggingSettings,
    LogLevel,
    normalize_level,
)
from simplify_result.logging.logger import (
    ResultLogger,
    StructuredFormatter,
    clear_loggers,
    get_logger,
)
from simplify_result.logging.protocols import LoggerProtocol

__all__ = [
    "LOG_LEVELS",
    "LogLevel",
    "LoggerProtocol",
    "LoggingSettings",
    "ResultLogger",
    "StructuredFormatter",
    "clear_loggers",
    "get_logger",
    "normalize_level",
]

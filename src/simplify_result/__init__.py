# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: simplify-result
"""
Operation outcome type and HTTP response translation.

Business logic returns a ``Result``. The delivery layer turns it into a
status code and body with ``to_response``, or into a FastAPI response with
``simplify_result.fastapi.to_json_response``.
"""

from simplify_result.enums import FAILURE_TYPES, ResultType
from simplify_result.errors import (
    ErrorCategory,
    ErrorCode,
    ErrorSeverity,
    InvalidArgumentError,
    LoggingError,
    RouteNotFoundError,
    SimplifyResultError,
)
from simplify_result.hooks import ErrorSinkProtocol, on_failure, on_success
from simplify_result.response import ResponseDescriptor, to_response
from simplify_result.result import Result
from simplify_result.sinks import LoggerErrorSink

__all__ = [
    "FAILURE_TYPES",
    "ErrorCategory",
    "ErrorCode",
    "ErrorSeverity",
    "ErrorSinkProtocol",
    "InvalidArgumentError",
    "LoggerErrorSink",
    "LoggingError",
    "ResponseDescriptor",
    "Result",
    "ResultType",
    "RouteNotFoundError",
    "SimplifyResultError",
    "on_failure",
    "on_success",
    "to_response",
]

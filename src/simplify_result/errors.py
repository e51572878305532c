# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: simplify-result
"""
Base error classes for the simplify-result package.

These errors are raised for programming mistakes only, such as a Result
constructed with arguments that break its invariants. Failed business
operations are never raised. They are represented as failed Result values.
"""

from datetime import UTC, datetime
from enum import Enum
from typing import Any, Final


class ErrorSeverity(str, Enum):
    """Severity levels for package errors."""

    CRITICAL = "critical"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class ErrorCategory:
    """Named grouping for error codes."""

    def __init__(self, name: str) -> None:
        self.name = name

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"ErrorCategory({self.name!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ErrorCategory):
            return False
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)


class ErrorCode:
    """Error code associated with an error category."""

    def __init__(self, code: str, category: ErrorCategory) -> None:
        """Initialize a new error code.

        Args:
            code: Unique identifier for this error code
            category: The category this error code belongs to
        """
        self.code = code
        self.category = category

    def __str__(self) -> str:
        return self.code

    def __repr__(self) -> str:
        return f"ErrorCode({self.code!r}, {self.category!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, str):
            return self.code == other
        if not isinstance(other, ErrorCode):
            return False
        return self.code == other.code

    def __hash__(self) -> int:
        return hash(self.code)


ARGUMENT: Final = ErrorCategory("ARGUMENT")
ROUTING: Final = ErrorCategory("ROUTING")
LOGGING: Final = ErrorCategory("LOGGING")

INVALID_ARGUMENT: Final = ErrorCode("INVALID_ARGUMENT", ARGUMENT)
ROUTE_NOT_FOUND: Final = ErrorCode("ROUTE_NOT_FOUND", ROUTING)
LOGGING_CONFIGURATION: Final = ErrorCode("LOGGING_CONFIGURATION", LOGGING)


class SimplifyResultError(Exception):
    """
    Base error class for simplify-result errors.
    Should only be subclassed, not instantiated directly.
    """

    message: str
    code: ErrorCode
    severity: ErrorSeverity
    context: dict[str, Any]
    timestamp: datetime

    def __new__(cls, *args: Any, **kwargs: Any) -> "SimplifyResultError":
        if cls is SimplifyResultError:
            raise TypeError(
                "Do not instantiate SimplifyResultError directly; subclass it."
            )
        return super().__new__(cls)

    def __init__(
        self,
        message: str,
        code: ErrorCode,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        """Initialize a new error.

        Args:
            message: Human-readable error message
            code: ErrorCode object containing the code and category
            severity: Severity level of the error
            context: Additional contextual information
            **kwargs: Extra context keys
        """
        if not isinstance(code, ErrorCode):
            raise TypeError("code must be an ErrorCode instance, not a string")

        full_context = dict(context or {})
        full_context.update(kwargs)

        super().__init__(message)
        self.message = message
        self.code = code
        self.category = code.category
        self.severity = severity
        self.context = full_context
        self.timestamp = datetime.now(UTC)

    def add_context(self, key: str, value: Any) -> "SimplifyResultError":
        """Add a key-value pair to the error context and return self for chaining."""
        self.context[key] = value
        return self

    def __str__(self) -> str:
        """Get string representation of the error.

        Returns:
            String in format 'code: message'
        """
        return f"{self.code}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Return a dictionary representation of the error."""
        return {
            "code": self.code.code,
            "message": self.message,
            "category": self.category.name,
            "severity": self.severity.name,
            "context": self.context,
            "timestamp": self.timestamp.isoformat(),
        }


class InvalidArgumentError(SimplifyResultError, ValueError):
    """Raised when a Result factory receives arguments that break its invariants."""

    def __init__(
        self,
        message: str,
        param_name: str | None = None,
        context: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            message,
            code=INVALID_ARGUMENT,
            context=context,
            param_name=param_name,
            **kwargs,
        )
        self.param_name = param_name


class RouteNotFoundError(SimplifyResultError, LookupError):
    """Raised when a Created result names a route the application does not know."""

    def __init__(self, action_name: str, **kwargs: Any) -> None:
        super().__init__(
            f"No route named '{action_name}' could be resolved",
            code=ROUTE_NOT_FOUND,
            action_name=action_name,
            **kwargs,
        )
        self.action_name = action_name


class LoggingError(SimplifyResultError):
    """Raised for invalid logging configuration."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(message, code=LOGGING_CONFIGURATION, **kwargs)

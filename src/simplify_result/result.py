# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: simplify-result
"""
Result objects reporting the outcome of an operation to the delivery layer.

A Result is either successful and carries a value, or failed and carries an
ordered collection of error messages. Never both. The ``result_type`` tells
the HTTP layer which semantic category the outcome belongs to.

Results are built through the named classmethod factories. Failed business
operations are returned as failed Results. Only broken factory arguments
raise ``InvalidArgumentError``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from http import HTTPStatus
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from simplify_result.enums import ResultType
from simplify_result.errors import InvalidArgumentError

if TYPE_CHECKING:
    from simplify_result.hooks import ErrorSinkProtocol
    from simplify_result.response import ResponseDescriptor

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Immutable outcome of an operation.

    Attributes:
        is_success: Whether the operation succeeded
        result_type: The outcome category
        value: The success value, always None on failure
        errors: Error messages, always None on success
        action_name: Route name used to build a Location header (Created only)
        route_values: Route parameters for the Location header (Created only)
        status_code: Overrides the default status of a Success result
        wrap_in_data: Envelope the success payload as ``{"data": value}``
    """

    is_success: bool
    result_type: ResultType
    value: T | None = None
    errors: tuple[str, ...] | None = None
    action_name: str | None = None
    route_values: Mapping[str, Any] | None = None
    status_code: HTTPStatus | int | None = None
    wrap_in_data: bool = False

    def __post_init__(self) -> None:
        if self.errors is not None and not isinstance(self.errors, tuple):
            object.__setattr__(self, "errors", tuple(self.errors))
        if self.is_success and self.errors:
            raise InvalidArgumentError(
                "Result of success cannot have errors", param_name="errors"
            )
        if not self.is_success and self.value is not None:
            raise InvalidArgumentError(
                "Result of error cannot have value", param_name="value"
            )
        if self.is_success:
            object.__setattr__(self, "errors", None)
        elif self.errors is None:
            object.__setattr__(self, "errors", ())
        if self.route_values is not None and not isinstance(
            self.route_values, MappingProxyType
        ):
            object.__setattr__(
                self, "route_values", MappingProxyType(dict(self.route_values))
            )

    @property
    def is_failure(self) -> bool:
        """Check if the result is a failure."""
        return not self.is_success

    # Factories

    @classmethod
    def success(
        cls,
        value: T,
        status_code: HTTPStatus | int | None = None,
        wrap_in_data: bool = False,
    ) -> Result[T]:
        """
        Create a successful result.

        Args:
            value: The value returned on success
            status_code: Status code replacing the default 200
            wrap_in_data: Envelope the payload as ``{"data": value}``
        """
        return cls(
            True,
            ResultType.SUCCESS,
            value,
            status_code=status_code,
            wrap_in_data=wrap_in_data,
        )

    @classmethod
    def no_content(cls) -> Result[T]:
        """Create a successful result with no content."""
        return cls(True, ResultType.NO_CONTENT)

    @classmethod
    def created(
        cls, value: T, action_name: str, route_values: Mapping[str, Any]
    ) -> Result[T]:
        """
        Create a successful result for a newly created resource.

        Args:
            value: The created resource
            action_name: Name of the route that serves the resource
            route_values: Parameters for that route

        Raises:
            InvalidArgumentError: If action_name is blank or route_values is None
        """
        if action_name is None or not str(action_name).strip():
            raise InvalidArgumentError(
                "The 'action_name' parameter is required.", param_name="action_name"
            )
        if route_values is None:
            raise InvalidArgumentError(
                "The 'route_values' parameter is required.",
                param_name="route_values",
            )
        return cls(
            True,
            ResultType.CREATED,
            value,
            action_name=action_name,
            route_values=route_values,
        )

    @classmethod
    def failure(
        cls, result_type: ResultType, errors: Iterable[str] | str
    ) -> Result[T]:
        """
        Create a failed result from a collection of error messages.

        The collection may be empty and its entries are not validated.
        A plain string is treated as a single message and goes through
        ``failure_message``.

        Raises:
            InvalidArgumentError: If errors is None or result_type is not a
                failure type
        """
        if isinstance(errors, str):
            return cls.failure_message(result_type, errors)
        _check_failure_type(result_type)
        if errors is None:
            raise InvalidArgumentError(
                "The 'errors' parameter is required.", param_name="errors"
            )
        return cls(False, result_type, errors=tuple(errors))

    @classmethod
    def failure_message(cls, result_type: ResultType, error: str) -> Result[T]:
        """
        Create a failed result from a single error message.

        Raises:
            InvalidArgumentError: If error is not a string, is empty or whitespace, or
                result_type is not a failure type
        """
        _check_failure_type(result_type)
        if not isinstance(error, str) or not error.strip():
            raise InvalidArgumentError(
                "Error message cannot be null or whitespace.", param_name="error"
            )
        return cls(False, result_type, errors=(error,))

    @classmethod
    def not_found(cls, message: str = "Resource not found") -> Result[T]:
        return cls.failure_message(ResultType.NOT_FOUND, message)

    @classmethod
    def validation_error(cls, errors: Iterable[str]) -> Result[T]:
        return cls.failure(ResultType.VALIDATION, errors)

    @classmethod
    def unauthorized(cls, message: str = "Unauthorized") -> Result[T]:
        return cls.failure_message(ResultType.UNAUTHORIZED, message)

    @classmethod
    def conflict(cls, message: str = "Conflict detected") -> Result[T]:
        return cls.failure_message(ResultType.CONFLICT, message)

    # Fluent helpers

    def on_success(
        self, action: Callable[[T], Any], sink: ErrorSinkProtocol | None = None
    ) -> Result[T]:
        """Run ``action`` with the value if successful. See ``hooks.on_success``."""
        from simplify_result.hooks import on_success

        return on_success(self, action, sink)

    def on_failure(
        self,
        action: Callable[[tuple[str, ...]], Any],
        sink: ErrorSinkProtocol | None = None,
    ) -> Result[T]:
        """Run ``action`` with the errors if failed. See ``hooks.on_failure``."""
        from simplify_result.hooks import on_failure

        return on_failure(self, action, sink)

    def to_response(self) -> ResponseDescriptor:
        """Translate this result into a response descriptor."""
        from simplify_result.response import to_response

        return to_response(self)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert the result to a dictionary.

        Returns:
            A dictionary representation of the result
        """
        return {
            "is_success": self.is_success,
            "result_type": self.result_type.value,
            "value": self.value,
            "errors": list(self.errors) if self.errors is not None else None,
            "action_name": self.action_name,
            "route_values": (
                dict(self.route_values) if self.route_values is not None else None
            ),
            "status_code": (
                int(self.status_code) if self.status_code is not None else None
            ),
            "wrap_in_data": self.wrap_in_data,
        }

    def __str__(self) -> str:
        if self.is_success:
            return f"{self.result_type.value}({self.value})"
        return f"{self.result_type.value}({list(self.errors or ())})"


def _check_failure_type(result_type: ResultType) -> None:
    if not isinstance(result_type, ResultType) or not result_type.is_failure_type:
        raise InvalidArgumentError(
            f"'{result_type}' is not a failure result type",
            param_name="result_type",
        )

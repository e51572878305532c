# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: simplify-result
"""
Observer hooks for Result objects.

Hooks run a caller-supplied callback when a result succeeded or failed and
then return the same result. A callback that raises never turns the result
into an error. The exception is reported to the optional sink and dropped.
A sink that raises is ignored as well.
"""

from __future__ import annotations

from collections.abc import Callable
from contextlib import suppress
from typing import TYPE_CHECKING, Any, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from simplify_result.result import Result

T = TypeVar("T")

SUCCESS_ACTION_ERROR = "Error executing success action."
FAILURE_ACTION_ERROR = "Error executing error action."


@runtime_checkable
class ErrorSinkProtocol(Protocol):
    """Receives exceptions raised by hook callbacks."""

    def log_error(self, error: Exception, message: str) -> None: ...


def on_success(
    result: Result[T],
    action: Callable[[T], Any],
    sink: ErrorSinkProtocol | None = None,
) -> Result[T]:
    """
    Execute an action if the result is successful and has a value.

    Args:
        result: The result to observe
        action: Called with the result value
        sink: Receives any exception raised by ``action``

    Returns:
        The original result
    """
    if result.is_success and result.value is not None:
        try:
            action(result.value)
        except Exception as e:
            _report(sink, e, SUCCESS_ACTION_ERROR)
    return result


def on_failure(
    result: Result[T],
    action: Callable[[tuple[str, ...]], Any],
    sink: ErrorSinkProtocol | None = None,
) -> Result[T]:
    """
    Execute an action if the result is not successful.

    Args:
        result: The result to observe
        action: Called with the error collection
        sink: Receives any exception raised by ``action``

    Returns:
        The original result
    """
    if not result.is_success and result.errors is not None:
        try:
            action(result.errors)
        except Exception as e:
            _report(sink, e, FAILURE_ACTION_ERROR)
    return result


def _report(sink: ErrorSinkProtocol | None, error: Exception, message: str) -> None:
    if sink is None:
        return
    with suppress(Exception):
        sink.log_error(error, message)

# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: simplify-result
"""
Translation of Result objects into HTTP-style response descriptors.

The descriptor holds a status code and a body. Serializing the body and
emitting headers is left to the web framework (see ``simplify_result.fastapi``).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from http import HTTPStatus
from typing import TYPE_CHECKING, Any

from simplify_result.enums import ResultType

if TYPE_CHECKING:
    from simplify_result.result import Result


@dataclass(frozen=True)
class ResponseDescriptor:
    """
    Status code and body for the HTTP layer.

    Attributes:
        status_code: HTTP status code
        body: Payload to serialize, None for an empty body
        action_name: Route name for the Location header of a Created response
        route_values: Route parameters for the Location header
    """

    status_code: int
    body: Any = None
    action_name: str | None = None
    route_values: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "status_code", int(self.status_code))


def to_response(result: Result[Any]) -> ResponseDescriptor:
    """
    Convert a Result into a ResponseDescriptor.

    Error collections are enveloped as ``{"errors": [...]}`` for FAILURE and
    UNAUTHORIZED and returned as a bare list for NOT_FOUND and CONFLICT.
    Clients depend on both shapes.

    Args:
        result: The Result object to convert

    Returns:
        A ResponseDescriptor based on the result type
    """
    match result.result_type:
        case ResultType.SUCCESS if result.status_code is None:
            return ResponseDescriptor(HTTPStatus.OK, _success_payload(result))
        case ResultType.SUCCESS:
            return ResponseDescriptor(
                int(result.status_code), _success_payload(result)
            )
        case ResultType.CREATED if (
            result.action_name is not None and result.route_values is not None
        ):
            return ResponseDescriptor(
                HTTPStatus.CREATED,
                result.value,
                action_name=result.action_name,
                route_values=result.route_values,
            )
        case ResultType.NO_CONTENT:
            return ResponseDescriptor(HTTPStatus.NO_CONTENT)
        case ResultType.FAILURE:
            return ResponseDescriptor(
                HTTPStatus.INTERNAL_SERVER_ERROR, {"errors": _error_list(result)}
            )
        case ResultType.NOT_FOUND:
            return ResponseDescriptor(HTTPStatus.NOT_FOUND, _error_list(result))
        case ResultType.VALIDATION:
            # Falls back to the value when there is nothing to report
            body = _error_list(result) if result.errors else result.value
            return ResponseDescriptor(HTTPStatus.UNPROCESSABLE_ENTITY, body)
        case ResultType.CONFLICT:
            return ResponseDescriptor(HTTPStatus.CONFLICT, _error_list(result))
        case ResultType.UNAUTHORIZED:
            return ResponseDescriptor(
                HTTPStatus.UNAUTHORIZED, {"errors": _error_list(result)}
            )
        case _:
            status_code = (
                result.status_code if result.status_code is not None else HTTPStatus.OK
            )
            return ResponseDescriptor(int(status_code), result.value)


def _success_payload(result: Result[Any]) -> Any:
    return {"data": result.value} if result.wrap_in_data else result.value


def _error_list(result: Result[Any]) -> list[str] | None:
    return list(result.errors) if result.errors is not None else None

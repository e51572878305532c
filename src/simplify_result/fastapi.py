# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: simplify-result
"""
FastAPI integration for Result objects.

Endpoints return ``to_json_response(result, request)`` to send a Result
with the status code and body chosen by ``simplify_result.response``.

Example:
    ```python
    from fastapi import FastAPI, Request
    from simplify_result import Result
    from simplify_result.fastapi import to_json_response

    app = FastAPI()

    @app.get("/items/{item_id}", name="get_item")
    async def get_item(item_id: int):
        ...

    @app.post("/items")
    async def create_item(request: Request):
        item = {"id": 1}
        result = Result.created(item, "get_item", {"item_id": item["id"]})
        return to_json_response(result, request)
    ```
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from fastapi import Request, Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from starlette.routing import NoMatchFound

from simplify_result.errors import RouteNotFoundError
from simplify_result.response import ResponseDescriptor, to_response
from simplify_result.result import Result


def to_json_response(result: Result[Any], request: Request | None = None) -> Response:
    """
    Convert a Result into a FastAPI response.

    Args:
        result: The Result to send
        request: The current request, needed to build the Location header
            of a Created response

    Returns:
        An empty Response for 204, a JSONResponse otherwise

    Raises:
        RouteNotFoundError: If a Created result names an unknown route
    """
    descriptor = to_response(result)

    if descriptor.status_code == status.HTTP_204_NO_CONTENT:
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    response = JSONResponse(
        status_code=descriptor.status_code,
        content=jsonable_encoder(descriptor.body),
    )

    if request is not None and _has_location(descriptor):
        response.headers["Location"] = build_location(
            request, descriptor.action_name, descriptor.route_values
        )

    return response


def build_location(
    request: Request, action_name: str, route_values: Mapping[str, Any]
) -> str:
    """
    Build the URL of a named route.

    Route values matching path parameters of the route fill the path. The
    rest are appended as query parameters.

    Raises:
        RouteNotFoundError: If no route with that name accepts the values
    """
    path_param_names = _path_param_names(request, action_name)
    if path_param_names is None:
        path_param_names = set(route_values)

    path_params = {k: v for k, v in route_values.items() if k in path_param_names}
    query_params = {
        k: v for k, v in route_values.items() if k not in path_param_names
    }

    try:
        url = request.url_for(action_name, **path_params)
    except NoMatchFound as e:
        raise RouteNotFoundError(
            action_name, route_values=dict(route_values)
        ) from e

    if query_params:
        url = url.include_query_params(**jsonable_encoder(query_params))
    return str(url)


def _has_location(descriptor: ResponseDescriptor) -> bool:
    return descriptor.action_name is not None and descriptor.route_values is not None


def _path_param_names(request: Request, action_name: str) -> set[str] | None:
    # Only top-level routes are inspected; mounted apps fall back to all values
    for route in request.app.router.routes:
        if getattr(route, "name", None) == action_name and hasattr(
            route, "param_convertors"
        ):
            return set(route.param_convertors)
    return None

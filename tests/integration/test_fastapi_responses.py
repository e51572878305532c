"""Tests for sending Result objects through FastAPI."""

from __future__ import annotations

import pytest
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from simplify_result import Result, ResultType, RouteNotFoundError
from simplify_result.fastapi import build_location, to_json_response


@pytest.fixture
def app() -> FastAPI:
    app = FastAPI()

    @app.get("/items/{item_id}", name="get_item")
    async def get_item(item_id: int):
        if item_id != 1:
            return to_json_response(Result.not_found(f"item {item_id} not found"))
        return to_json_response(Result.success({"id": 1}, wrap_in_data=True))

    @app.post("/items")
    async def create_item(request: Request):
        result = Result.created({"id": 1}, "get_item", {"item_id": 1, "view": "full"})
        return to_json_response(result, request)

    @app.post("/orphans")
    async def create_orphan(request: Request):
        result = Result.created({"id": 2}, "missing_route", {"id": 2})
        return to_json_response(result, request)

    @app.delete("/items/{item_id}")
    async def delete_item(item_id: int):
        return to_json_response(Result.no_content())

    @app.post("/checks")
    async def check():
        return to_json_response(Result.validation_error(["name is required"]))

    @app.get("/secret")
    async def secret():
        return to_json_response(Result.unauthorized())

    @app.get("/broken")
    async def broken():
        return to_json_response(Result.failure(ResultType.FAILURE, ["db down"]))

    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app, raise_server_exceptions=True)


class TestJsonResponses:
    def test_success_wrapped(self, client: TestClient) -> None:
        response = client.get("/items/1")

        assert response.status_code == 200
        assert response.json() == {"data": {"id": 1}}

    def test_not_found(self, client: TestClient) -> None:
        response = client.get("/items/2")

        assert response.status_code == 404
        assert response.json() == ["item 2 not found"]

    def test_created_sets_location(self, client: TestClient) -> None:
        response = client.post("/items")

        assert response.status_code == 201
        assert response.json() == {"id": 1}
        assert response.headers["location"] == "http://testserver/items/1?view=full"

    def test_created_with_unknown_route(self, client: TestClient) -> None:
        with pytest.raises(RouteNotFoundError):
            client.post("/orphans")

    def test_no_content(self, client: TestClient) -> None:
        response = client.delete("/items/1")

        assert response.status_code == 204
        assert response.content == b""

    def test_validation(self, client: TestClient) -> None:
        response = client.post("/checks")

        assert response.status_code == 422
        assert response.json() == ["name is required"]

    def test_unauthorized(self, client: TestClient) -> None:
        response = client.get("/secret")

        assert response.status_code == 401
        assert response.json() == {"errors": ["Unauthorized"]}

    def test_failure(self, client: TestClient) -> None:
        response = client.get("/broken")

        assert response.status_code == 500
        assert response.json() == {"errors": ["db down"]}


class TestWithoutRequest:
    def test_created_without_request_has_no_location(self) -> None:
        result = Result.created({"id": 1}, "get_item", {"item_id": 1})
        response = to_json_response(result)

        assert response.status_code == 201
        assert "location" not in response.headers


class TestBuildLocation:
    def test_path_params_only(self, app: FastAPI) -> None:
        request = Request(
            {
                "type": "http",
                "app": app,
                "router": app.router,
                "method": "GET",
                "path": "/",
                "headers": [(b"host", b"example.com")],
                "query_string": b"",
                "scheme": "https",
                "server": ("example.com", 443),
            }
        )

        assert build_location(request, "get_item", {"item_id": 5}) == (
            "https://example.com/items/5"
        )

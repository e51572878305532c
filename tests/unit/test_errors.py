"""Tests for the simplify-result error classes."""

from __future__ import annotations

import pytest

from simplify_result import (
    ErrorSeverity,
    InvalidArgumentError,
    LoggingError,
    Result,
    RouteNotFoundError,
    SimplifyResultError,
)
from simplify_result.errors import INVALID_ARGUMENT, ROUTE_NOT_FOUND


class TestSimplifyResultError:
    def test_cannot_instantiate_base(self) -> None:
        with pytest.raises(TypeError):
            SimplifyResultError("boom", code=INVALID_ARGUMENT)

    def test_code_must_be_error_code(self) -> None:
        class CustomError(SimplifyResultError):
            pass

        with pytest.raises(TypeError):
            CustomError("boom", code="RAW")  # type: ignore[arg-type]


class TestInvalidArgumentError:
    def test_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            Result.created("v", "", {})

    def test_attributes(self) -> None:
        error = InvalidArgumentError("bad", param_name="errors")

        assert error.code == INVALID_ARGUMENT
        assert error.code == "INVALID_ARGUMENT"
        assert error.category.name == "ARGUMENT"
        assert error.severity is ErrorSeverity.ERROR
        assert error.param_name == "errors"
        assert error.context == {"param_name": "errors"}
        assert str(error) == "INVALID_ARGUMENT: bad"

    def test_add_context_chains(self) -> None:
        error = InvalidArgumentError("bad").add_context("factory", "created")

        assert error.context["factory"] == "created"

    def test_to_dict(self) -> None:
        data = InvalidArgumentError("bad", param_name="error").to_dict()

        assert data["code"] == "INVALID_ARGUMENT"
        assert data["message"] == "bad"
        assert data["category"] == "ARGUMENT"
        assert data["severity"] == "ERROR"
        assert data["context"] == {"param_name": "error"}
        assert "timestamp" in data


class TestRouteNotFoundError:
    def test_attributes(self) -> None:
        error = RouteNotFoundError("get_item", route_values={"id": 1})

        assert isinstance(error, LookupError)
        assert error.code == ROUTE_NOT_FOUND
        assert error.action_name == "get_item"
        assert error.context["route_values"] == {"id": 1}

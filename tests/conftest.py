"""Top-level pytest configuration for simplify-result."""

from __future__ import annotations

from typing import Any

import pytest

from simplify_result.logging import clear_loggers


class RecordingSink:
    """Error sink that keeps every reported failure."""

    def __init__(self) -> None:
        self.calls: list[tuple[Exception, str]] = []

    def log_error(self, error: Exception, message: str) -> None:
        self.calls.append((error, message))


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture(autouse=True)
def fresh_loggers(monkeypatch: pytest.MonkeyPatch) -> Any:
    """Drop cached loggers and logging env vars around each test."""
    for var in (
        "SIMPLIFY_RESULT_LOGGING_LEVEL",
        "SIMPLIFY_RESULT_LOGGING_JSON_FORMAT",
        "SIMPLIFY_RESULT_LOGGING_FILE_ENABLED",
        "SIMPLIFY_RESULT_LOGGING_FILE_PATH",
        "SIMPLIFY_RESULT_LOGGING_SINK_LOGGER_NAME",
    ):
        monkeypatch.delenv(var, raising=False)
    clear_loggers()
    yield
    clear_loggers()

# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: simplify-result
"""Result type enumeration."""

from __future__ import annotations

from enum import Enum


class ResultType(str, Enum):
    """Closed set of outcome categories.

    Adding a member requires a matching branch in
    ``simplify_result.response.to_response``.
    """

    SUCCESS = "Success"
    CREATED = "Created"
    NO_CONTENT = "NoContent"
    FAILURE = "Failure"
    NOT_FOUND = "NotFound"
    VALIDATION = "Validation"
    CONFLICT = "Conflict"
    UNAUTHORIZED = "Unauthorized"

    @property
    def is_failure_type(self) -> bool:
        """Whether results of this type are built through the failure factories."""
        return self in FAILURE_TYPES


FAILURE_TYPES: frozenset[ResultType] = frozenset(
    {
        ResultType.FAILURE,
        ResultType.NOT_FOUND,
        ResultType.VALIDATION,
        ResultType.CONFLICT,
        ResultType.UNAUTHORIZED,
    }
)

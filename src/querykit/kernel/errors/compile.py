"""Compile errors – rejected filter parameters.

Every failure raised while compiling request parameters is a
:class:`CompileError`. Its ``kind`` is machine-readable and doubles as the
error ``code``; ``field``, ``operator`` and ``value`` identify the offending
parameter so the HTTP boundary can answer with a 400 naming the problem.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from querykit.kernel.errors.domain import ValidationError


class ErrorKind(str, Enum):
    INVALID_UUID = "invalid_uuid"
    INVALID_DATE = "invalid_date"
    INVALID_BOOLEAN = "invalid_boolean"
    INVALID_INTEGER = "invalid_integer"
    INVALID_FLOAT = "invalid_float"
    INVALID_ENUM_VALUE = "invalid_enum_value"
    TOO_MANY_VALUES = "too_many_values"
    INVALID_RANGE_COUNT = "invalid_range_count"
    UNSUPPORTED_OPERATOR = "unsupported_operator"
    SEARCH_TOO_LONG = "search_too_long"


class CompileError(ValidationError):
    """A request parameter could not be compiled into a predicate."""

    default_code = "compile_error"

    def __init__(
        self,
        kind: ErrorKind,
        field: str,
        *,
        operator: str | None = None,
        value: Any = None,
        reason: str | None = None,
        **kwargs: Any,
    ) -> None:
        self.kind = kind
        self.field = field
        if isinstance(operator, Enum):
            operator = operator.value
        self.operator = operator
        self.value = value
        self.reason = reason or kind.value.replace("_", " ")
        entry = {
            "field": field,
            "operator": self.operator,
            "value": value,
            "reason": self.reason,
        }
        super().__init__(
            f'Invalid filter "{self.parameter}": {self.reason}',
            code=kind.value,
            detail=dict(entry),
            errors=[{"kind": kind.value, **entry}],
            **kwargs,
        )

    @property
    def parameter(self) -> str:
        """The query-string key as the caller wrote it, e.g. ``age_gte``."""
        if self.operator is None or self.operator == "eq":
            return self.field
        return f"{self.field}_{self.operator}"


__all__ = ["CompileError", "ErrorKind"]

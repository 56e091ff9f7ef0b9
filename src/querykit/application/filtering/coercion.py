"""Application filtering – type coercion engine.

Converts raw request values into the semantic type declared for a field.
Every failure raises :class:`~querykit.kernel.errors.CompileError` naming
the field, the operator and the offending value.

| type    | result                     | failure kind         |
|---------|----------------------------|----------------------|
| uuid    | validated text             | INVALID_UUID         |
| date    | timezone-aware ``datetime``| INVALID_DATE         |
| boolean | ``bool``                   | INVALID_BOOLEAN      |
| integer | ``int``                    | INVALID_INTEGER      |
| float   | ``float``                  | INVALID_FLOAT        |
| enum    | upper-cased member         | INVALID_ENUM_VALUE   |
| string  | untouched text             | never                |
"""
from __future__ import annotations

import math
import re
from datetime import UTC, datetime
from typing import Any

from querykit.application.filtering.operators import Operator
from querykit.application.schema import FieldSpec, FieldType
from querykit.kernel.errors import CompileError, ErrorKind
from querykit.kernel.types import RawValue

_UUID_RE = re.compile(r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}", re.IGNORECASE)
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?")

_TRUE = frozenset({"true", "1"})
_FALSE = frozenset({"false", "0"})


def parse_boolean(value: Any) -> bool | None:
    """``True``/``False`` for ``true/false/1/0`` (any case) or a native bool, else ``None``."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return {1: True, 0: False}.get(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE:
            return True
        if lowered in _FALSE:
            return False
    return None


def single_value(raw: RawValue) -> str | bool:
    """Collapse a repeated key to its last occurrence."""
    if isinstance(raw, list):
        return raw[-1] if raw else ""
    return raw


def split_values(raw: RawValue) -> list[str]:
    """Comma-split a multi-value operand and trim each element."""
    if isinstance(raw, bool):
        return [_bool_text(raw)]
    chunks = raw if isinstance(raw, list) else [raw]
    values: list[str] = []
    for chunk in chunks:
        values.extend(part.strip() for part in str(chunk).split(","))
    return values


def coerce_value(value: str | bool, spec: FieldSpec, *, field: str, operator: Operator = Operator.EQ) -> Any:
    """Coerce one raw value to ``spec.type``."""

    def fail(kind: ErrorKind, reason: str) -> CompileError:
        return CompileError(kind, field, operator=operator, value=value, reason=reason)

    if spec.type is FieldType.BOOLEAN:
        flag = parse_boolean(value)
        if flag is None:
            raise fail(ErrorKind.INVALID_BOOLEAN, "expected true, false, 1 or 0")
        return flag

    text = _bool_text(value) if isinstance(value, bool) else value

    match spec.type:
        case FieldType.UUID:
            candidate = text.strip()
            if not _UUID_RE.fullmatch(candidate):
                raise fail(ErrorKind.INVALID_UUID, "not a valid UUID")
            return candidate
        case FieldType.DATE:
            parsed = _parse_datetime(text)
            if parsed is None:
                raise fail(ErrorKind.INVALID_DATE, "not an ISO-8601 date or date-time")
            return parsed
        case FieldType.INTEGER:
            candidate = text.strip()
            if not _INTEGER_RE.fullmatch(candidate):
                raise fail(ErrorKind.INVALID_INTEGER, "not an integer")
            try:
                return int(candidate)
            except ValueError:
                # more digits than the interpreter will convert
                raise fail(ErrorKind.INVALID_INTEGER, "integer too large") from None
        case FieldType.FLOAT:
            candidate = text.strip()
            if not _FLOAT_RE.fullmatch(candidate):
                raise fail(ErrorKind.INVALID_FLOAT, "not a number")
            parsed_float = float(candidate)
            if not math.isfinite(parsed_float):
                raise fail(ErrorKind.INVALID_FLOAT, "not a finite number")
            return parsed_float
        case FieldType.ENUM:
            candidate = text.strip().upper()
            if candidate not in spec.enum_values:
                raise fail(ErrorKind.INVALID_ENUM_VALUE, f"must be one of: {', '.join(spec.enum_values)}")
            return candidate
        case FieldType.STRING:
            return text
    raise AssertionError(f"unhandled field type {spec.type!r}")


def coerce_values(values: list[str], spec: FieldSpec, *, field: str, operator: Operator) -> list[Any]:
    return [coerce_value(v, spec, field=field, operator=operator) for v in values]


def _bool_text(value: bool) -> str:
    return "true" if value else "false"


def _parse_datetime(text: str) -> datetime | None:
    candidate = text.strip()
    if not candidate:
        return None
    try:
        parsed = datetime.fromisoformat(candidate)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


__all__ = ["coerce_value", "coerce_values", "parse_boolean", "single_value", "split_values"]

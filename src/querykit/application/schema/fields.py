"""Application schema – FieldType, FieldSpec and reserved request keys."""
from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from enum import Enum
from typing import Any

from querykit.config.validation import SchemaError

SEARCH_KEY = "search"
LIMIT_KEY = "limit"
OFFSET_KEY = "offset"
SORT_BY_KEY = "sort_by"
SORT_ORDER_KEY = "sort_order"

# Control keys are routed to the search/pagination/sort compilers and can
# never address a filterable field, even one declared with the same name.
RESERVED_KEYS: frozenset[str] = frozenset({SEARCH_KEY, LIMIT_KEY, OFFSET_KEY, SORT_BY_KEY, SORT_ORDER_KEY})


class FieldType(str, Enum):
    UUID = "uuid"
    BOOLEAN = "boolean"
    DATE = "date"
    INTEGER = "integer"
    FLOAT = "float"
    ENUM = "enum"
    STRING = "string"

    @classmethod
    def parse(cls, raw: "FieldType | str") -> "FieldType":
        if isinstance(raw, cls):
            return raw
        try:
            return cls(str(raw).lower())
        except ValueError:
            allowed = ", ".join(t.value for t in cls)
            raise SchemaError(f"Unknown field type {raw!r}; expected one of: {allowed}") from None


@dataclasses.dataclass(frozen=True)
class FieldSpec:
    """Declared type of one filterable field."""

    type: FieldType = FieldType.STRING
    enum_values: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "type", FieldType.parse(self.type))
        object.__setattr__(self, "enum_values", tuple(self.enum_values))
        if self.type is FieldType.ENUM and not self.enum_values:
            raise SchemaError("Enum fields must declare at least one value")

    @classmethod
    def of(cls, raw: "FieldSpec | FieldType | str | dict[str, Any]") -> "FieldSpec":
        """Accept a spec, a bare type, or a ``{"type": ..., "values": [...]}`` mapping."""
        if isinstance(raw, FieldSpec):
            return raw
        if isinstance(raw, dict):
            values: Iterable[str] = raw.get("enum_values") or raw.get("values") or ()
            return cls(type=raw.get("type", FieldType.STRING), enum_values=tuple(values))
        return cls(type=raw)


__all__ = [
    "FieldSpec",
    "FieldType",
    "LIMIT_KEY",
    "OFFSET_KEY",
    "RESERVED_KEYS",
    "SEARCH_KEY",
    "SORT_BY_KEY",
    "SORT_ORDER_KEY",
]

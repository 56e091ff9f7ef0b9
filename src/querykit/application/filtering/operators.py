"""Application filtering – Operator enum and suffix table."""
from __future__ import annotations

from enum import Enum

from querykit.application.schema import FieldType


class Operator(str, Enum):
    """Filter operator, spelled in the request as ``<field>_<value>``."""

    EQ = "eq"
    NE = "ne"
    GT = "gt"
    GTE = "gte"
    LT = "lt"
    LTE = "lte"
    IN = "in"
    BETWEEN = "between"
    IS_NULL = "null"
    IS_NOT_NULL = "not_null"
    LIKE = "like"
    ILIKE = "ilike"

    @property
    def suffix(self) -> str:
        return f"_{self.value}"


# Longest-match order: ``_not_null`` before ``_null``, ``_gte`` before ``_gt``,
# ``_ilike`` before ``_like``.
SUFFIX_ORDER: tuple[Operator, ...] = (
    Operator.BETWEEN,
    Operator.IS_NOT_NULL,
    Operator.IS_NULL,
    Operator.GTE,
    Operator.LTE,
    Operator.ILIKE,
    Operator.LIKE,
    Operator.IN,
    Operator.GT,
    Operator.LT,
    Operator.NE,
    Operator.EQ,
)

_ORDERING = frozenset({Operator.GT, Operator.GTE, Operator.LT, Operator.LTE, Operator.BETWEEN})
_PATTERN = frozenset({Operator.LIKE, Operator.ILIKE})

# Operators rejected per type when a schema runs in strict mode.
UNSUPPORTED_OPERATORS: dict[FieldType, frozenset[Operator]] = {
    FieldType.BOOLEAN: _ORDERING | _PATTERN,
    FieldType.UUID: _ORDERING | _PATTERN,
    FieldType.STRING: _ORDERING,
    FieldType.ENUM: _ORDERING,
    FieldType.INTEGER: _PATTERN,
    FieldType.FLOAT: _PATTERN,
    FieldType.DATE: _PATTERN,
}


def supports(field_type: FieldType, operator: Operator) -> bool:
    return operator not in UNSUPPORTED_OPERATORS.get(field_type, frozenset())


__all__ = ["Operator", "SUFFIX_ORDER", "UNSUPPORTED_OPERATORS", "supports"]

"""Application filtering – parameter key parser."""
from __future__ import annotations

import dataclasses

from querykit.application.filtering.operators import SUFFIX_ORDER, Operator
from querykit.application.schema import RESERVED_KEYS, FieldSchema, FieldSpec


@dataclasses.dataclass(frozen=True)
class ParsedKey:
    field: str
    operator: Operator
    spec: FieldSpec


def parse_key(key: str, schema: FieldSchema) -> ParsedKey | None:
    """Split ``key`` into a filterable field and an operator.

    Returns ``None`` for reserved keys and for keys that do not address a
    filterable field; such keys are ignored by the compiler. A suffix only
    counts when the remaining prefix is filterable, so a field literally
    named ``check_in`` still matches as implicit equality.

    Example::

        parse_key("age_gte", schema)      # ParsedKey("age", Operator.GTE, ...)
        parse_key("age", schema)          # ParsedKey("age", Operator.EQ, ...)
        parse_key("random_field", schema) # None
    """
    if key in RESERVED_KEYS:
        return None
    for operator in SUFFIX_ORDER:
        suffix = operator.suffix
        if len(key) > len(suffix) and key.endswith(suffix):
            field = key[: -len(suffix)]
            if schema.is_filterable(field):
                return ParsedKey(field, operator, schema.filterable_fields[field])
    if schema.is_filterable(key):
        return ParsedKey(key, Operator.EQ, schema.filterable_fields[key])
    return None


__all__ = ["ParsedKey", "parse_key"]

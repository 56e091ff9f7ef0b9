"""Application schema – per-entity field declarations."""
from querykit.application.schema.fields import (
    LIMIT_KEY,
    OFFSET_KEY,
    RESERVED_KEYS,
    SEARCH_KEY,
    SORT_BY_KEY,
    SORT_ORDER_KEY,
    FieldSpec,
    FieldType,
)
from querykit.application.schema.schema import FieldSchema

__all__ = [
    "FieldSchema",
    "FieldSpec",
    "FieldType",
    "LIMIT_KEY",
    "OFFSET_KEY",
    "RESERVED_KEYS",
    "SEARCH_KEY",
    "SORT_BY_KEY",
    "SORT_ORDER_KEY",
]

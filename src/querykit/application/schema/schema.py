"""Application schema – FieldSchema.

A :class:`FieldSchema` is declared once per entity (patients, visits,
invoices, ...) and passed to the compiler on every request. It decides
which request keys may become predicates and how their values are coerced.
"""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from querykit.application.pagination import Sort, SortDirection
from querykit.application.schema.fields import RESERVED_KEYS, FieldSpec
from querykit.config.validation import SchemaError
from querykit.observability.logging import get_logger

logger = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class FieldSchema:
    """Immutable declaration of searchable, filterable and sortable fields.

    Args:
        filterable_fields: field name → :class:`FieldSpec` (or a bare type
            name / ``{"type", "values"}`` mapping, normalised on construction).
        search_fields: ordered fields ORed by the free-text ``search`` key.
        sortable_fields: fields accepted by ``sort_by``.
        default_sort: used when no valid sort is requested.
        max_limit: upper bound for the page size.
        default_limit: page size used when ``limit`` is absent or invalid.
        strict_operators: reject operators the field type does not support.
    """

    filterable_fields: Mapping[str, FieldSpec] = dataclasses.field(default_factory=dict)
    search_fields: tuple[str, ...] = ()
    sortable_fields: frozenset[str] = frozenset()
    default_sort: Sort = Sort("created_at", SortDirection.DESC)
    max_limit: int = 100
    default_limit: int = 10
    strict_operators: bool = False

    def __post_init__(self) -> None:
        specs: dict[str, FieldSpec] = {}
        for name, raw in self.filterable_fields.items():
            _require_name(name, "filterable")
            try:
                specs[name] = FieldSpec.of(raw)
            except SchemaError as exc:
                raise SchemaError(f"Field '{name}': {exc.message}") from exc
            if name in RESERVED_KEYS:
                logger.warning("schema.reserved_field", field=name)
        object.__setattr__(self, "filterable_fields", MappingProxyType(specs))

        search_fields = tuple(self.search_fields)
        for name in search_fields:
            _require_name(name, "search")
        object.__setattr__(self, "search_fields", search_fields)

        sortable = frozenset(self.sortable_fields)
        for name in sortable:
            _require_name(name, "sortable")
        object.__setattr__(self, "sortable_fields", sortable)

        if not isinstance(self.default_sort, Sort):
            raise SchemaError("default_sort must be a Sort")
        _require_name(self.default_sort.field, "default sort")
        if self.max_limit < 1:
            raise SchemaError(f"max_limit must be >= 1, got {self.max_limit}")
        if self.default_limit < 1:
            raise SchemaError(f"default_limit must be >= 1, got {self.default_limit}")
        object.__setattr__(self, "default_limit", min(self.default_limit, self.max_limit))

    def field_spec(self, name: str) -> FieldSpec | None:
        return self.filterable_fields.get(name)

    def is_filterable(self, name: str) -> bool:
        return name in self.filterable_fields and name not in RESERVED_KEYS

    def is_sortable(self, name: str) -> bool:
        return name in self.sortable_fields

    @classmethod
    def from_dict(cls, config: Mapping[str, Any]) -> "FieldSchema":
        """Build a schema from a plain configuration mapping.

        Example::

            FieldSchema.from_dict({
                "search_fields": ["first_name", "last_name", "email"],
                "filterable_fields": {
                    "is_active": "boolean",
                    "gender": {"type": "enum", "values": ["MALE", "FEMALE", "OTHER"]},
                },
                "sortable_fields": ["created_at", "last_name"],
                "default_sort": {"field": "created_at", "order": "DESC"},
                "max_limit": 100,
            })
        """
        kwargs: dict[str, Any] = {
            "filterable_fields": dict(config.get("filterable_fields") or {}),
            "search_fields": tuple(config.get("search_fields") or ()),
            "sortable_fields": frozenset(config.get("sortable_fields") or ()),
        }
        raw_sort = config.get("default_sort")
        if raw_sort is not None:
            kwargs["default_sort"] = _parse_sort(raw_sort)
        for key in ("max_limit", "default_limit"):
            if config.get(key) is not None:
                kwargs[key] = int(config[key])
        if "strict_operators" in config:
            kwargs["strict_operators"] = bool(config["strict_operators"])
        return cls(**kwargs)


def _require_name(name: Any, role: str) -> None:
    if not isinstance(name, str) or not name.strip():
        raise SchemaError(f"Invalid {role} field name {name!r}")


def _parse_sort(raw: Sort | Mapping[str, Any]) -> Sort:
    if isinstance(raw, Sort):
        return raw
    direction_raw = raw.get("direction", raw.get("order", SortDirection.ASC.value))
    direction = SortDirection.parse(direction_raw)
    if direction is None:
        raise SchemaError(f"Invalid default sort direction {direction_raw!r}")
    return Sort(field=raw.get("field", ""), direction=direction)


__all__ = ["FieldSchema"]

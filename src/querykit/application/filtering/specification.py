"""Application filtering – FilterSpecification value objects.

The specification is what the data-access layer receives: it names fields,
operators and already-coerced operands, but never builds a query itself.
"""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from datetime import datetime
from types import MappingProxyType
from typing import Any

from querykit.application.filtering.operators import Operator
from querykit.application.pagination import PageRequest, Sort


@dataclasses.dataclass(frozen=True)
class Condition:
    """One operator applied to a field.

    ``operand`` is ``None`` for IS_NULL / IS_NOT_NULL, a tuple for IN and a
    ``(low, high)`` pair for BETWEEN.
    """
    operator: Operator
    operand: Any = None

    def to_dict(self) -> dict[str, Any]:
        return {"operator": self.operator.value, "operand": _plain(self.operand)}


@dataclasses.dataclass(frozen=True)
class FieldPredicate:
    """All conditions on one field, combined with logical AND."""
    field: str
    conditions: tuple[Condition, ...]

    def condition(self, operator: Operator) -> Condition | None:
        return next((c for c in self.conditions if c.operator is operator), None)

    @property
    def operators(self) -> tuple[Operator, ...]:
        return tuple(c.operator for c in self.conditions)

    def to_dict(self) -> dict[str, Any]:
        return {"field": self.field, "conditions": [c.to_dict() for c in self.conditions]}


@dataclasses.dataclass(frozen=True)
class SearchCondition:
    field: str
    operand: str
    operator: Operator = Operator.LIKE

    def to_dict(self) -> dict[str, Any]:
        return {"field": self.field, "operator": self.operator.value, "operand": self.operand}


@dataclasses.dataclass(frozen=True)
class SearchGroup:
    """Substring conditions combined with logical OR."""
    term: str
    conditions: tuple[SearchCondition, ...]

    @property
    def fields(self) -> tuple[str, ...]:
        return tuple(c.field for c in self.conditions)

    def to_dict(self) -> dict[str, Any]:
        return {"term": self.term, "any": [c.to_dict() for c in self.conditions]}


@dataclasses.dataclass(frozen=True)
class FilterSpecification:
    """Compiled, validated request filter.

    ``predicates`` maps a field either to a bare value (equality) or to a
    :class:`FieldPredicate`.
    """
    predicates: Mapping[str, Any]
    pagination: PageRequest
    sort: tuple[Sort, ...]
    search: SearchGroup | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "predicates", MappingProxyType(dict(self.predicates)))
        object.__setattr__(self, "sort", tuple(self.sort))
        if len(self.sort) != 1:
            raise ValueError("sort must contain exactly one entry")

    @property
    def limit(self) -> int:
        return self.pagination.limit

    @property
    def offset(self) -> int:
        return self.pagination.offset

    def to_dict(self) -> dict[str, Any]:
        predicates: dict[str, Any] = {}
        for field, predicate in self.predicates.items():
            if isinstance(predicate, FieldPredicate):
                predicates[field] = predicate.to_dict()["conditions"]
            else:
                predicates[field] = _plain(predicate)
        return {
            "predicates": predicates,
            "search": self.search.to_dict() if self.search is not None else None,
            "pagination": self.pagination.to_dict(),
            "sort": [s.to_dict() for s in self.sort],
        }


def _plain(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value


__all__ = [
    "Condition",
    "FieldPredicate",
    "FilterSpecification",
    "SearchCondition",
    "SearchGroup",
]

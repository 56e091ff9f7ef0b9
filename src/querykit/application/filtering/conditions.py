"""Application filtering – operator compiler.

Turns one parsed request key and its raw value into a :class:`Condition`,
then folds conditions on the same field into a single predicate so that
``age_gte=18&age_lte=65`` yields one range instead of two competing
entries.
"""
from __future__ import annotations

from typing import Any, assert_never

from querykit.application.filtering.coercion import (
    coerce_value,
    coerce_values,
    parse_boolean,
    single_value,
    split_values,
)
from querykit.application.filtering.keys import ParsedKey
from querykit.application.filtering.operators import Operator, supports
from querykit.application.filtering.specification import Condition, FieldPredicate
from querykit.kernel.errors import CompileError, ErrorKind
from querykit.kernel.types import RawValue

DEFAULT_MAX_IN_VALUES = 100

_NULLITY = frozenset({Operator.IS_NULL, Operator.IS_NOT_NULL})


def build_condition(
    parsed: ParsedKey,
    raw: RawValue,
    *,
    max_in_values: int = DEFAULT_MAX_IN_VALUES,
    strict: bool = False,
) -> Condition:
    """Compile ``raw`` for ``parsed.field`` under ``parsed.operator``.

    Raises:
        CompileError: on a coercion failure, an oversized IN list, a BETWEEN
            operand without exactly two bounds, an invalid null flag, or (in
            strict mode) an operator the field type does not support.
    """
    field, operator, spec = parsed.field, parsed.operator, parsed.spec

    if strict and not supports(spec.type, operator):
        raise CompileError(
            ErrorKind.UNSUPPORTED_OPERATOR,
            field,
            operator=operator,
            value=raw,
            reason=f"operator '{operator.value}' is not supported for {spec.type.value} fields",
        )

    match operator:
        case Operator.EQ | Operator.NE | Operator.GT | Operator.GTE | Operator.LT | Operator.LTE:
            value = coerce_value(single_value(raw), spec, field=field, operator=operator)
            return Condition(operator, value)

        case Operator.IN:
            values = split_values(raw)
            if len(values) > max_in_values:
                raise CompileError(
                    ErrorKind.TOO_MANY_VALUES,
                    field,
                    operator=operator,
                    value=raw,
                    reason=f"at most {max_in_values} values allowed, got {len(values)}",
                )
            return Condition(operator, tuple(coerce_values(values, spec, field=field, operator=operator)))

        case Operator.BETWEEN:
            values = split_values(raw)
            if len(values) != 2:
                raise CompileError(
                    ErrorKind.INVALID_RANGE_COUNT,
                    field,
                    operator=operator,
                    value=raw,
                    reason=f"exactly 2 comma-separated bounds required, got {len(values)}",
                )
            low, high = coerce_values(values, spec, field=field, operator=operator)
            return Condition(operator, (low, high))

        case Operator.IS_NULL | Operator.IS_NOT_NULL:
            flag = parse_boolean(single_value(raw))
            if flag is None:
                raise CompileError(
                    ErrorKind.INVALID_BOOLEAN,
                    field,
                    operator=operator,
                    value=raw,
                    reason="expected true, false, 1 or 0",
                )
            # field_not_null=false is field_null=true
            asserts_null = flag if operator is Operator.IS_NULL else not flag
            return Condition(Operator.IS_NULL if asserts_null else Operator.IS_NOT_NULL)

        case Operator.LIKE | Operator.ILIKE:
            value = single_value(raw)
            text = ("true" if value else "false") if isinstance(value, bool) else value
            return Condition(operator, f"%{text}%")

        case _:
            assert_never(operator)


def merge_condition(predicates: dict[str, Any], field: str, condition: Condition) -> None:
    """Fold ``condition`` into ``predicates[field]``.

    A lone equality stays a bare value. Anything else becomes (or extends)
    a :class:`FieldPredicate`; a repeated operator replaces its earlier
    occurrence, and IS_NULL / IS_NOT_NULL replace each other.
    """
    if field not in predicates:
        predicates[field] = _as_predicate(field, (condition,))
        return

    existing = predicates[field]
    if isinstance(existing, FieldPredicate):
        current = existing.conditions
    else:
        current = (Condition(Operator.EQ, existing),)

    merged: list[Condition] = []
    placed = False
    for c in current:
        if _same_slot(c.operator, condition.operator):
            if not placed:
                merged.append(condition)
                placed = True
            continue
        merged.append(c)
    if not placed:
        merged.append(condition)

    predicates[field] = _as_predicate(field, tuple(merged))


def _same_slot(a: Operator, b: Operator) -> bool:
    return a is b or (a in _NULLITY and b in _NULLITY)


def _as_predicate(field: str, conditions: tuple[Condition, ...]) -> Any:
    if len(conditions) == 1 and conditions[0].operator is Operator.EQ:
        return conditions[0].operand
    return FieldPredicate(field, conditions)


__all__ = ["DEFAULT_MAX_IN_VALUES", "build_condition", "merge_condition"]

"""Application filtering – pagination and sort compilers.

Both degrade to safe defaults instead of raising: a malformed page or sort
request must never fail the call.
"""
from __future__ import annotations

import re

from querykit.application.filtering.coercion import single_value
from querykit.application.pagination import PageRequest, Sort, SortDirection
from querykit.application.schema import FieldSchema
from querykit.kernel.types import RawValue
from querykit.observability.logging import get_logger

logger = get_logger(__name__)

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def _parse_int(raw: RawValue | None) -> int | None:
    if raw is None:
        return None
    value = single_value(raw)
    if isinstance(value, bool):
        return None
    text = value.strip()
    if not _INTEGER_RE.fullmatch(text):
        return None
    try:
        return int(text)
    except ValueError:
        return None


def compile_pagination(schema: FieldSchema, limit: RawValue | None, offset: RawValue | None) -> PageRequest:
    """Clamp ``limit`` to ``[1, max_limit]`` and ``offset`` to ``>= 0``."""
    parsed_limit = _parse_int(limit)
    if parsed_limit is None or parsed_limit <= 0:
        if limit is not None:
            logger.debug("pagination.fallback", param="limit", default=schema.default_limit)
        parsed_limit = schema.default_limit
    elif parsed_limit > schema.max_limit:
        logger.debug("pagination.clamped", requested=parsed_limit, max_limit=schema.max_limit)
        parsed_limit = schema.max_limit

    parsed_offset = _parse_int(offset)
    if parsed_offset is None or parsed_offset < 0:
        if offset is not None:
            logger.debug("pagination.fallback", param="offset", default=0)
        parsed_offset = 0

    return PageRequest(limit=parsed_limit, offset=parsed_offset)


def compile_sort(schema: FieldSchema, sort_by: RawValue | None, sort_order: RawValue | None) -> tuple[Sort]:
    """Validate the requested sort; each half falls back to ``schema.default_sort``."""
    field = schema.default_sort.field
    if sort_by is not None:
        candidate = single_value(sort_by)
        if isinstance(candidate, str) and schema.is_sortable(candidate):
            field = candidate
        else:
            logger.debug("sort.fallback", param="sort_by", default=field)

    direction = schema.default_sort.direction
    if sort_order is not None:
        parsed = SortDirection.parse(single_value(sort_order))
        if parsed is not None:
            direction = parsed
        else:
            logger.debug("sort.fallback", param="sort_order", default=direction.value)

    return (Sort(field, direction),)


__all__ = ["compile_pagination", "compile_sort"]

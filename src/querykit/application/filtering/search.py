"""Application filtering – free-text search compiler."""
from __future__ import annotations

from querykit.application.filtering.coercion import single_value
from querykit.application.filtering.specification import SearchCondition, SearchGroup
from querykit.application.schema import SEARCH_KEY, FieldSchema
from querykit.kernel.errors import CompileError, ErrorKind
from querykit.kernel.types import RawValue

DEFAULT_MAX_SEARCH_LENGTH = 500


def compile_search(
    schema: FieldSchema,
    raw: RawValue | None,
    *,
    max_length: int = DEFAULT_MAX_SEARCH_LENGTH,
) -> SearchGroup | None:
    """OR a ``LIKE %term%`` condition across every search field.

    Returns ``None`` when the schema declares no search fields or the term
    is absent or blank.
    """
    if raw is None or not schema.search_fields:
        return None
    value = single_value(raw)
    if isinstance(value, bool):
        return None
    term = value.strip()
    if not term:
        return None
    if len(term) > max_length:
        raise CompileError(
            ErrorKind.SEARCH_TOO_LONG,
            SEARCH_KEY,
            value=term,
            reason=f"search term must not exceed {max_length} characters",
        )
    pattern = f"%{term}%"
    return SearchGroup(
        term=term,
        conditions=tuple(SearchCondition(field, pattern) for field in schema.search_fields),
    )


__all__ = ["DEFAULT_MAX_SEARCH_LENGTH", "compile_search"]

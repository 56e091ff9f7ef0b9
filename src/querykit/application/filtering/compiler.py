"""Application filtering – QueryCompiler, the single entry point.

Usage::

    from querykit.application.filtering import QueryCompiler
    from querykit.application.schema import FieldSchema

    PATIENTS = FieldSchema.from_dict({...})
    compiler = QueryCompiler(PATIENTS)

    spec = compiler.compile(request.query_params)   # raises CompileError
    result = compiler.try_compile(params)            # Ok(spec) | Err(error)
"""
from __future__ import annotations

from typing import Any

from querykit.application.filtering.conditions import build_condition, merge_condition
from querykit.application.filtering.keys import parse_key
from querykit.application.filtering.paging import compile_pagination, compile_sort
from querykit.application.filtering.search import compile_search
from querykit.application.filtering.specification import FilterSpecification
from querykit.application.schema import (
    LIMIT_KEY,
    OFFSET_KEY,
    RESERVED_KEYS,
    SEARCH_KEY,
    SORT_BY_KEY,
    SORT_ORDER_KEY,
    FieldSchema,
)
from querykit.config.settings import CompilerSettings, EnvSettingsLoader
from querykit.kernel.errors import CompileError
from querykit.kernel.types import Err, Ok, RawParams, Result
from querykit.observability.logging import get_logger

logger = get_logger(__name__)


class QueryCompiler:
    """Compile flat request parameters against one :class:`FieldSchema`.

    Stateless after construction; a single instance may serve concurrent
    requests.
    """

    def __init__(self, schema: FieldSchema, settings: CompilerSettings | None = None) -> None:
        self._schema = schema
        self._settings = settings or CompilerSettings()

    @classmethod
    def from_env(cls, schema: FieldSchema) -> "QueryCompiler":
        """Build a compiler whose limits come from ``QUERYKIT_*`` variables."""
        return cls(schema, EnvSettingsLoader().load(CompilerSettings))

    @property
    def schema(self) -> FieldSchema:
        return self._schema

    @property
    def settings(self) -> CompilerSettings:
        return self._settings

    def compile(self, params: RawParams | None) -> FilterSpecification:
        """Return the filter specification for ``params``.

        Keys are processed in mapping order. Reserved keys drive search,
        pagination and sort; unknown keys are ignored.

        Raises:
            CompileError: for the first parameter that fails coercion or
                operator validation. No partial result is returned.
        """
        params = params or {}
        strict = self._schema.strict_operators or self._settings.strict_operators
        predicates: dict[str, Any] = {}

        try:
            for key, raw in params.items():
                parsed = parse_key(key, self._schema)
                if parsed is None:
                    if key not in RESERVED_KEYS:
                        logger.debug("filter_param.ignored", key=key)
                    continue
                condition = build_condition(
                    parsed,
                    raw,
                    max_in_values=self._settings.max_in_values,
                    strict=strict,
                )
                merge_condition(predicates, parsed.field, condition)

            search = compile_search(
                self._schema,
                params.get(SEARCH_KEY),
                max_length=self._settings.max_search_length,
            )
        except CompileError as exc:
            logger.info(
                "filter_param.rejected",
                kind=exc.kind.value,
                field=exc.field,
                operator=exc.operator,
            )
            raise

        pagination = compile_pagination(self._schema, params.get(LIMIT_KEY), params.get(OFFSET_KEY))
        sort = compile_sort(self._schema, params.get(SORT_BY_KEY), params.get(SORT_ORDER_KEY))

        spec = FilterSpecification(
            predicates=predicates,
            pagination=pagination,
            sort=sort,
            search=search,
        )
        logger.debug(
            "filter_spec.compiled",
            predicates=sorted(predicates),
            search=search is not None,
            limit=pagination.limit,
            offset=pagination.offset,
            sort=f"{sort[0].field} {sort[0].direction.value}",
        )
        return spec

    def try_compile(self, params: RawParams | None) -> Result[FilterSpecification, CompileError]:
        """Like :meth:`compile`, but return ``Err(error)`` instead of raising."""
        try:
            return Ok(self.compile(params))
        except CompileError as exc:
            return Err(exc)


def compile(  # noqa: A001
    schema: FieldSchema,
    params: RawParams | None,
    settings: CompilerSettings | None = None,
) -> FilterSpecification:
    """Compile ``params`` against ``schema`` in one call."""
    return QueryCompiler(schema, settings).compile(params)


__all__ = ["QueryCompiler", "compile"]

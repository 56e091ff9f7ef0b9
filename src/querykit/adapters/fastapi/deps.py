"""FastAPI adapter – filter-specification dependency.

Annotations in this module are evaluated eagerly: FastAPI resolves the
dependency's ``Request`` parameter from the live signature.
"""
from typing import TYPE_CHECKING, Annotated, Any, Callable

from querykit.application.filtering import FilterSpecification, QueryCompiler
from querykit.application.schema import FieldSchema
from querykit.config.settings import CompilerSettings

if TYPE_CHECKING:
    from starlette.datastructures import QueryParams


def _require_fastapi() -> None:
    try:
        import fastapi  # noqa: F401
    except ImportError as exc:
        raise ImportError(
            "Install 'querykit[fastapi]' to use the FastAPI adapter"
        ) from exc


def query_params_to_raw(query_params: "QueryParams") -> dict[str, str | list[str]]:
    """Flatten Starlette query params; repeated keys become lists."""
    raw: dict[str, str | list[str]] = {}
    for key in query_params.keys():
        values = query_params.getlist(key)
        raw[key] = values[0] if len(values) == 1 else values
    return raw


def filter_spec_dependency(
    schema: FieldSchema,
    settings: CompilerSettings | None = None,
) -> Callable[..., Any]:
    """Return a dependency that compiles the request query string.

    A :class:`~querykit.kernel.errors.CompileError` propagates to the
    handlers registered by :class:`FastAPIExceptionMapper`.

    Usage::

        PatientFilters = Annotated[FilterSpecification, Depends(filter_spec_dependency(PATIENTS))]

        @router.get("/patients")
        async def list_patients(spec: PatientFilters): ...
    """
    _require_fastapi()
    from fastapi import Request  # type: ignore[import-untyped]

    compiler = QueryCompiler(schema, settings)

    async def filter_spec_dep(request: Request) -> FilterSpecification:
        return compiler.compile(query_params_to_raw(request.query_params))

    return filter_spec_dep


def FilterSpecDep(schema: FieldSchema, settings: CompilerSettings | None = None) -> Any:  # noqa: N802
    """``Annotated[FilterSpecification, Depends(...)]`` alias bound to ``schema``."""
    _require_fastapi()
    from fastapi import Depends  # type: ignore[import-untyped]

    return Annotated[FilterSpecification, Depends(filter_spec_dependency(schema, settings))]


__all__ = ["FilterSpecDep", "filter_spec_dependency", "query_params_to_raw"]

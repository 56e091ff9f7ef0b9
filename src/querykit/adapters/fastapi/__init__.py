"""FastAPI adapter – query-string dependency and exception mapper."""
from querykit.adapters.fastapi.deps import FilterSpecDep, filter_spec_dependency, query_params_to_raw
from querykit.adapters.fastapi.exception_mapper import FastAPIExceptionMapper

__all__ = [
    "FastAPIExceptionMapper",
    "FilterSpecDep",
    "filter_spec_dependency",
    "query_params_to_raw",
]

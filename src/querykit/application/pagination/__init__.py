"""Application pagination – page window and sort primitives."""
from querykit.application.pagination.page_request import PageRequest, Sort, SortDirection

__all__ = ["PageRequest", "Sort", "SortDirection"]

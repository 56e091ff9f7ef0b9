"""Application filtering – query-parameter compiler."""
from querykit.application.filtering.compiler import QueryCompiler, compile
from querykit.application.filtering.conditions import build_condition, merge_condition
from querykit.application.filtering.keys import ParsedKey, parse_key
from querykit.application.filtering.operators import SUFFIX_ORDER, Operator
from querykit.application.filtering.paging import compile_pagination, compile_sort
from querykit.application.filtering.search import compile_search
from querykit.application.filtering.specification import (
    Condition,
    FieldPredicate,
    FilterSpecification,
    SearchCondition,
    SearchGroup,
)

__all__ = [
    "Condition",
    "FieldPredicate",
    "FilterSpecification",
    "Operator",
    "ParsedKey",
    "QueryCompiler",
    "SUFFIX_ORDER",
    "SearchCondition",
    "SearchGroup",
    "build_condition",
    "compile",
    "compile_pagination",
    "compile_search",
    "compile_sort",
    "merge_condition",
    "parse_key",
]

"""Testing generators – property-based strategies for schemas and request params."""
from querykit.testing.generators.strategies import (
    field_name_strategy,
    field_schema_strategy,
    raw_params_strategy,
)

__all__ = ["field_name_strategy", "field_schema_strategy", "raw_params_strategy"]

"""Raw request values as delivered by the HTTP layer."""

from __future__ import annotations

from collections.abc import Mapping

# A query-string value: plain text, a repeated key, or a boolean already
# parsed by the web framework.
type RawValue = str | list[str] | bool
type RawParams = Mapping[str, RawValue]

__all__ = ["RawParams", "RawValue"]

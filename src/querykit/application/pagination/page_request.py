"""Application pagination – PageRequest, Sort, SortDirection."""
from __future__ import annotations

import dataclasses
from enum import Enum


class SortDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"

    @classmethod
    def parse(cls, raw: object) -> "SortDirection | None":
        """Case-insensitive lookup; ``None`` for anything that is not ASC/DESC."""
        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, str):
            return None
        try:
            return cls(raw.strip().upper())
        except ValueError:
            return None


@dataclasses.dataclass(frozen=True)
class Sort:
    """Single sort criterion."""
    field: str
    direction: SortDirection = SortDirection.ASC

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "direction": self.direction.value}


@dataclasses.dataclass(frozen=True)
class PageRequest:
    """Offset-based pagination window."""
    limit: int = 10
    offset: int = 0

    def __post_init__(self) -> None:
        if self.limit < 1:
            raise ValueError("limit must be >= 1")
        if self.offset < 0:
            raise ValueError("offset must be >= 0")

    def to_dict(self) -> dict[str, int]:
        return {"limit": self.limit, "offset": self.offset}


__all__ = ["PageRequest", "Sort", "SortDirection"]

"""Config settings – CompilerSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from querykit.config.settings.base import Settings
from querykit.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class CompilerSettings(Settings):
    """Process-wide limits applied by the query compiler.

    Environment variables (prefix ``QUERYKIT``):

    * ``QUERYKIT_MAX_IN_VALUES`` – cap on ``_in`` list length (default 100)
    * ``QUERYKIT_MAX_SEARCH_LENGTH`` – cap on the ``search`` term (default 500)
    * ``QUERYKIT_STRICT_OPERATORS`` – reject operators a field type cannot order or match
    """

    _prefix: ClassVar[str] = "QUERYKIT"

    max_in_values: int = 100
    max_search_length: int = 500
    strict_operators: bool = False

    def _validate(self) -> None:
        if self.max_in_values < 1:
            raise InvalidSettingValueError("max_in_values", self.max_in_values, "must be >= 1")
        if self.max_search_length < 1:
            raise InvalidSettingValueError("max_search_length", self.max_search_length, "must be >= 1")


__all__ = ["CompilerSettings"]

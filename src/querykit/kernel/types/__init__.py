"""Kernel value types – public re-export surface.

Modules:
  result.py – Ok, Err, Result
  raw.py    – RawValue, RawParams
"""

from querykit.kernel.types.raw import RawParams, RawValue
from querykit.kernel.types.result import Err, Ok, Result

__all__ = ["Err", "Ok", "RawParams", "RawValue", "Result"]

"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   └── ValidationError
    │       └── CompileError (compile.py)
    └── ApplicationError     (application.py)
"""

from querykit.kernel.errors.application import ApplicationError
from querykit.kernel.errors.base import BaseError
from querykit.kernel.errors.compile import CompileError, ErrorKind
from querykit.kernel.errors.domain import DomainError, ValidationError

__all__ = [
    "ApplicationError",
    "BaseError",
    "CompileError",
    "DomainError",
    "ErrorKind",
    "ValidationError",
]

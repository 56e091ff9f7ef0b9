"""Kernel – framework-agnostic building blocks."""

from querykit.kernel.errors import (
    ApplicationError,
    BaseError,
    CompileError,
    DomainError,
    ErrorKind,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "CompileError",
    "DomainError",
    "ErrorKind",
    "ValidationError",
]

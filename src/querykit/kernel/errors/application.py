"""Application-layer errors – misconfiguration of the library itself."""

from __future__ import annotations

from querykit.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


__all__ = ["ApplicationError"]

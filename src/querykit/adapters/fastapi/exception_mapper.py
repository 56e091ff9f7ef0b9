"""FastAPI adapter – FastAPIExceptionMapper."""
from __future__ import annotations

from typing import Any, Callable

from querykit.adapters.fastapi.deps import _require_fastapi


class FastAPIExceptionMapper:
    """Register querykit error → HTTP status-code mappings on a FastAPI app.

    Error body schema::

        {"code": "invalid_enum_value", "message": "...", "detail": {...}, "errors": [...]}

    Mappings
    --------
    ``CompileError`` / ``ValidationError`` → 400
    ``DomainError``                        → 422
    ``ConfigError``                        → 500
    """

    def __init__(self) -> None:
        _require_fastapi()
        from querykit.config.validation import ConfigError
        from querykit.kernel.errors import DomainError, ValidationError

        # ORDER MATTERS: more-specific subtypes first
        self._map: list[tuple[type[Exception], int]] = [
            (ValidationError, 400),
            (DomainError, 422),
            (ConfigError, 500),
        ]

    @property
    def mappings(self) -> list[tuple[type[Exception], int]]:
        return list(self._map)

    def register(self, app: Any) -> None:
        """Register all error handlers on a ``FastAPI`` or ``Starlette`` app."""
        from fastapi.responses import JSONResponse  # type: ignore[import-untyped]

        for exc_type, status in self._map:

            def make_handler(code: int) -> Callable[[Any, Any], Any]:
                def handler(request: Any, exc: Any) -> Any:  # noqa: ARG001
                    from querykit.kernel.errors.base import BaseError

                    if isinstance(exc, BaseError):
                        body = exc.to_dict()
                    else:
                        body = {"code": "error", "message": str(exc)}
                    return JSONResponse(status_code=code, content=_jsonable(body))

                return handler

            app.add_exception_handler(exc_type, make_handler(status))


def _jsonable(value: Any) -> Any:
    if isinstance(value, dict):
        return {k: _jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    return str(value)


__all__ = ["FastAPIExceptionMapper"]

# hacklog/core/errors.py
from __future__ import annotations

from typing import Any, Iterable


class AppError(Exception):
    """
    Error de dominio. El handler registrado en main.py lo convierte en
    {"detail": message} con su status_code.
    """
    status_code: int = 500
    default_message: str = "internal error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = 400
    default_message = "validation error"


class UnauthenticatedError(AppError):
    status_code = 401
    default_message = "not authenticated"


class ForbiddenError(AppError):
    status_code = 403
    default_message = "forbidden"


class NotFoundError(AppError):
    status_code = 404
    default_message = "not found"


class ConflictError(AppError):
    status_code = 409
    default_message = "conflict"


class InternalError(AppError):
    status_code = 500
    default_message = "internal error"


def _loc_path(loc: Iterable[Any]) -> str:
    # "body" / "query" / "path" son ruido para el cliente
    parts = [str(p) for p in loc if p not in ("body", "query", "path")]
    return ".".join(parts)


def format_validation_errors(errors: Iterable[dict]) -> str:
    """
    Un solo mensaje legible con todos los campos que fallaron:

        Validation error: String should have at least 3 characters at "username"
    """
    chunks: list[str] = []
    for err in errors:
        msg = err.get("msg", "invalid value")
        path = _loc_path(err.get("loc", ()))
        chunks.append(f'{msg} at "{path}"' if path else msg)
    return "Validation error: " + "; ".join(chunks)

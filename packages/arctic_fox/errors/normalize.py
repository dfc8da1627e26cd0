"""Exception normalization into the closed error taxonomy."""

from __future__ import annotations

from . import codes
from .factories import forbidden, server_error, validation_error
from .types import ArcticFoxError


def exception_to_error(exc: Exception) -> ArcticFoxError:
    """Normalize a Python exception into one taxonomy variant.

    Taxonomy errors pass through untouched. Unrecognized exceptions become a
    generic server error so internal diagnostics never reach the payload.
    """
    if isinstance(exc, ArcticFoxError):
        return exc

    if isinstance(exc, PermissionError):
        return forbidden(str(exc) or "permission denied")

    if isinstance(exc, ValueError):
        return validation_error(str(exc) or "invalid input")

    return server_error(codes.UNEXPECTED_ERROR)

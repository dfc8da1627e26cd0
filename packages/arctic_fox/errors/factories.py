"""Factory helpers for creating taxonomy errors with formatted messages."""

from __future__ import annotations

from . import codes
from .types import Forbidden, ServerError, Unauthorized, ValidationError


def forbidden(message: str, *args: object) -> Forbidden:
    """Create a forbidden-category error."""
    return Forbidden(message=_format(message, args))


def unauthorized(message: str, *args: object) -> Unauthorized:
    """Create an unauthorized-category error."""
    return Unauthorized(message=_format(message, args))


def validation_error(message: str, *args: object) -> ValidationError:
    """Create a validation-category error."""
    return ValidationError(message=_format(message, args))


def server_error(
    message: str,
    *args: object,
    status_code: int = codes.STATUS_INTERNAL,
) -> ServerError:
    """Create a server-category error with an explicit status hint."""
    return ServerError(message=_format(message, args), status_code=status_code)


def _format(message: str, args: tuple[object, ...]) -> str:
    """Apply ``%``-style formatting only when arguments are supplied."""
    if not args:
        return message
    return message % args

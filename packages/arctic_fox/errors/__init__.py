"""Public error taxonomy API for Arctic Fox containers."""

from . import codes
from .factories import forbidden, server_error, unauthorized, validation_error
from .normalize import exception_to_error
from .types import (
    ArcticFoxError,
    Forbidden,
    ServerError,
    TaxonomyError,
    Unauthorized,
    ValidationError,
)

__all__ = [
    "ArcticFoxError",
    "Forbidden",
    "ServerError",
    "TaxonomyError",
    "Unauthorized",
    "ValidationError",
    "codes",
    "exception_to_error",
    "forbidden",
    "server_error",
    "unauthorized",
    "validation_error",
]

"""Canonical error taxonomy carried by frozen containers.

The taxonomy is closed: ``Forbidden``, ``Unauthorized``, ``ValidationError``
and ``ServerError`` are the only variants. Each one renders to a non-empty
human-readable string through ``describe()`` and maps to exactly one
status-code hint through ``status_hint()``.

Variants compare and hash by value and accept the ``__traceback__``
assignments made while they propagate, including through ``log_context``.
"""

from __future__ import annotations

from dataclasses import astuple, dataclass, replace
from http import HTTPStatus
from typing import TypeAlias

from . import codes


@dataclass(unsafe_hash=True)
class ArcticFoxError(Exception):
    """Base type shared by every taxonomy variant."""

    message: str

    def __str__(self) -> str:
        """Return the human-readable error description."""
        return self.describe()

    @property
    def kind(self) -> str:
        """Return the stable machine-readable variant name."""
        raise NotImplementedError

    def status_hint(self) -> int:
        """Return the suggested transport status code."""
        raise NotImplementedError

    def describe(self) -> str:
        """Render the error as a non-empty human-readable string."""
        prefix = self._prefix()
        detail = self.message.strip()
        if not detail:
            return prefix
        return f"{prefix}: {detail}"

    def clone(self) -> ArcticFoxError:
        """Return a structural copy of this error."""
        return replace(self)

    def __reduce__(self) -> tuple[type[ArcticFoxError], tuple[object, ...]]:
        return type(self), astuple(self)

    def _prefix(self) -> str:
        return _status_prefix(self.status_hint())


@dataclass(unsafe_hash=True)
class Forbidden(ArcticFoxError):
    """Caller is known but not allowed to perform the operation."""

    @property
    def kind(self) -> str:
        return codes.FORBIDDEN

    def status_hint(self) -> int:
        return codes.STATUS_FORBIDDEN

    def _prefix(self) -> str:
        return "Forbidden"


@dataclass(unsafe_hash=True)
class Unauthorized(ArcticFoxError):
    """Caller could not be authenticated."""

    @property
    def kind(self) -> str:
        return codes.UNAUTHORIZED

    def status_hint(self) -> int:
        return codes.STATUS_UNAUTHORIZED

    def _prefix(self) -> str:
        return "Unauthorized"


@dataclass(unsafe_hash=True)
class ValidationError(ArcticFoxError):
    """Input was rejected; ``message`` may hold several newline-joined rules."""

    @property
    def kind(self) -> str:
        return codes.VALIDATION_ERROR

    def status_hint(self) -> int:
        return codes.STATUS_UNPROCESSABLE

    def _prefix(self) -> str:
        return "Validation Error"

    @property
    def violations(self) -> list[str]:
        """Return each violated rule description carried by the message."""
        return [line for line in self.message.splitlines() if line.strip()]


@dataclass(unsafe_hash=True)
class ServerError(ArcticFoxError):
    """Internal failure carrying its own status hint (500 unless given)."""

    status_code: int = codes.STATUS_INTERNAL

    def __post_init__(self) -> None:
        """Reject status hints outside the HTTP status range."""
        if not 100 <= self.status_code <= 599:
            raise ValueError(f"status_code must be within 100..599, got {self.status_code}")

    @property
    def kind(self) -> str:
        return codes.SERVER_ERROR

    def status_hint(self) -> int:
        return self.status_code


TaxonomyError: TypeAlias = Forbidden | Unauthorized | ValidationError | ServerError


def _status_prefix(status_code: int) -> str:
    """Format ``<code> <phrase>`` for known codes and ``<code> Error`` otherwise."""
    try:
        phrase = HTTPStatus(status_code).phrase
    except ValueError:
        phrase = "Error"
    return f"{status_code} {phrase}"

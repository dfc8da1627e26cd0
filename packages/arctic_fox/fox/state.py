"""The two container states: ``Live`` and ``Frozen``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from packages.arctic_fox.errors import ArcticFoxError

T = TypeVar("T")


@dataclass(frozen=True)
class Live(Generic[T]):
    """Success state; the value may still be replaced by chained operations."""

    value: T


@dataclass(frozen=True)
class Frozen(Generic[T]):
    """Failure state holding the last live value and the first error."""

    value: T
    error: ArcticFoxError


FoxState = Union[Live[T], Frozen[T]]

"""Correlation fields attached to every Arctic Fox log record.

Fields live in a ``ContextVar`` holding a read-only mapping. Each asyncio task
started by ``run_many`` inherits a snapshot, so fields bound inside one chain
never reach its siblings.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from types import MappingProxyType
from typing import Iterator, Mapping

_EMPTY: Mapping[str, str] = MappingProxyType({})
_FIELDS: ContextVar[Mapping[str, str]] = ContextVar("arctic_fox_log_fields", default=_EMPTY)


def _stringify(values: Mapping[str, object]) -> dict[str, str]:
    """Drop ``None`` values and render the rest as strings."""
    return {str(key): str(value) for key, value in values.items() if value is not None}


def get_context() -> dict[str, str]:
    """Return a mutable copy of the fields bound in the current context."""
    return dict(_FIELDS.get())


def bind_context(**values: object) -> None:
    """Merge ``values`` into the current fields until cleared."""
    rendered = _stringify(values)
    if rendered:
        _FIELDS.set(MappingProxyType({**_FIELDS.get(), **rendered}))


def clear_context(*keys: str) -> None:
    """Remove ``keys``, or every field when called without arguments."""
    if not keys:
        _FIELDS.set(_EMPTY)
        return
    remaining = {key: value for key, value in _FIELDS.get().items() if key not in keys}
    _FIELDS.set(MappingProxyType(remaining))


@contextmanager
def log_context(values: Mapping[str, object]) -> Iterator[None]:
    """Bind ``values`` for the duration of the block only."""
    token = _FIELDS.set(MappingProxyType({**_FIELDS.get(), **_stringify(values)}))
    try:
        yield
    finally:
        _FIELDS.reset(token)

"""Shared fixtures for Arctic Fox tests."""

from __future__ import annotations

from typing import Iterator

import pytest

from packages.arctic_fox.auth import CredentialHasher
from packages.arctic_fox.config import HasherSettings
from packages.arctic_fox.logging import clear_context


@pytest.fixture()
def fast_hasher() -> CredentialHasher:
    """Return a hasher with a minimal work factor to keep tests quick."""
    return CredentialHasher(
        HasherSettings(time_cost=1, memory_cost=64, parallelism=1, hash_len=16, salt_len=16)
    )


@pytest.fixture(autouse=True)
def _reset_log_context() -> Iterator[None]:
    """Keep bound logging context from leaking between tests."""
    clear_context()
    yield
    clear_context()

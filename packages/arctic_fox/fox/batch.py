"""Bounded-concurrency fan-out over independent containers."""

from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, Iterable, TypeVar

from .cub import Cub
from .monad import ArcticFox

T = TypeVar("T", bound=Cub)

DEFAULT_CONCURRENCY = 8


async def run_many(
    foxes: Iterable[ArcticFox[T]],
    operation: Callable[[T], Awaitable[T]],
    *,
    concurrency: int = DEFAULT_CONCURRENCY,
) -> list[ArcticFox[T]]:
    """Apply ``run_async(operation)`` to every container, ``concurrency`` at a time.

    Each container freezes independently; one failure never touches its
    siblings. Containers are returned in input order. The same instance may
    not appear twice, since a container has a single owner across awaits.
    """
    if concurrency < 1:
        raise ValueError("concurrency must be >= 1")

    items = list(foxes)
    if len({id(fox) for fox in items}) != len(items):
        raise ValueError("each container may appear only once per batch")

    sem = asyncio.Semaphore(concurrency)

    async def _one(fox: ArcticFox[T]) -> None:
        async with sem:
            await fox.run_async(operation)

    await asyncio.gather(*(_one(fox) for fox in items))
    return items

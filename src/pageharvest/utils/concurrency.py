"""
Bounded concurrent mapping for async callables.
"""

from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, Iterable, List, TypeVar

T = TypeVar("T")
R = TypeVar("R")


async def bounded_gather(
    items: Iterable[T],
    func: Callable[[T], Awaitable[R]],
    limit: int,
) -> List[R]:
    """
    Apply ``func`` to every item with at most ``limit`` calls in flight.

    Results are returned in the order of ``items``, regardless of completion
    order. The first exception raised by ``func`` propagates and the remaining
    calls are cancelled.

    Args:
        items: Inputs to map over
        func: Coroutine function applied to each input
        limit: Maximum number of concurrent calls

    Returns:
        List of results aligned with ``items``
    """
    if limit < 1:
        raise ValueError("limit must be at least 1")

    semaphore = asyncio.Semaphore(limit)

    async def run(item: T) -> R:
        async with semaphore:
            return await func(item)

    tasks = [asyncio.ensure_future(run(item)) for item in items]
    if not tasks:
        return []
    try:
        return list(await asyncio.gather(*tasks))
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise

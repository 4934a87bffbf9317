"""Unit tests for bounded_gather."""

import asyncio
import random

import pytest
from pageharvest.utils.concurrency import bounded_gather


@pytest.mark.asyncio
async def test_results_follow_input_order():
    async def slow_echo(value: int) -> int:
        await asyncio.sleep(random.uniform(0, 0.02))
        return value

    results = await bounded_gather(range(20), slow_echo, limit=5)

    assert results == list(range(20))


@pytest.mark.asyncio
async def test_concurrency_never_exceeds_limit():
    in_flight = 0
    peak = 0

    async def track(value: int) -> int:
        nonlocal in_flight, peak
        in_flight += 1
        peak = max(peak, in_flight)
        await asyncio.sleep(0.01)
        in_flight -= 1
        return value * 2

    results = await bounded_gather([1, 2, 3, 4, 5, 6, 7], track, limit=3)

    assert results == [2, 4, 6, 8, 10, 12, 14]
    assert peak == 3


@pytest.mark.asyncio
async def test_empty_input():
    async def never_called(value):
        raise AssertionError("should not be called")

    assert await bounded_gather([], never_called, limit=4) == []


@pytest.mark.asyncio
async def test_exception_propagates_and_cancels_remaining():
    cancelled = []

    async def work(value: int) -> int:
        if value == 0:
            raise RuntimeError("boom")
        try:
            await asyncio.sleep(1)
        except asyncio.CancelledError:
            cancelled.append(value)
            raise
        return value

    with pytest.raises(RuntimeError, match="boom"):
        await bounded_gather([0, 1, 2], work, limit=3)

    assert sorted(cancelled) == [1, 2]


@pytest.mark.asyncio
async def test_invalid_limit():
    async def echo(value):
        return value

    with pytest.raises(ValueError):
        await bounded_gather([1], echo, limit=0)

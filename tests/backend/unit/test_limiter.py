"""
Unit tests for core.limiter module.
Tests the concurrency bound, FIFO start order and order-preserving map.
"""
import asyncio

import pytest

from app.core.limiter import ConcurrencyLimiter


pytestmark = pytest.mark.asyncio


async def test_never_more_than_limit_in_flight():
    limiter = ConcurrencyLimiter(2)
    in_flight = 0
    peak = 0

    async def work(i: int) -> int:
        nonlocal in_flight, peak
        in_flight += 1
        peak = max(peak, in_flight)
        await asyncio.sleep(0.02)
        in_flight -= 1
        return i

    await limiter.map(work, range(5))

    assert peak == 2
    assert limiter.peak == 2
    assert limiter.active == 0


async def test_map_returns_results_in_input_order():
    """Slower early items must not be overtaken in the result list."""
    limiter = ConcurrencyLimiter(3)
    delays = {"a": 0.05, "b": 0.0, "c": 0.02}

    async def work(key: str) -> str:
        await asyncio.sleep(delays[key])
        return key.upper()

    assert await limiter.map(work, ["a", "b", "c"]) == ["A", "B", "C"]


async def test_queued_items_start_in_submission_order():
    limiter = ConcurrencyLimiter(1)
    started = []

    async def work(i: int) -> None:
        started.append(i)
        await asyncio.sleep(0)

    await limiter.map(work, [0, 1, 2, 3])
    assert started == [0, 1, 2, 3]


async def test_third_task_waits_for_a_free_slot():
    limiter = ConcurrencyLimiter(2)
    release = asyncio.Event()
    started = []

    async def work(i: int) -> int:
        started.append(i)
        if i < 2:
            await release.wait()
        return i

    task = asyncio.ensure_future(limiter.map(work, [0, 1, 2]))
    await asyncio.sleep(0.01)
    assert started == [0, 1]  # 2 is queued

    release.set()
    assert await task == [0, 1, 2]
    assert started == [0, 1, 2]


async def test_run_passes_arguments_through():
    limiter = ConcurrencyLimiter(1)

    async def add(a, b, *, c=0):
        return a + b + c

    assert await limiter.run(add, 1, 2, c=3) == 6


async def test_exception_frees_the_slot():
    limiter = ConcurrencyLimiter(1)

    async def boom():
        raise RuntimeError("nope")

    with pytest.raises(RuntimeError):
        await limiter.run(boom)
    assert limiter.active == 0

    async def ok():
        return "fine"

    assert await limiter.run(ok) == "fine"


async def test_limit_must_be_positive():
    with pytest.raises(ValueError):
        ConcurrencyLimiter(0)

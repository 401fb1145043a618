"""
Concurrency limiter for outbound model calls.

Wraps an asyncio.Semaphore so that at most `limit` coroutines run at once.
Waiters are released in the order they queued (asyncio.Semaphore is FIFO).
"""
import asyncio
from typing import Awaitable, Callable, Iterable, List, TypeVar

T = TypeVar("T")
R = TypeVar("R")


class ConcurrencyLimiter:
    """Gate bounding how many async operations are in flight simultaneously."""

    def __init__(self, limit: int = 2):
        if limit < 1:
            raise ValueError("limit must be >= 1")
        self.limit = limit
        self._sem = asyncio.Semaphore(limit)
        self.active = 0  # Operations currently holding a slot
        self.peak = 0    # Highest value of `active` observed

    async def run(self, fn: Callable[..., Awaitable[R]], *args, **kwargs) -> R:
        """Wait for a free slot, then await fn(*args, **kwargs)."""
        async with self._sem:
            self.active += 1
            self.peak = max(self.peak, self.active)
            try:
                return await fn(*args, **kwargs)
            finally:
                self.active -= 1

    async def map(self, fn: Callable[[T], Awaitable[R]], items: Iterable[T]) -> List[R]:
        """
        Run fn over items through the limiter.

        Results come back in the same order as `items`, not in completion order.
        An exception raised by fn propagates; callers that need per-item
        isolation must catch inside fn.
        """
        return list(await asyncio.gather(*(self.run(fn, item) for item in items)))

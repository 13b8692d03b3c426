"""Per-car asyncio locks serializing rent writers within one process."""

import asyncio
import weakref
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager


class CarLockRegistry:
    """Hands out one ``asyncio.Lock`` per car id.

    Locks are held weakly: a car's lock is dropped once no coroutine
    holds or waits on it.
    """

    def __init__(self) -> None:
        self._locks: weakref.WeakValueDictionary[int, asyncio.Lock] = (
            weakref.WeakValueDictionary()
        )

    def lock_for(self, car_id: int) -> asyncio.Lock:
        lock = self._locks.get(car_id)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[car_id] = lock
        return lock

    @asynccontextmanager
    async def hold(self, car_id: int) -> AsyncIterator[None]:
        """Hold the car's lock for the duration of the ``async with`` block."""
        lock = self.lock_for(car_id)
        async with lock:
            yield

"""A thread-safe pool of object slots that workers reserve and release."""

from __future__ import annotations

import threading
from enum import IntEnum
from typing import Any

__all__ = [
    "POOL_OBJECTS_LIMIT",
    "POOL_TIMEOUT_LIMIT",
    "PoolStatus",
    "PoolError",
    "Pool",
]

POOL_OBJECTS_LIMIT = 4096
POOL_TIMEOUT_LIMIT = 86400


class PoolStatus(IntEnum):
    """The state of a pool slot."""

    ERROR = -1
    AVAILABLE = 0
    RESERVED = 1


class PoolError(RuntimeError):
    """Raised when a slot could not be reserved."""


class Pool:
    """A fixed number of object slots shared between threads.

    ``pull`` reserves the first available slot, waiting up to ``timeout``
    seconds (forever when the timeout is zero); ``release`` hands it back.
    """

    def __init__(self, count: int, timeout: int = 0) -> None:
        if count < 0 or count > POOL_OBJECTS_LIMIT:
            raise ValueError(f"a pool holds between 0 and {POOL_OBJECTS_LIMIT} objects")
        if timeout < 0 or timeout > POOL_TIMEOUT_LIMIT:
            raise ValueError(f"a pool timeout must be between 0 and {POOL_TIMEOUT_LIMIT} seconds")
        self._count = count
        self._timeout = timeout
        self._failures = 0
        self._available = count
        self._statuses = [PoolStatus.AVAILABLE] * count
        self._objects: list[Any] = [None] * count
        self._cond = threading.Condition()

    def __repr__(self) -> str:
        return f"Pool(count={self._count}, timeout={self._timeout})"

    def _check(self, item: int) -> None:
        if not 0 <= item < self._count:
            raise IndexError(f"item {item} is outside the pool's {self._count} slots")

    def count(self) -> int:
        """Return the number of slots in the pool."""
        return self._count

    def timeout(self) -> int:
        """Return the wait limit for ``pull`` in seconds; zero waits forever."""
        return self._timeout

    def failures(self) -> int:
        """Return how many pulls came back empty handed."""
        with self._cond:
            return self._failures

    def available(self) -> int:
        """Return how many slots can be pulled without waiting."""
        with self._cond:
            return self._available

    def status(self, item: int) -> PoolStatus:
        """Return the status of a slot."""
        self._check(item)
        with self._cond:
            return self._statuses[item]

    def set_status(self, item: int, status: PoolStatus | int) -> PoolStatus:
        """Set the status of a slot and return it."""
        self._check(item)
        status = PoolStatus(status)
        if status is PoolStatus.ERROR:
            raise ValueError("a slot can only be AVAILABLE or RESERVED")
        with self._cond:
            self._statuses[item] = status
            self._cond.notify_all()
        return status

    def pull(self) -> int:
        """Reserve the first available slot and return its index."""
        with self._cond:
            wait = self._timeout if self._timeout else None
            if not self._cond.wait_for(lambda: self._available > 0, timeout=wait):
                self._failures += 1
                raise PoolError("timed out waiting for a pool object")
            self._available -= 1
            for index, status in enumerate(self._statuses):
                if status is PoolStatus.AVAILABLE:
                    self._statuses[index] = PoolStatus.RESERVED
                    return index
            self._failures += 1
            raise PoolError("no pool object was marked available")

    def release(self, item: int) -> None:
        """Return a slot to the pool and mark it available."""
        self._check(item)
        with self._cond:
            self._statuses[item] = PoolStatus.AVAILABLE
            self._available += 1
            self._cond.notify_all()

    def get(self, item: int) -> Any:
        """Return the object stored in a slot."""
        self._check(item)
        with self._cond:
            return self._objects[item]

    def set(self, item: int, obj: Any) -> Any:
        """Store an object in a slot and return it."""
        self._check(item)
        with self._cond:
            self._objects[item] = obj
        return obj

    def swap(self, item: int, obj: Any) -> Any:
        """Wait until a slot is available, then replace its object and return the old one."""
        self._check(item)
        with self._cond:
            self._cond.wait_for(lambda: self._statuses[item] is PoolStatus.AVAILABLE)
            current = self._objects[item]
            self._objects[item] = obj
            return current
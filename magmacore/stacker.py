"""A thread-safe first-in, first-out list of items."""

from __future__ import annotations

import threading
from collections import deque
from collections.abc import Callable
from typing import Any

__all__ = ["Stacker"]


class Stacker:
    """A FIFO list: ``push`` appends at the end and ``pop`` takes from the front.

    If ``free_function`` is given, ``close`` calls it on every item still held.
    """

    def __init__(self, free_function: Callable[[Any], Any] | None = None) -> None:
        self._items: deque[Any] = deque()
        self._lock = threading.Lock()
        self._free_function = free_function

    def __len__(self) -> int:
        """Return the number of items held."""
        with self._lock:
            return len(self._items)

    def __repr__(self) -> str:
        return f"Stacker(items={len(self)})"

    def __enter__(self) -> Stacker:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def push(self, data: Any) -> None:
        """Append ``data`` to the end of the list."""
        if data is None:
            raise ValueError("cannot push None onto a stacker")
        with self._lock:
            self._items.append(data)

    def pop(self) -> Any:
        """Remove and return the oldest item, or None if the list is empty."""
        with self._lock:
            return self._items.popleft() if self._items else None

    def close(self) -> None:
        """Discard every remaining item, passing each to the free function."""
        with self._lock:
            items = list(self._items)
            self._items.clear()
        if self._free_function is not None:
            for item in items:
                self._free_function(item)
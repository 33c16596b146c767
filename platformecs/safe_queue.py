"""A thread-safe FIFO queue."""

from __future__ import annotations

import threading
from collections import deque
from typing import Deque, Generic, Optional, TypeVar

T = TypeVar("T")


class SafeQueue(Generic[T]):
    """A FIFO queue guarded by a lock; ``pop`` waits for a value."""

    def __init__(self) -> None:
        self._items: Deque[T] = deque()
        self._condition = threading.Condition()

    def push(self, value: T) -> None:
        """Append a value and wake one waiting consumer."""
        with self._condition:
            self._items.append(value)
            self._condition.notify()

    def try_pop(self) -> Optional[T]:
        """Remove and return the oldest value, or None if the queue is empty."""
        with self._condition:
            if not self._items:
                return None
            return self._items.popleft()

    def pop(self) -> T:
        """Remove and return the oldest value, waiting until one is available."""
        with self._condition:
            while not self._items:
                self._condition.wait()
            return self._items.popleft()

    def __len__(self) -> int:
        with self._condition:
            return len(self._items)
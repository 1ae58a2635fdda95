"""Bounded FIFO ring buffer for many producers and a single consumer."""

from __future__ import annotations

import queue
import threading
from typing import Generic, TypeVar

__all__ = ["RingBuffer"]

T = TypeVar("T")


class RingBuffer(Generic[T]):
    """Fixed-size ring of ``size`` slots holding at most ``size - 1`` items.

    :meth:`put` raises :class:`queue.Full` when no slot is free and
    :meth:`get` raises :class:`queue.Empty` when nothing is waiting.
    """

    def __init__(self, size: int = 128) -> None:
        if size < 1:
            raise ValueError("ring buffer size must be at least 1")
        self._slots: list[T | None] = [None] * size
        self._size = size
        self._head = 0
        self._tail = 0
        self._lock = threading.Lock()

    def put(self, item: T) -> None:
        """Append ``item``; raise :class:`queue.Full` when the ring is full."""
        with self._lock:
            new_tail = (self._tail + 1) % self._size
            if new_tail == self._head:
                raise queue.Full
            self._slots[self._tail] = item
            self._tail = new_tail

    def get(self) -> T:
        """Remove and return the oldest item; raise :class:`queue.Empty` when empty."""
        with self._lock:
            if self._head == self._tail:
                raise queue.Empty
            item = self._slots[self._head]
            self._slots[self._head] = None
            self._head = (self._head + 1) % self._size
            return item  # type: ignore[return-value]

    def __len__(self) -> int:
        with self._lock:
            return (self._tail - self._head) % self._size
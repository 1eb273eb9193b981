"""Bounded circular FIFO queues."""

from __future__ import annotations

from typing import Generic, TypeVar

__all__ = ["FifoEmpty", "Fifo", "SpscFifo"]

T = TypeVar("T")


class FifoEmpty(Exception):
    """Raised when popping from an empty fifo."""


def _check_capacity(capacity: int) -> int:
    if capacity < 0:
        raise ValueError(f"capacity must not be negative: {capacity}")
    return capacity


class Fifo(Generic[T]):
    """Circular FIFO of fixed capacity; not safe to share between threads."""

    def __init__(self, capacity: int) -> None:
        self._capacity = _check_capacity(capacity)
        self._ring: list[T | None] = [None] * capacity
        self._push_cursor = 0
        self._pop_cursor = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return self._push_cursor - self._pop_cursor

    def empty(self) -> bool:
        return len(self) == 0

    def full(self) -> bool:
        return len(self) == self._capacity

    def push(self, value: T) -> bool:
        """Append a value; return False if the fifo is full."""
        if self.full():
            return False
        self._ring[self._push_cursor % self._capacity] = value
        self._push_cursor += 1
        return True

    def pop(self) -> T:
        """Remove and return the oldest value."""
        if self.empty():
            raise FifoEmpty("fifo is empty")
        index = self._pop_cursor % self._capacity
        value = self._ring[index]
        self._ring[index] = None
        self._pop_cursor += 1
        return value  # type: ignore[return-value]


class SpscFifo(Generic[T]):
    """Circular FIFO safe for one producer thread and one consumer thread.

    Only the producer advances the push cursor and only the consumer
    advances the pop cursor. Each side reads the other's cursor once per
    call and publishes its own cursor only after the slot is written or
    read, so a slot is never seen before it is ready.
    """

    def __init__(self, capacity: int) -> None:
        self._capacity = _check_capacity(capacity)
        self._ring: list[T | None] = [None] * capacity
        self._push_cursor = 0
        self._pop_cursor = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        push_cursor = self._push_cursor
        pop_cursor = self._pop_cursor
        return push_cursor - pop_cursor

    def empty(self) -> bool:
        return len(self) == 0

    def full(self) -> bool:
        return len(self) == self._capacity

    def push(self, value: T) -> bool:
        """Append a value; return False if the fifo is full."""
        push_cursor = self._push_cursor
        pop_cursor = self._pop_cursor
        if push_cursor - pop_cursor == self._capacity:
            return False
        self._ring[push_cursor % self._capacity] = value
        self._push_cursor = push_cursor + 1
        return True

    def pop(self) -> T:
        """Remove and return the oldest value."""
        push_cursor = self._push_cursor
        pop_cursor = self._pop_cursor
        if push_cursor == pop_cursor:
            raise FifoEmpty("fifo is empty")
        index = pop_cursor % self._capacity
        value = self._ring[index]
        self._ring[index] = None
        self._pop_cursor = pop_cursor + 1
        return value  # type: ignore[return-value]
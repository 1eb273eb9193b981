"""Singly linked list with thread-safe insertion at the head."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any, Iterator

__all__ = ["ConcurrentList"]


@dataclass
class _Node:
    value: Any
    next: _Node | None = None


class ConcurrentList:
    """Linked list whose inserts may come from many threads at once."""

    def __init__(self) -> None:
        self._head: _Node | None = None
        self._lock = threading.Lock()

    def insert(self, value: Any) -> None:
        """Prepend a value; the newest value comes first."""
        node = _Node(value)
        with self._lock:
            node.next = self._head
            self._head = node

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def format(self) -> str:
        """Return the values from head to tail, separated by spaces."""
        return " ".join(str(value) for value in self)
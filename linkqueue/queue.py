"""A first-in, first-out queue built on singly linked nodes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


class EmptyQueueError(IndexError):
    """Raised when an operation needs an element but the queue is empty."""


@dataclass(slots=True)
class _Node:
    value: int
    next: _Node | None = None


class LinkedQueue:
    """FIFO queue of integers held in a chain of linked nodes."""

    def __init__(self, items: Iterable[int] | None = None) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for item in items or ():
            self.push(item)

    def push(self, value: int) -> None:
        """Append a value at the back of the queue."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def pop(self) -> int:
        """Remove and return the value at the front of the queue."""
        if self._head is None:
            raise EmptyQueueError("Queue is empty")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.value

    def front(self) -> int:
        """Return the value at the front without removing it."""
        if self._head is None:
            raise EmptyQueueError("Queue is empty")
        return self._head.value

    def back(self) -> int:
        """Return the value at the back without removing it."""
        if self._tail is None:
            raise EmptyQueueError("Queue is empty")
        return self._tail.value

    def is_empty(self) -> bool:
        """Return True when the queue holds no elements."""
        return self._head is None

    def clear(self) -> None:
        """Remove every element."""
        self._head = None
        self._tail = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"
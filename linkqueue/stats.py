"""Read-only computations over the contents of a queue."""

from __future__ import annotations

from collections import deque
from itertools import islice

from linkqueue.queue import EmptyQueueError, LinkedQueue


def total(queue: LinkedQueue) -> int:
    """Return the sum of all elements."""
    return sum(queue)


def average(queue: LinkedQueue) -> float:
    """Return the arithmetic mean of the elements."""
    if queue.is_empty():
        raise EmptyQueueError("Queue is empty")
    return total(queue) / len(queue)


def middle(queue: LinkedQueue) -> int:
    """Return the middle element; for an even count, the later of the two."""
    if queue.is_empty():
        raise EmptyQueueError("Queue is empty")
    return next(islice(queue, len(queue) // 2, None))


def _second_extreme(queue: LinkedQueue, better, label: str) -> int:
    if len(queue) < 2:
        raise ValueError(
            f"Queue does not have enough elements to find the second {label}."
        )
    first: int | None = None
    second: int | None = None
    for value in queue:
        if first is None or better(value, first):
            second = first
            first = value
        elif value != first and (second is None or better(value, second)):
            second = value
    if second is None:
        raise ValueError(f"There is no second {label} element.")
    return second


def second_highest(queue: LinkedQueue) -> int:
    """Return the largest value strictly below the maximum."""
    return _second_extreme(queue, lambda a, b: a > b, "highest")


def second_lowest(queue: LinkedQueue) -> int:
    """Return the smallest value strictly above the minimum."""
    return _second_extreme(queue, lambda a, b: a < b, "lowest")


def window_max(queue: LinkedQueue, k: int) -> list[int]:
    """Return the maximum of every contiguous window of size k, in order."""
    if k <= 0 or k > len(queue):
        raise ValueError("invalid size")
    incoming = iter(queue)
    outgoing = iter(queue)
    window: deque[int] = deque()

    def admit(value: int) -> None:
        while window and window[-1] < value:
            window.pop()
        window.append(value)

    for value in islice(incoming, k):
        admit(value)
    maxima = [window[0]]
    for value, old in zip(incoming, outgoing):
        admit(value)
        if window[0] == old:
            window.popleft()
        maxima.append(window[0])
    return maxima
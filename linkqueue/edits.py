"""Operations that change the contents of a queue in place."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from linkqueue.queue import LinkedQueue


def _refill(queue: LinkedQueue, values: Iterable[int]) -> None:
    """Replace the contents of ``queue`` with ``values``, keeping their order."""
    kept = list(values)
    queue.clear()
    for value in kept:
        queue.push(value)


def _remove_where(queue: LinkedQueue, predicate: Callable[[int], bool]) -> list[int]:
    """Drop every element matching ``predicate``; return the dropped ones in order."""
    kept: list[int] = []
    removed: list[int] = []
    for value in queue:
        (removed if predicate(value) else kept).append(value)
    if removed:
        _refill(queue, kept)
    return removed


def delete_middle(queue: LinkedQueue) -> int | None:
    """Remove the element at position ``len(queue) // 2`` and return it.

    An empty queue is left alone and ``None`` is returned.
    """
    if queue.is_empty():
        return None
    target = len(queue) // 2
    values = list(queue)
    removed = values.pop(target)
    _refill(queue, values)
    return removed


def remove_duplicates(queue: LinkedQueue) -> list[int]:
    """Keep only the first occurrence of each value; return the dropped repeats."""
    seen: set[int] = set()
    kept: list[int] = []
    removed: list[int] = []
    for value in queue:
        if value in seen:
            removed.append(value)
        else:
            seen.add(value)
            kept.append(value)
    if removed:
        _refill(queue, kept)
    return removed


def remove_odd(queue: LinkedQueue) -> list[int]:
    """Remove every odd value; return the removed values in queue order."""
    return _remove_where(queue, lambda value: value % 2 != 0)


def remove_even(queue: LinkedQueue) -> list[int]:
    """Remove every even value; return the removed values in queue order."""
    return _remove_where(queue, lambda value: value % 2 == 0)


def remove_greater_than(queue: LinkedQueue, limit: int) -> list[int]:
    """Remove every value strictly greater than ``limit``; return them in order."""
    return _remove_where(queue, lambda value: value > limit)


def remove_all(queue: LinkedQueue) -> list[int]:
    """Pop every element from the front; return them in the order removed."""
    removed: list[int] = []
    while not queue.is_empty():
        removed.append(queue.pop())
    return removed


def sort_queue(queue: LinkedQueue) -> None:
    """Sort the queue in ascending order, front to back."""
    _refill(queue, sorted(queue))
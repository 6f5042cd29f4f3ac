# linkqueue

A first-in, first-out queue of integers built on singly linked nodes, with
functions that compute statistics over it, functions that edit it in place,
and a small `linkqueue` command.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The queue

```python
from linkqueue.queue import LinkedQueue, EmptyQueueError

q = LinkedQueue([1, 2, 3])
q.push(4)
q.front()      # 1
q.back()       # 4
q.pop()        # 1, removed from the front
len(q)         # 3
list(q)        # [2, 3, 4]
q.is_empty()   # False
q.clear()
q              # LinkedQueue([])
```

`front()`, `back()` and `pop()` raise `EmptyQueueError` (a subclass of
`IndexError`) when the queue is empty.

## Statistics (`linkqueue.stats`)

None of these change the queue.

```python
from linkqueue.queue import LinkedQueue
from linkqueue import stats

q = LinkedQueue([1, 3, -1, -3, 5, 3, 6, 7])
stats.total(q)            # 21
stats.average(q)          # 2.625
stats.middle(q)           # 5  (element at index len // 2)
stats.second_highest(q)   # 6
stats.second_lowest(q)    # -1
stats.window_max(q, 3)    # [3, 3, 5, 5, 6, 7]
```

- `average` and `middle` raise `EmptyQueueError` on an empty queue.
- `second_highest` and `second_lowest` raise `ValueError` when the queue has
  fewer than two elements, or when all its elements are equal.
- `window_max` raises `ValueError("invalid size")` unless `1 <= k <= len(queue)`.

## Editing in place (`linkqueue.edits`)

```python
from linkqueue.queue import LinkedQueue
from linkqueue import edits

q = LinkedQueue([1, 2, 3, 3, 2, 6])
edits.remove_duplicates(q)        # [3, 2]   -> q is [1, 2, 3, 6]
edits.remove_greater_than(q, 3)   # [6]      -> q is [1, 2, 3]
edits.delete_middle(q)            # 2        -> q is [1, 3]
edits.remove_odd(q)               # [1, 3]   -> q is []
```

- `remove_duplicates`, `remove_odd`, `remove_even` and `remove_greater_than`
  return the removed values in queue order.
- `delete_middle` removes and returns the element at index `len(queue) // 2`;
  on an empty queue it returns `None` and does nothing.
- `remove_all` pops every element and returns them front to back.
- `sort_queue` sorts the queue in ascending order and returns `None`.

## Command line

```
linkqueue --help
```

Each subcommand loads the given integers into a queue, front first:

- `linkqueue drain 1 2 3` prints the popped front element, the remaining
  size, the new front, then every remaining element. With no values it prints
  `Queue is empty` to standard error and exits with status 1.
- `linkqueue show 1 2 3` prints the top (front) and bottom (back) elements,
  then every element.
- `linkqueue window 3 1 3 -1 -3 5 3 6 7` prints the maximum of each sliding
  window of size 3. An invalid window size prints `invalid size` to standard
  error and exits with status 1.

## Limits

The queue holds plain integers in memory only; there is no way to save it or
load it from a file.
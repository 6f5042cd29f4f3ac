import pytest

from linkqueue.queue import EmptyQueueError, LinkedQueue


def test_fifo_order():
    q = LinkedQueue()
    for v in (1, 2, 3):
        q.push(v)
    assert [q.pop(), q.pop(), q.pop()] == [1, 2, 3]
    assert q.is_empty()


def test_front_after_pop():
    q = LinkedQueue([1, 2, 3])
    assert q.front() == 1
    assert q.pop() == 1
    assert q.front() == 2
    assert len(q) == 2


def test_back_tracks_last_push():
    q = LinkedQueue([1, 2, 3, 4, 5])
    assert q.back() == 5
    q.push(6)
    assert q.back() == 6
    assert q.front() == 1


def test_iteration_matches_input():
    items = [4, -1, 7, 7, 0]
    q = LinkedQueue(items)
    assert list(q) == items
    assert len(q) == len(items)


def test_empty_front_back_pop_raise():
    q = LinkedQueue()
    with pytest.raises(EmptyQueueError):
        q.front()
    with pytest.raises(EmptyQueueError):
        q.back()
    with pytest.raises(EmptyQueueError):
        q.pop()


def test_empty_error_is_index_error():
    with pytest.raises(IndexError):
        LinkedQueue().pop()


def test_draining_resets_tail():
    q = LinkedQueue([1])
    assert q.pop() == 1
    q.push(9)
    assert q.front() == 9
    assert q.back() == 9
    assert len(q) == 1


def test_clear():
    q = LinkedQueue([1, 2, 3])
    q.clear()
    assert q.is_empty()
    assert len(q) == 0
    assert list(q) == []
    q.push(2)
    assert list(q) == [2]


def test_repr():
    assert repr(LinkedQueue([1, 2, 3])) == "LinkedQueue([1, 2, 3])"
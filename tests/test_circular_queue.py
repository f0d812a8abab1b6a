import pytest

from dsworkbench.circular_queue import CircularQueue


def test_new_queue_is_empty():
    q = CircularQueue()
    assert q.is_empty()
    assert not q.is_full()
    assert len(q) == 0


def test_default_capacity_is_five():
    q = CircularQueue()
    for value in range(1, 6):
        q.enqueue(value)
    assert q.is_full()
    assert len(q) == 5
    with pytest.raises(OverflowError):
        q.enqueue(6)


def test_fifo_order():
    q = CircularQueue(3)
    for value in (7, 8, 9):
        q.enqueue(value)
    assert [q.dequeue() for _ in range(3)] == [7, 8, 9]
    assert q.is_empty()


def test_dequeue_empty_raises():
    q = CircularQueue(2)
    with pytest.raises(IndexError):
        q.dequeue()


def test_wraps_around():
    q = CircularQueue(3)
    q.enqueue(1)
    q.enqueue(2)
    q.enqueue(3)
    assert q.dequeue() == 1
    q.enqueue(4)
    assert q.is_full()
    assert q.slots() == [4, 2, 3]
    assert [q.dequeue() for _ in range(3)] == [2, 3, 4]


def test_dequeued_slot_is_cleared():
    q = CircularQueue(3)
    q.enqueue(5)
    q.enqueue(6)
    q.dequeue()
    assert q.slots()[0] == 0
    assert q.slots()[1] == 6


def test_capacity_one():
    q = CircularQueue(1)
    q.enqueue(11)
    assert q.is_full()
    assert q.dequeue() == 11
    assert q.is_empty()


def test_invalid_capacity():
    with pytest.raises(ValueError):
        CircularQueue(0)
"""A fixed-capacity FIFO queue kept in a ring of slots."""

from __future__ import annotations

__all__ = ["CircularQueue"]

DEFAULT_CAPACITY = 5


class CircularQueue:
    """A ring-buffer queue of integers.

    Slots start at zero.  Full queues raise OverflowError on ``enqueue`` and
    empty ones raise IndexError on ``dequeue``.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("queue capacity must be positive")
        self._slots = [0] * capacity
        self._front = -1
        self._rear = -1
        self._count = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def is_empty(self) -> bool:
        """Whether the queue holds no items."""
        return self._front == -1 and self._rear == -1

    def is_full(self) -> bool:
        """Whether every slot is in use."""
        return (self._rear + 1) % self.capacity == self._front

    def enqueue(self, value: int) -> None:
        """Add ``value`` at the rear."""
        if self.is_full():
            raise OverflowError("Queue full")
        if self.is_empty():
            self._front = self._rear = 0
        else:
            self._rear = (self._rear + 1) % self.capacity
        self._slots[self._rear] = value
        self._count += 1

    def dequeue(self) -> int:
        """Remove and return the item at the front."""
        if self.is_empty():
            raise IndexError("Queue is Empty")
        if self._front == self._rear:
            value = self._slots[self._rear]
            self._front = self._rear = -1
        else:
            value = self._slots[self._front]
            self._slots[self._front] = 0
            self._front = (self._front + 1) % self.capacity
        self._count -= 1
        return value

    def __len__(self) -> int:
        return self._count

    def slots(self) -> list[int]:
        """A copy of the raw ring of slots, in storage order."""
        return list(self._slots)
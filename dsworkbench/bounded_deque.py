"""A fixed-capacity double-ended queue kept in a ring buffer."""

from __future__ import annotations

__all__ = ["BoundedDeque"]


class BoundedDeque:
    """A deque of integers holding at most ``capacity`` items.

    Pushing onto a full deque raises OverflowError; popping or peeking an
    empty one raises IndexError.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("deque capacity must be positive")
        self._slots = [0] * capacity
        self._head = 0
        self._count = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def is_empty(self) -> bool:
        """Whether the deque holds no items."""
        return self._count == 0

    def is_full(self) -> bool:
        """Whether the deque holds ``capacity`` items."""
        return self._count == self.capacity

    def __len__(self) -> int:
        return self._count

    def _tail(self) -> int:
        return (self._head + self._count - 1) % self.capacity

    def push_front(self, value: int) -> None:
        """Insert ``value`` before the first item."""
        if self.is_full():
            raise OverflowError("Deque is full. Unable to insert element at the front.")
        self._head = (self._head - 1) % self.capacity
        self._slots[self._head] = value
        self._count += 1

    def push_back(self, value: int) -> None:
        """Insert ``value`` after the last item."""
        if self.is_full():
            raise OverflowError("Deque is full. Unable to insert element at the rear.")
        self._count += 1
        self._slots[self._tail()] = value

    def pop_front(self) -> int:
        """Remove and return the first item."""
        if self.is_empty():
            raise IndexError("Deque is empty. Unable to delete element from the front.")
        value = self._slots[self._head]
        self._head = (self._head + 1) % self.capacity
        self._count -= 1
        return value

    def pop_back(self) -> int:
        """Remove and return the last item."""
        if self.is_empty():
            raise IndexError("Deque is empty. Unable to delete element from the rear.")
        value = self._slots[self._tail()]
        self._count -= 1
        return value

    def front(self) -> int:
        """The first item, left in place."""
        if self.is_empty():
            raise IndexError("Deque is empty. No front element to retrieve.")
        return self._slots[self._head]

    def back(self) -> int:
        """The last item, left in place."""
        if self.is_empty():
            raise IndexError("Deque is empty. No rear element to retrieve.")
        return self._slots[self._tail()]
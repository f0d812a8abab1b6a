"""A singly linked circular list of nodes identified by unique keys."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

__all__ = ["CircularNode", "CircularLinkedList"]


@dataclass(eq=False)
class CircularNode:
    """A list node holding a unique key, its data and the next node."""

    key: int
    data: int
    next: CircularNode | None = field(default=None, repr=False)


class CircularLinkedList:
    """A circular list: the last node links back to the head.

    Keys are unique; adding a key that is already present raises ValueError,
    and naming a key that is absent raises KeyError.
    """

    def __init__(self) -> None:
        self.head: CircularNode | None = None
        self._tail: CircularNode | None = None
        self._size = 0

    def _nodes(self) -> Iterator[CircularNode]:
        node = self.head
        if node is None:
            return
        while True:
            yield node
            assert node.next is not None
            node = node.next
            if node is self.head:
                return

    def find(self, key: int) -> CircularNode | None:
        """The node with ``key``, or None."""
        return next((node for node in self._nodes() if node.key == key), None)

    def _check_new(self, key: int) -> None:
        if self.find(key) is not None:
            raise ValueError(f"Node already exists with key value: {key}")

    def _require(self, key: int) -> CircularNode:
        node = self.find(key)
        if node is None:
            raise KeyError(key)
        return node

    def _link_first(self, node: CircularNode) -> None:
        node.next = node
        self.head = self._tail = node

    def append(self, key: int, data: int) -> CircularNode:
        """Add a node at the end of the list and return it."""
        self._check_new(key)
        node = CircularNode(key, data)
        if self._tail is None:
            self._link_first(node)
        else:
            node.next = self.head
            self._tail.next = node
            self._tail = node
        self._size += 1
        return node

    def prepend(self, key: int, data: int) -> CircularNode:
        """Add a node at the start of the list and return it."""
        self._check_new(key)
        node = CircularNode(key, data)
        if self._tail is None:
            self._link_first(node)
        else:
            node.next = self.head
            self._tail.next = node
            self.head = node
        self._size += 1
        return node

    def insert_after(self, after_key: int, key: int, data: int) -> CircularNode:
        """Insert a node directly after the node with ``after_key``."""
        target = self._require(after_key)
        self._check_new(key)
        node = CircularNode(key, data, target.next)
        target.next = node
        if target is self._tail:
            self._tail = node
        self._size += 1
        return node

    def delete(self, key: int) -> None:
        """Unlink the node with ``key``."""
        node = self._require(key)
        if self._size == 1:
            self.head = self._tail = None
            self._size = 0
            return
        prev = self._tail
        assert prev is not None
        while prev.next is not node:
            assert prev.next is not None
            prev = prev.next
        prev.next = node.next
        if node is self.head:
            self.head = node.next
        if node is self._tail:
            self._tail = prev
        node.next = None
        self._size -= 1

    def update(self, key: int, data: int) -> None:
        """Replace the data of the node with ``key``."""
        self._require(key).data = data

    def __iter__(self) -> Iterator[tuple[int, int]]:
        """Yield ``(key, data)`` pairs once around the list, starting at the head."""
        return ((node.key, node.data) for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        if self.head is None:
            return "No Nodes in Circular Linked List"
        return "".join(f"({key},{data}) --> " for key, data in self)
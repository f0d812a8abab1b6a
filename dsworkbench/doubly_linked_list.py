"""A doubly linked list of nodes identified by unique keys."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

__all__ = ["DoublyNode", "DoublyLinkedList"]


@dataclass(eq=False)
class DoublyNode:
    """A list node holding a unique key, its data and links both ways."""

    key: int
    data: int
    next: DoublyNode | None = field(default=None, repr=False)
    previous: DoublyNode | None = field(default=None, repr=False)


class DoublyLinkedList:
    """A linked list that can be walked forwards and backwards.

    Keys are unique; adding a key that is already present raises ValueError,
    and naming a key that is absent raises KeyError.
    """

    def __init__(self) -> None:
        self.head: DoublyNode | None = None
        self._tail: DoublyNode | None = None
        self._size = 0

    def _nodes(self) -> Iterator[DoublyNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def find(self, key: int) -> DoublyNode | None:
        """The node with ``key``, or None."""
        return next((node for node in self._nodes() if node.key == key), None)

    def _check_new(self, key: int) -> None:
        if self.find(key) is not None:
            raise ValueError(f"Node already exists with key value: {key}")

    def _require(self, key: int) -> DoublyNode:
        node = self.find(key)
        if node is None:
            raise KeyError(key)
        return node

    def append(self, key: int, data: int) -> DoublyNode:
        """Add a node at the end of the list and return it."""
        self._check_new(key)
        node = DoublyNode(key, data, previous=self._tail)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def prepend(self, key: int, data: int) -> DoublyNode:
        """Add a node at the start of the list and return it."""
        self._check_new(key)
        node = DoublyNode(key, data, next=self.head)
        if self.head is None:
            self._tail = node
        else:
            self.head.previous = node
        self.head = node
        self._size += 1
        return node

    def insert_after(self, after_key: int, key: int, data: int) -> DoublyNode:
        """Insert a node directly after the node with ``after_key``."""
        target = self._require(after_key)
        self._check_new(key)
        node = DoublyNode(key, data, next=target.next, previous=target)
        if target.next is None:
            self._tail = node
        else:
            target.next.previous = node
        target.next = node
        self._size += 1
        return node

    def delete(self, key: int) -> None:
        """Unlink the node with ``key``."""
        node = self._require(key)
        if node.previous is None:
            self.head = node.next
        else:
            node.previous.next = node.next
        if node.next is None:
            self._tail = node.previous
        else:
            node.next.previous = node.previous
        node.next = node.previous = None
        self._size -= 1

    def update(self, key: int, data: int) -> None:
        """Replace the data of the node with ``key``."""
        self._require(key).data = data

    def __iter__(self) -> Iterator[tuple[int, int]]:
        """Yield ``(key, data)`` pairs from head to tail."""
        return ((node.key, node.data) for node in self._nodes())

    def __reversed__(self) -> Iterator[tuple[int, int]]:
        """Yield ``(key, data)`` pairs from tail to head."""
        node = self._tail
        while node is not None:
            yield node.key, node.data
            node = node.previous

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        if self.head is None:
            return "No Nodes in Doubly Linked List"
        return "".join(f"({key},{data}) <--> " for key, data in self)
"""A Fibonacci min-heap of integer keys."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

__all__ = ["FibonacciNode", "FibonacciHeap"]


@dataclass(eq=False)
class FibonacciNode:
    """A heap node; siblings form a circular doubly linked ring."""

    key: int
    degree: int = 0
    marked: bool = False
    parent: FibonacciNode | None = field(default=None, repr=False)
    child: FibonacciNode | None = field(default=None, repr=False)
    prev: FibonacciNode = field(default=None, repr=False)  # type: ignore[assignment]
    next: FibonacciNode = field(default=None, repr=False)  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if self.prev is None:
            self.prev = self
        if self.next is None:
            self.next = self


def _ring(start: FibonacciNode) -> Iterator[FibonacciNode]:
    node = start
    while True:
        yield node
        node = node.next
        if node is start:
            return


class FibonacciHeap:
    """A min-heap with constant-time insert and amortised logarithmic extract."""

    def __init__(self) -> None:
        self._min: FibonacciNode | None = None
        self._count = 0

    def is_empty(self) -> bool:
        """Whether the heap holds no keys."""
        return self._min is None

    def __len__(self) -> int:
        return self._count

    def _add_root(self, node: FibonacciNode) -> None:
        if self._min is None:
            node.prev = node.next = node
            self._min = node
            return
        node.prev = self._min
        node.next = self._min.next
        self._min.next.prev = node
        self._min.next = node

    def insert(self, key: int) -> FibonacciNode:
        """Add ``key``; return the node that holds it."""
        node = FibonacciNode(key)
        self._add_root(node)
        assert self._min is not None
        if key < self._min.key:
            self._min = node
        self._count += 1
        return node

    def minimum(self) -> int:
        """The smallest key; raise IndexError when empty."""
        if self._min is None:
            raise IndexError("heap is empty")
        return self._min.key

    def extract_min(self) -> int:
        """Remove and return the smallest key; raise IndexError when empty."""
        z = self._min
        if z is None:
            raise IndexError("heap is empty")
        if z.child is not None:
            for child in list(_ring(z.child)):
                child.parent = None
                self._add_root(child)
            z.child = None
        if z.next is z:
            self._min = None
        else:
            z.prev.next = z.next
            z.next.prev = z.prev
            self._min = z.next
            self._consolidate()
        z.prev = z.next = z
        self._count -= 1
        return z.key

    def _consolidate(self) -> None:
        assert self._min is not None
        by_degree: dict[int, FibonacciNode] = {}
        for root in list(_ring(self._min)):
            node = root
            degree = node.degree
            while degree in by_degree:
                other = by_degree.pop(degree)
                if node.key > other.key:
                    node, other = other, node
                self._link(other, node)
                degree += 1
            by_degree[degree] = node
        self._min = None
        for node in by_degree.values():
            self._add_root(node)
            assert self._min is not None
            if node.key < self._min.key:
                self._min = node

    @staticmethod
    def _link(child: FibonacciNode, parent: FibonacciNode) -> None:
        child.parent = parent
        child.marked = False
        if parent.child is None:
            child.prev = child.next = child
            parent.child = child
        else:
            head = parent.child
            child.prev = head
            child.next = head.next
            head.next.prev = child
            head.next = child
        parent.degree += 1

    def _cut(self, node: FibonacciNode, parent: FibonacciNode) -> None:
        if node.next is node:
            parent.child = None
        else:
            node.prev.next = node.next
            node.next.prev = node.prev
            if parent.child is node:
                parent.child = node.next
        parent.degree -= 1
        node.parent = None
        node.marked = False
        self._add_root(node)

    def decrease_key(self, node: FibonacciNode, new_key: int) -> None:
        """Lower ``node``'s key; a key larger than the current one is ignored."""
        if new_key > node.key:
            return
        node.key = new_key
        parent = node.parent
        if parent is not None and node.key < parent.key:
            self._cut(node, parent)
            current = parent
            while current.parent is not None:
                if not current.marked:
                    current.marked = True
                    break
                above = current.parent
                self._cut(current, above)
                current = above
        assert self._min is not None
        if node.key < self._min.key:
            self._min = node
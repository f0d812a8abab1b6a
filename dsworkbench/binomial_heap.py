"""A binomial min-heap of integer keys."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["BinomialNode", "BinomialHeap"]


@dataclass(eq=False)
class BinomialNode:
    """A node of a binomial tree; ``children[i]`` roots a tree of degree ``i``."""

    key: int
    degree: int = 0
    children: list[BinomialNode] = field(default_factory=list)
    parent: BinomialNode | None = field(default=None, repr=False)


def _link(a: BinomialNode, b: BinomialNode) -> BinomialNode:
    if a.key > b.key:
        a, b = b, a
    b.parent = a
    a.children.append(b)
    a.degree += 1
    return a


def _union(
    first: list[BinomialNode | None], second: list[BinomialNode | None]
) -> list[BinomialNode | None]:
    """Add two root lists indexed by degree, carrying like binary addition."""
    result: list[BinomialNode | None] = []
    carry: BinomialNode | None = None
    for degree in range(max(len(first), len(second)) + 1):
        trees = [
            tree
            for tree in (
                first[degree] if degree < len(first) else None,
                second[degree] if degree < len(second) else None,
                carry,
            )
            if tree is not None
        ]
        carry = None
        if len(trees) % 2 == 1:
            result.append(trees.pop())
        else:
            result.append(None)
        if trees:
            carry = _link(trees[0], trees[1])
    while result and result[-1] is None:
        result.pop()
    return result


class BinomialHeap:
    """A min-heap kept as at most one binomial tree of each degree."""

    def __init__(self) -> None:
        self._trees: list[BinomialNode | None] = []
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def insert(self, key: int) -> BinomialNode:
        """Add ``key``; return the node that holds it."""
        node = BinomialNode(key)
        self._trees = _union(self._trees, [node])
        self._size += 1
        return node

    def _min_degree(self) -> int:
        roots = [(tree.key, degree) for degree, tree in enumerate(self._trees) if tree]
        if not roots:
            raise IndexError("heap is empty")
        return min(roots)[1]

    def minimum(self) -> int:
        """The smallest key; raise IndexError when empty."""
        tree = self._trees[self._min_degree()]
        assert tree is not None
        return tree.key

    def extract_min(self) -> int:
        """Remove and return the smallest key; raise IndexError when empty."""
        degree = self._min_degree()
        node = self._trees[degree]
        assert node is not None
        self._trees[degree] = None
        for child in node.children:
            child.parent = None
        self._trees = _union(self._trees, list(node.children))
        self._size -= 1
        return node.key

    def decrease_key(self, node: BinomialNode, new_key: int) -> BinomialNode:
        """Lower ``node``'s key and restore heap order.

        Keys move up the tree, so the node that finally holds ``new_key`` is
        returned.  Raising a key is refused with ValueError.
        """
        if new_key > node.key:
            raise ValueError("new key is greater than the current key")
        node.key = new_key
        while node.parent is not None and node.key < node.parent.key:
            parent = node.parent
            node.key, parent.key = parent.key, node.key
            node = parent
        return node

    def render(self) -> str:
        """Each tree's keys in preorder, one line per occupied degree."""
        lines = ["Binomial Heap:\n"]
        for degree, tree in enumerate(self._trees):
            if tree is None:
                continue
            keys: list[str] = []
            stack = [tree]
            while stack:
                node = stack.pop()
                keys.append(f"{node.key} ")
                stack.extend(reversed(node.children))
            lines.append(f"Tree of degree {degree}: {''.join(keys)}\n")
        return "".join(lines)
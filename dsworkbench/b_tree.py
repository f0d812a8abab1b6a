"""A B-tree of integer keys with a configurable minimum degree."""

from __future__ import annotations

from bisect import bisect_left, bisect_right, insort_right
from collections.abc import Iterator
from dataclasses import dataclass, field

__all__ = ["BTreeNode", "BTree"]


@dataclass(eq=False)
class BTreeNode:
    """A node holding sorted keys and, unless it is a leaf, one more child than keys."""

    leaf: bool
    keys: list[int] = field(default_factory=list)
    children: list[BTreeNode] = field(default_factory=list)


class BTree:
    """A B-tree of minimum degree ``degree``.

    Every node holds at most ``2 * degree - 1`` keys, and every node other
    than the root holds at least ``degree - 1``.  Equal keys may be stored
    more than once.
    """

    def __init__(self, degree: int) -> None:
        if degree < 2:
            raise ValueError("B-tree degree must be at least 2")
        self.degree = degree
        self.root: BTreeNode | None = None

    @property
    def _max_keys(self) -> int:
        return 2 * self.degree - 1

    def insert(self, key: int) -> None:
        """Add ``key`` to the tree."""
        root = self.root
        if root is None:
            self.root = BTreeNode(leaf=True, keys=[key])
            return
        if len(root.keys) == self._max_keys:
            new_root = BTreeNode(leaf=False, children=[root])
            self._split_child(new_root, 0, root)
            self._insert_non_full(new_root, key)
            self.root = new_root
        else:
            self._insert_non_full(root, key)

    def _split_child(self, parent: BTreeNode, index: int, child: BTreeNode) -> None:
        t = self.degree
        sibling = BTreeNode(leaf=child.leaf)
        parent.keys.insert(index, child.keys[t - 1])
        parent.children.insert(index + 1, sibling)
        sibling.keys = child.keys[t:]
        del child.keys[t - 1:]
        if not child.leaf:
            sibling.children = child.children[t:]
            del child.children[t:]

    def _insert_non_full(self, node: BTreeNode, key: int) -> None:
        while not node.leaf:
            index = bisect_right(node.keys, key)
            child = node.children[index]
            if len(child.keys) == self._max_keys:
                self._split_child(node, index, child)
                if key > node.keys[index]:
                    index += 1
            node = node.children[index]
        insort_right(node.keys, key)

    def remove(self, key: int) -> None:
        """Remove one occurrence of ``key``; raise KeyError if it is absent."""
        if self.root is None:
            raise KeyError(key)
        try:
            self._remove_key(self.root, key)
        finally:
            self._shrink_root()

    def _shrink_root(self) -> None:
        root = self.root
        if root is not None and not root.keys:
            self.root = None if root.leaf else root.children[0]

    def _remove_key(self, node: BTreeNode, key: int) -> None:
        index = bisect_left(node.keys, key)
        if index < len(node.keys) and node.keys[index] == key:
            if node.leaf:
                del node.keys[index]
            else:
                self._remove_from_internal(node, index)
            return
        if node.leaf:
            raise KeyError(key)
        at_end = index == len(node.keys)
        if len(node.children[index].keys) < self.degree:
            self._fill_child(node, index)
        if at_end and index > len(node.keys):
            self._remove_key(node.children[index - 1], key)
        else:
            self._remove_key(node.children[index], key)

    def _remove_from_internal(self, node: BTreeNode, index: int) -> None:
        key = node.keys[index]
        left, right = node.children[index], node.children[index + 1]
        if len(left.keys) >= self.degree:
            predecessor = self._rightmost(left)
            node.keys[index] = predecessor
            self._remove_key(left, predecessor)
        elif len(right.keys) >= self.degree:
            successor = self._leftmost(right)
            node.keys[index] = successor
            self._remove_key(right, successor)
        else:
            self._merge_children(node, index)
            self._remove_key(node.children[index], key)

    @staticmethod
    def _rightmost(node: BTreeNode) -> int:
        while not node.leaf:
            node = node.children[-1]
        return node.keys[-1]

    @staticmethod
    def _leftmost(node: BTreeNode) -> int:
        while not node.leaf:
            node = node.children[0]
        return node.keys[0]

    def _merge_children(self, node: BTreeNode, index: int) -> None:
        child = node.children[index]
        sibling = node.children[index + 1]
        child.keys.append(node.keys[index])
        child.keys.extend(sibling.keys)
        if not child.leaf:
            child.children.extend(sibling.children)
        del node.keys[index]
        del node.children[index + 1]

    def _fill_child(self, node: BTreeNode, index: int) -> None:
        if index != 0 and len(node.children[index - 1].keys) >= self.degree:
            self._borrow_from_previous(node, index)
        elif index != len(node.keys) and len(node.children[index + 1].keys) >= self.degree:
            self._borrow_from_next(node, index)
        elif index != len(node.keys):
            self._merge_children(node, index)
        else:
            self._merge_children(node, index - 1)

    @staticmethod
    def _borrow_from_previous(node: BTreeNode, index: int) -> None:
        child = node.children[index]
        sibling = node.children[index - 1]
        child.keys.insert(0, node.keys[index - 1])
        if not child.leaf:
            child.children.insert(0, sibling.children.pop())
        node.keys[index - 1] = sibling.keys.pop()

    @staticmethod
    def _borrow_from_next(node: BTreeNode, index: int) -> None:
        child = node.children[index]
        sibling = node.children[index + 1]
        child.keys.append(node.keys[index])
        if not child.leaf:
            child.children.append(sibling.children.pop(0))
        node.keys[index] = sibling.keys.pop(0)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, int):
            return False
        node = self.root
        while node is not None:
            index = bisect_left(node.keys, key)
            if index < len(node.keys) and node.keys[index] == key:
                return True
            if node.leaf:
                return False
            node = node.children[index]
        return False

    def keys(self) -> list[int]:
        """All keys in ascending order."""
        return list(self._walk(self.root)) if self.root is not None else []

    def _walk(self, node: BTreeNode) -> Iterator[int]:
        if node.leaf:
            yield from node.keys
            return
        for child, key in zip(node.children, node.keys):
            yield from self._walk(child)
            yield key
        yield from self._walk(node.children[-1])

    def render(self) -> str:
        """Every node's keys in preorder, each written as ``[k1, k2] ``."""
        parts: list[str] = []
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            parts.append("[" + ", ".join(str(k) for k in node.keys) + "] ")
            if not node.leaf:
                stack.extend(reversed(node.children))
        return "".join(parts)
"""A self-balancing AVL tree of distinct integers."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass

__all__ = ["AVLNode", "AVLTree"]

_SPACE = 10
_RENDER_INDENT = 5


@dataclass(eq=False)
class AVLNode:
    """A tree node holding a value, its children and its cached height."""

    value: int
    left: AVLNode | None = None
    right: AVLNode | None = None
    height: int = 0


def _height(node: AVLNode | None) -> int:
    return -1 if node is None else node.height


def _refresh(node: AVLNode) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _rotate_right(y: AVLNode) -> AVLNode:
    x = y.left
    assert x is not None
    y.left = x.right
    x.right = y
    _refresh(y)
    _refresh(x)
    return x


def _rotate_left(x: AVLNode) -> AVLNode:
    y = x.right
    assert y is not None
    x.right = y.left
    y.left = x
    _refresh(x)
    _refresh(y)
    return y


class AVLTree:
    """An AVL tree; duplicates are refused and every subtree stays balanced."""

    def __init__(self) -> None:
        self.root: AVLNode | None = None

    def is_empty(self) -> bool:
        """Whether the tree holds no values."""
        return self.root is None

    def height(self) -> int:
        """Height of the tree; an empty tree has height -1."""
        return _height(self.root)

    def balance_factor(self, node: AVLNode | None) -> int:
        """Left height minus right height; -1 for a missing node."""
        if node is None:
            return -1
        return _height(node.left) - _height(node.right)

    def search(self, value: int) -> AVLNode | None:
        """The node holding ``value``, or None."""
        node = self.root
        while node is not None and node.value != value:
            node = node.left if value < node.value else node.right
        return node

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.search(value) is not None

    def insert(self, value: int) -> bool:
        """Insert ``value``; return False if it is already present."""
        if value in self:
            return False
        self.root = self._insert(self.root, value)
        return True

    def _insert(self, node: AVLNode | None, value: int) -> AVLNode:
        if node is None:
            return AVLNode(value)
        if value < node.value:
            node.left = self._insert(node.left, value)
        else:
            node.right = self._insert(node.right, value)
        _refresh(node)

        bf = self.balance_factor(node)
        if bf > 1 and node.left is not None:
            if value < node.left.value:
                return _rotate_right(node)
            node.left = _rotate_left(node.left)
            return _rotate_right(node)
        if bf < -1 and node.right is not None:
            if value > node.right.value:
                return _rotate_left(node)
            node.right = _rotate_right(node.right)
            return _rotate_left(node)
        return node

    def delete(self, value: int) -> None:
        """Remove ``value``; raise KeyError if it is not in the tree."""
        if value not in self:
            raise KeyError(value)
        self.root = self._delete(self.root, value)

    def _delete(self, node: AVLNode | None, value: int) -> AVLNode | None:
        if node is None:
            return None
        if value < node.value:
            node.left = self._delete(node.left, value)
        elif value > node.value:
            node.right = self._delete(node.right, value)
        elif node.left is None:
            return node.right
        elif node.right is None:
            return node.left
        else:
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.value = successor.value
            node.right = self._delete(node.right, successor.value)
        _refresh(node)

        bf = self.balance_factor(node)
        if bf == 2:
            if self.balance_factor(node.left) >= 0:
                return _rotate_right(node)
            assert node.left is not None
            node.left = _rotate_left(node.left)
            return _rotate_right(node)
        if bf == -2:
            if self.balance_factor(node.right) <= 0:
                return _rotate_left(node)
            assert node.right is not None
            node.right = _rotate_right(node.right)
            return _rotate_left(node)
        return node

    def preorder(self) -> list[int]:
        """Values in node, left, right order."""
        return list(self._preorder(self.root))

    def _preorder(self, node: AVLNode | None) -> Iterator[int]:
        if node is not None:
            yield node.value
            yield from self._preorder(node.left)
            yield from self._preorder(node.right)

    def inorder(self) -> list[int]:
        """Values in ascending order."""
        return list(self._inorder(self.root))

    def _inorder(self, node: AVLNode | None) -> Iterator[int]:
        if node is not None:
            yield from self._inorder(node.left)
            yield node.value
            yield from self._inorder(node.right)

    def postorder(self) -> list[int]:
        """Values in left, right, node order."""
        return list(self._postorder(self.root))

    def _postorder(self, node: AVLNode | None) -> Iterator[int]:
        if node is not None:
            yield from self._postorder(node.left)
            yield from self._postorder(node.right)
            yield node.value

    def level_order(self) -> list[int]:
        """Values level by level, left to right within a level."""
        order: list[int] = []
        queue = deque([self.root] if self.root is not None else [])
        while queue:
            node = queue.popleft()
            order.append(node.value)
            queue.extend(child for child in (node.left, node.right) if child)
        return order

    def render(self) -> str:
        """The tree drawn sideways: right subtree on top, deeper levels indented."""
        parts: list[str] = []
        self._render(self.root, _RENDER_INDENT, parts)
        return "".join(parts)

    def _render(self, node: AVLNode | None, space: int, parts: list[str]) -> None:
        if node is None:
            return
        space += _SPACE
        self._render(node.right, space, parts)
        parts.append("\n" + " " * (space - _SPACE) + f"{node.value}\n")
        self._render(node.left, space, parts)
"""An unbalanced binary search tree of distinct integers."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass

__all__ = ["BSTNode", "BinarySearchTree"]

_SPACE = 10
_RENDER_INDENT = 5


@dataclass(eq=False)
class BSTNode:
    """A tree node holding a value and its two children."""

    value: int
    left: BSTNode | None = None
    right: BSTNode | None = None


class BinarySearchTree:
    """A binary search tree; duplicate values are refused."""

    def __init__(self) -> None:
        self.root: BSTNode | None = None

    def is_empty(self) -> bool:
        """Whether the tree holds no values."""
        return self.root is None

    def search(self, value: int) -> BSTNode | None:
        """The node holding ``value``, or None."""
        node = self.root
        while node is not None and node.value != value:
            node = node.left if value < node.value else node.right
        return node

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.search(value) is not None

    def insert(self, value: int) -> bool:
        """Insert ``value``; return False if it is already present."""
        if self.root is None:
            self.root = BSTNode(value)
            return True
        node = self.root
        while True:
            if value == node.value:
                return False
            if value < node.value:
                if node.left is None:
                    node.left = BSTNode(value)
                    return True
                node = node.left
            else:
                if node.right is None:
                    node.right = BSTNode(value)
                    return True
                node = node.right

    def delete(self, value: int) -> None:
        """Remove ``value``; raise KeyError if it is not in the tree."""
        parent: BSTNode | None = None
        node = self.root
        while node is not None and node.value != value:
            parent = node
            node = node.left if value < node.value else node.right
        if node is None:
            raise KeyError(value)

        if node.left is not None and node.right is not None:
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            node.value = successor.value
            if successor_parent is node:
                successor_parent.right = successor.right
            else:
                successor_parent.left = successor.right
            return

        child = node.left if node.left is not None else node.right
        if parent is None:
            self.root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child

    def height(self) -> int:
        """Height of the tree; an empty tree has height -1."""
        height = -1
        level = [self.root] if self.root is not None else []
        while level:
            height += 1
            level = [c for n in level for c in (n.left, n.right) if c is not None]
        return height

    def preorder(self) -> list[int]:
        """Values in node, left, right order."""
        order: list[int] = []
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            order.append(node.value)
            stack.extend(c for c in (node.right, node.left) if c is not None)
        return order

    def inorder(self) -> list[int]:
        """Values in ascending order."""
        order: list[int] = []
        stack: list[BSTNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            order.append(node.value)
            node = node.right
        return order

    def postorder(self) -> list[int]:
        """Values in left, right, node order."""
        order: list[int] = []
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            order.append(node.value)
            stack.extend(c for c in (node.left, node.right) if c is not None)
        order.reverse()
        return order

    def level_order(self) -> list[int]:
        """Values level by level, left to right within a level."""
        order: list[int] = []
        queue = deque([self.root] if self.root is not None else [])
        while queue:
            node = queue.popleft()
            order.append(node.value)
            queue.extend(c for c in (node.left, node.right) if c is not None)
        return order

    def render(self) -> str:
        """The tree drawn sideways: right subtree on top, deeper levels indented."""
        parts: list[str] = []
        stack: list[tuple[BSTNode, int]] = []
        node, depth = self.root, 0
        while stack or node is not None:
            while node is not None:
                stack.append((node, depth))
                node, depth = node.right, depth + 1
            node, depth = stack.pop()
            indent = _RENDER_INDENT + _SPACE * depth
            parts.append("\n" + " " * indent + f"{node.value}\n")
            node, depth = node.left, depth + 1
        return "".join(parts)
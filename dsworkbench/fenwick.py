"""A binary indexed (Fenwick) tree over 1-based positions."""

from __future__ import annotations

__all__ = ["BinaryIndexedTree"]


class BinaryIndexedTree:
    """A Fenwick tree of ``size`` nodes, addressed from 1 to ``size``.

    ``get`` reads a stored tree node directly; ``update`` sets a stored node
    to a new value and carries the difference to every node covering it.
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("tree size must not be negative")
        self._size = size
        self._tree = [0] * (size + 1)

    def _check(self, index: int) -> None:
        if not 1 <= index <= self._size:
            raise IndexError("Invalid index!")

    def __len__(self) -> int:
        return self._size

    def get(self, index: int) -> int:
        """The stored tree node at ``index``."""
        self._check(index)
        return self._tree[index]

    def update(self, index: int, value: int) -> None:
        """Set the node at ``index`` to ``value``, propagating the change upward."""
        diff = value - self.get(index)
        while index <= self._size:
            self._tree[index] += diff
            index += index & -index

    def query(self, index: int) -> int:
        """Prefix sum of nodes along the Fenwick path ending at ``index``."""
        self._check(index)
        total = 0
        while index > 0:
            total += self._tree[index]
            index -= index & -index
        return total

    def render(self) -> str:
        """The stored nodes laid out as a pyramid, doubling per line."""
        levels = self._size.bit_length()
        level = 0
        per_line = 1
        on_line = 0
        parts: list[str] = []
        for value in self._tree[1:]:
            if on_line == per_line:
                parts.append("\n")
                on_line = 0
                per_line *= 2
                level += 1
            before = " " * (2 ** (levels - level) - 1)
            after = " " * (2 ** (levels - level + 1) - 1)
            parts.append(f"{before}{value}{after}")
            on_line += 1
        parts.append("\n")
        return "".join(parts)
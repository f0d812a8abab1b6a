"""A fixed-size array of integers with strict bounds checking."""

from __future__ import annotations

from collections.abc import Iterator

__all__ = ["FixedArray"]


class FixedArray:
    """An array whose size is fixed when it is created.

    Slots start at zero.  Only indices ``0 .. size-1`` are accepted;
    negative indices are rejected rather than counted from the end.
    """

    __slots__ = ("_items",)

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("array size must not be negative")
        self._items = [0] * size

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError("Index out of bounds!")

    def __getitem__(self, index: int) -> int:
        self._check(index)
        return self._items[index]

    def __setitem__(self, index: int, value: int) -> None:
        self._check(index)
        self._items[index] = value

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"FixedArray({self._items!r})"

    def __str__(self) -> str:
        return " ".join(str(item) for item in self._items)
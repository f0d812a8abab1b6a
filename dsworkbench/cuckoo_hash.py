"""A cuckoo hash table mapping non-empty strings to integers."""

from __future__ import annotations

import hashlib

__all__ = ["CuckooHashTable"]

_Slot = tuple[str, int] | None


def _base_hash(key: str) -> int:
    digest = hashlib.blake2b(key.encode("utf-8"), digest_size=8).digest()
    return int.from_bytes(digest, "little")


def _hash1(key: str, size: int) -> int:
    return _base_hash(key) % size


def _hash2(key: str, size: int) -> int:
    return (_base_hash(key) >> 16) % size


class CuckooHashTable:
    """Two tables, each key living in its slot in one of them.

    A new key that finds both slots taken evicts the occupant of its first
    slot, which moves to its other table, and so on for at most
    ``max_displacements`` evictions.  If that limit is reached the insert is
    undone and reported as failed.
    """

    def __init__(self, size: int, max_displacements: int) -> None:
        if size < 1:
            raise ValueError("table size must be positive")
        if max_displacements < 0:
            raise ValueError("displacement limit must not be negative")
        self.size = size
        self.max_displacements = max_displacements
        self._tables: tuple[list[_Slot], list[_Slot]] = (
            [None] * size,
            [None] * size,
        )

    def _index(self, which: int, key: str) -> int:
        return (_hash1 if which == 0 else _hash2)(key, self.size)

    def _locate(self, key: str) -> tuple[int, int] | None:
        for which in (0, 1):
            index = self._index(which, key)
            slot = self._tables[which][index]
            if slot is not None and slot[0] == key:
                return which, index
        return None

    def insert(self, key: str, value: int) -> bool:
        """Store ``value`` under ``key``; return False if displacements ran out."""
        if not key:
            raise ValueError("key must be a non-empty string")
        found = self._locate(key)
        if found is not None:
            which, index = found
            self._tables[which][index] = (key, value)
            return True

        for which in (0, 1):
            index = self._index(which, key)
            if self._tables[which][index] is None:
                self._tables[which][index] = (key, value)
                return True

        snapshot = (list(self._tables[0]), list(self._tables[1]))
        entry: tuple[str, int] = (key, value)
        which = 0
        for _ in range(self.max_displacements):
            index = self._index(which, entry[0])
            evicted = self._tables[which][index]
            self._tables[which][index] = entry
            if evicted is None:
                return True
            entry = evicted
            which = 1 - which
            index = self._index(which, entry[0])
            if self._tables[which][index] is None:
                self._tables[which][index] = entry
                return True
        self._tables[0][:] = snapshot[0]
        self._tables[1][:] = snapshot[1]
        return False

    def lookup(self, key: str) -> int:
        """The value stored under ``key``; raise KeyError if absent."""
        found = self._locate(key)
        if found is None:
            raise KeyError(key)
        which, index = found
        slot = self._tables[which][index]
        assert slot is not None
        return slot[1]

    def remove(self, key: str) -> bool:
        """Remove ``key``; return whether it was present."""
        found = self._locate(key)
        if found is None:
            return False
        which, index = found
        self._tables[which][index] = None
        return True

    def tables(self) -> tuple[list[tuple[str, int]], list[tuple[str, int]]]:
        """The occupied entries of each table, in slot order."""
        return (
            [slot for slot in self._tables[0] if slot is not None],
            [slot for slot in self._tables[1] if slot is not None],
        )
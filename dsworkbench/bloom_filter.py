"""A Bloom filter over strings using three independent hash functions."""

from __future__ import annotations

import hashlib

__all__ = ["BloomFilter"]

DEFAULT_SIZE = 10000


def _sha256_hash(item: str) -> int:
    return int.from_bytes(hashlib.sha256(item.encode("utf-8")).digest()[:8], "little")


def _blake2b_hash(item: str) -> int:
    return int.from_bytes(
        hashlib.blake2b(item.encode("utf-8"), digest_size=8).digest(), "little"
    )


def _char_sum_hash(item: str) -> int:
    return sum(ord(char) for char in item)


_HASHES = (_sha256_hash, _blake2b_hash, _char_sum_hash)


class BloomFilter:
    """A fixed-size bit set answering "probably present" or "definitely absent"."""

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        if size <= 0:
            raise ValueError("filter size must be positive")
        self.size = size
        self._bits = bytearray((size + 7) // 8)

    def _positions(self, item: str) -> list[int]:
        return [hash_func(item) % self.size for hash_func in _HASHES]

    def add(self, item: str) -> None:
        """Record ``item`` in the filter."""
        for position in self._positions(item):
            self._bits[position >> 3] |= 1 << (position & 7)

    def __contains__(self, item: object) -> bool:
        if not isinstance(item, str):
            return False
        return all(
            self._bits[position >> 3] & (1 << (position & 7))
            for position in self._positions(item)
        )
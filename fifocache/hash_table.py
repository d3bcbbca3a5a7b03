"""Separate-chaining hash table mapping integer keys to cache entries."""

from __future__ import annotations

from typing import List, Optional

from .nodes import HashNode


class HashTable:
    """Fixed number of buckets, each a chain of HashNode entries."""

    def __init__(self, bucket_count: int) -> None:
        if bucket_count <= 0:
            raise ValueError(f"bucket count must be positive, got {bucket_count}")
        self._buckets: List[List[HashNode]] = [[] for _ in range(bucket_count)]
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and self.get(key) is not None

    def bucket_count(self) -> int:
        """Number of buckets in the table."""
        return len(self._buckets)

    def hash_code(self, key: int) -> int:
        """Bucket index for ``key``."""
        return key % len(self._buckets)

    def is_empty(self) -> bool:
        """Whether the table holds no entries."""
        return self._count == 0

    def add(self, key: int, node: HashNode) -> bool:
        """Store ``node`` under ``key``; False if the key is already present."""
        bucket = self._buckets[self.hash_code(key)]
        if any(entry.key == key for entry in bucket):
            return False
        node.key = key
        bucket.append(node)
        self._count += 1
        return True

    def remove(self, key: int) -> bool:
        """Remove the entry for ``key``; False if it was not present."""
        bucket = self._buckets[self.hash_code(key)]
        for entry in bucket:
            if entry.key == key:
                bucket.remove(entry)
                self._count -= 1
                return True
        return False

    def clear(self) -> None:
        """Remove every entry."""
        for bucket in self._buckets:
            bucket.clear()
        self._count = 0

    def get(self, key: int) -> Optional[HashNode]:
        """The entry for ``key``, or None if absent."""
        return next(
            (entry for entry in self._buckets[self.hash_code(key)] if entry.key == key),
            None,
        )

    def buckets(self) -> List[List[HashNode]]:
        """A copy of each bucket's chain, in bucket order."""
        return [list(bucket) for bucket in self._buckets]

    def lines(self) -> List[str]:
        """One line per non-empty bucket listing its keys."""
        return [
            f"bucket {index}: " + ", ".join(str(entry.key) for entry in bucket)
            for index, bucket in enumerate(self._buckets)
            if bucket
        ]
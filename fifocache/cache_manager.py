"""Bounded FIFO cache indexed by a hash table and a binary search tree."""

from __future__ import annotations

from typing import Callable, Optional

from .binary_search_tree import BinarySearchTree
from .doubly_linked_list import DoublyLinkedList
from .hash_table import HashTable
from .nodes import HashNode, Record

Report = Callable[[str], None]


class CacheManager:
    """Keeps records in arrival order, evicting the oldest when full."""

    def __init__(
        self,
        max_cache_size: int,
        hash_table_size: int,
        report: Optional[Report] = None,
    ) -> None:
        self._report: Report = report if report is not None else print
        if hash_table_size > max_cache_size:
            max_cache_size = hash_table_size
            self._report(
                f"Resetting MaxCacheSize, {max_cache_size}, to match myHashTableSize "
                f"of : {hash_table_size}!  Reconsider your life choices!!!"
            )
        self.table = HashTable(hash_table_size)
        self._report(f"hashTableSize: {hash_table_size}")
        self.fifo = DoublyLinkedList()
        self.bst = BinarySearchTree()
        # The cache is always bounded by the hash table size.
        self.max_cache_size = hash_table_size

    def __len__(self) -> int:
        return len(self.table)

    def __contains__(self, key: object) -> bool:
        return key in self.table

    def is_empty(self) -> bool:
        """Whether the cache holds no records."""
        return self.table.is_empty()

    def add(self, key: int, record: Record) -> bool:
        """Cache ``record`` under ``key``; False if the key is already cached.

        When the cache grows past its maximum size the oldest records are evicted.
        """
        if record.key != key:
            raise ValueError(f"record key {record.key} does not match {key}")
        if key in self.table:
            return False
        self.table.add(key, HashNode(key, record))
        self.fifo.insert_at_tail(record)
        self.bst.add(key, record)
        while len(self.fifo) > self.max_cache_size:
            oldest = self.fifo.remove_head()
            self.table.remove(oldest.key)
            self.bst.remove(oldest.key)
        return True

    def remove(self, key: int) -> bool:
        """Drop ``key`` from the cache; False if it was not cached."""
        if not self.table.remove(key):
            return False
        self.fifo.remove(key)
        self.bst.remove(key)
        return True

    def clear(self) -> None:
        """Remove every record."""
        self.table.clear()
        self.fifo.clear()
        self.bst.clear()

    def get(self, key: int) -> Optional[Record]:
        """The record cached under ``key``, or None."""
        node = self.table.get(key)
        return node.record if node is not None else None

    def print_cache(self) -> None:
        """Report each record from oldest to newest."""
        for line in self.fifo.lines():
            self._report(line)

    def print_range(self, low: int, high: int) -> None:
        """Report the cached keys between ``low`` and ``high`` inclusive."""
        for node in self.bst.in_range(low, high):
            self._report(self.bst.describe_node(node))

    def sort(self, ascending: bool = True) -> None:
        """Report the cached keys in ascending or descending order."""
        nodes = self.bst.in_order() if ascending else self.bst.reverse_order()
        for node in nodes:
            self._report(self.bst.describe_node(node))
"""Ordered list of cached records, kept in insertion (FIFO) order."""

from __future__ import annotations

from collections import OrderedDict
from typing import Iterator, List

from .nodes import Record


class DoublyLinkedList:
    """Records ordered from head to tail, each key appearing at most once."""

    def __init__(self) -> None:
        self._records: "OrderedDict[int, Record]" = OrderedDict()

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(list(self._records.values()))

    def __reversed__(self) -> Iterator[Record]:
        return reversed(list(self._records.values()))

    def __contains__(self, key: object) -> bool:
        return key in self._records

    def is_empty(self) -> bool:
        """Whether the list holds no records."""
        return not self._records

    @property
    def head(self) -> Record:
        """The first record; raises IndexError when the list is empty."""
        if not self._records:
            raise IndexError("list is empty")
        return next(iter(self._records.values()))

    @property
    def tail(self) -> Record:
        """The last record; raises IndexError when the list is empty."""
        if not self._records:
            raise IndexError("list is empty")
        return next(reversed(self._records.values()))

    def insert_at_head(self, record: Record) -> None:
        """Put ``record`` first, replacing any record with the same key."""
        self._records[record.key] = record
        self._records.move_to_end(record.key, last=False)

    def insert_at_tail(self, record: Record) -> None:
        """Put ``record`` last, replacing any record with the same key."""
        self._records[record.key] = record
        self._records.move_to_end(record.key)

    def remove(self, key: int) -> Record:
        """Remove and return the record with ``key``; KeyError if absent."""
        return self._records.pop(key)

    def remove_head(self) -> Record:
        """Remove and return the first record; IndexError if empty."""
        if not self._records:
            raise IndexError("remove from empty list")
        return self._records.popitem(last=False)[1]

    def remove_tail(self) -> Record:
        """Remove and return the last record; IndexError if empty."""
        if not self._records:
            raise IndexError("remove from empty list")
        return self._records.popitem(last=True)[1]

    def move_to_head(self, key: int) -> None:
        """Move the record with ``key`` to the head; KeyError if absent."""
        self._records.move_to_end(key, last=False)

    def move_to_tail(self, key: int) -> None:
        """Move the record with ``key`` to the tail; KeyError if absent."""
        self._records.move_to_end(key)

    def clear(self) -> None:
        """Remove every record."""
        self._records.clear()

    def lines(self) -> List[str]:
        """Describe each record from head to tail."""
        return [record.describe() for record in self]

    def reverse_lines(self) -> List[str]:
        """Describe each record from tail to head."""
        return [record.describe() for record in reversed(self)]
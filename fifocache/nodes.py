"""Records held by the cache and the nodes of its indexes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class Record:
    """A cached person record identified by an integer key."""

    key: int
    full_name: str = ""
    address: str = ""
    city: str = ""
    state: str = ""
    zip: str = ""

    def describe(self, verbose: bool = False) -> str:
        """Return the line printed for this record in FIFO order listings."""
        if verbose:
            return (
                f"FIFO info from cacheManager.  key: {self.key}; name: {self.full_name}"
                f";address: {self.address}; city: {self.city}; state: {self.state}"
                f"; zip: {self.zip}"
            )
        return f"FIFO info from cacheManager:  key: {self.key}"


@dataclass
class HashNode:
    """An entry in a hash table bucket, pointing at its cached record."""

    key: int
    record: Optional[Record] = None


@dataclass
class TreeNode:
    """A binary search tree node, pointing at its cached record."""

    key: int = 0
    record: Optional[Record] = None
    number_of_nodes: int = 1
    height: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None
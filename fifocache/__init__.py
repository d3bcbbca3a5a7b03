"""A bounded FIFO cache indexed by a hash table and a binary search tree, with a JSON test-case runner."""

__version__ = "0.1.0"
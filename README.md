# fifocache

A small, bounded first-in-first-out cache of address records. Every entry is
held in three structures at once:

- `HashTable` (`fifocache.hash_table`), a separate-chaining table for key lookup,
- `DoublyLinkedList` (`fifocache.doubly_linked_list`), which keeps arrival
  order and decides what is evicted,
- `BinarySearchTree` (`fifocache.binary_search_tree`), which gives sorted and
  ranged views of the keys.

Records are `Record` dataclasses (`fifocache.nodes`) with a key, full name,
address, city, state and zip. When the cache grows past its maximum size,
the oldest record is evicted from all three structures.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Using the library

```python
from fifocache.cache_manager import CacheManager
from fifocache.nodes import Record

cache = CacheManager(5, 101)

cache.add(20, Record(20, "Jane Doe", "1 Example St", "Springfield", "CA", "12345"))
cache.add(7, Record(7, "John Doe", "2 Example St", "Springfield", "CA", "12345"))

len(cache)          # 2
20 in cache         # True
cache.get(7)        # the Record stored under key 7, or None if absent
cache.remove(20)    # True; False if the key was not cached
cache.is_empty()    # False

cache.print_cache()        # the records, oldest first
cache.sort(True)           # keys in ascending order
cache.sort(False)          # keys in descending order
cache.print_range(1, 10)   # keys between 1 and 10, inclusive
cache.clear()
```

Some details of `CacheManager`:

- The cache is always bounded by the hash table size (the second argument).
  When the hash table size is larger than the requested cache size, a notice
  saying so is reported; either way the bound used is the hash table size.
- `add(key, record)` returns `False` if the key is already cached and raises
  `ValueError` if `record.key` differs from `key`.
- The printing methods, and the notices from the constructor (including a
  `hashTableSize: N` line), go to the `report` callable given as the third
  argument; by default that is `print`. `print_cache` reports lines such as
  `FIFO info from cacheManager:  key: 7`; `sort` and `print_range` report
  lines such as `key: 7; number of nodes: 1; height: 0`.

The tree and list can also be used directly: `BinarySearchTree` offers
`in_order`, `reverse_order`, `pre_order`, `post_order`, `depth_first`,
`breadth_first` and `in_range` generators, and `height()` (-1 when empty).

### Logging to a file

`Reporter` (`fifocache.reporting`) writes every message to the console and,
while a file is open, to that file as well. Pass its `log` method as a
cache's `report` callable to capture the output:

```python
from fifocache.cache_manager import CacheManager
from fifocache.reporting import Reporter

with Reporter("generatedOutputFile.txt") as reporter:
    cache = CacheManager(5, 101, reporter.log)
    reporter.log("hello")
```

## Running test cases from JSON

The `fifocache` command reads a configuration file (by default
`milestone5_config.json` in the current directory), or the one you name:

```
fifocache
fifocache path/to/config.json
```

The configuration names the input and output files and the sizes:

```json
{
    "Milestone5": [
        {
            "files": [
                {
                    "inputFile": "milestone5.json",
                    "outputFile": "generatedOutputFile.txt",
                    "errorLogFile": "logFile.txt"
                }
            ],
            "defaultVariables": [
                {"FIFOListSize": 5, "hashTableSize": 101}
            ]
        }
    ]
}
```

The input file holds named test cases, each a list of actions:

```json
{
    "cacheManager": [
        {
            "testCase1": [
                {"isEmpty": {}},
                {"add": {"key": 20, "fullName": "Jane Doe", "address": "1 Example St",
                         "city": "Springfield", "state": "CA", "zip": "12345"}},
                {"contains": {"key": 20}},
                {"getSize": {}},
                {"printInOrder": {"ascending": "true"}},
                {"printRange": {"low": 1, "high": 50}},
                {"remove": {"key": 20}},
                {"clear": {}}
            ]
        }
    ]
}
```

Unknown action names are ignored. After each test case the cache is printed
oldest first, then in ascending and descending key order, and cleared before
the next case. Output goes to the console and to the output file; the closing
`End of unit tests` line goes to the console only.

The command exits with status 1 if the configuration or input file cannot be
opened. If the output file cannot be opened, an error is printed and the run
continues with console output only.

## What it does not do

- The `errorLogFile` entry is read from the configuration but nothing is
  written to it; errors are printed to standard error.
- The cache lives in memory only; nothing is saved between runs.
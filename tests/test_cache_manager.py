import pytest

from fifocache.cache_manager import CacheManager
from fifocache.nodes import Record


def _cache(max_size=5, table_size=5):
    messages = []
    return CacheManager(max_size, table_size, messages.append), messages


def test_new_cache_is_empty():
    cache, _ = _cache()
    assert cache.is_empty()
    assert len(cache) == 0


def test_add_get_contains():
    cache, _ = _cache()
    record = Record(20, "John Doe2", "1234 Log St", "Oakland", "CA", "12345")
    assert cache.add(20, record) is True
    assert 20 in cache
    assert cache.get(20) is record
    assert cache.get(21) is None
    assert len(cache) == 1


def test_add_duplicate_rejected():
    cache, _ = _cache()
    cache.add(1, Record(1))
    assert cache.add(1, Record(1)) is False
    assert len(cache) == 1


def test_mismatched_key_raises():
    cache, _ = _cache()
    with pytest.raises(ValueError):
        cache.add(1, Record(2))


def test_max_size_follows_hash_table_size():
    cache, messages = _cache(max_size=2, table_size=5)
    assert cache.max_cache_size == 5
    assert any("Resetting MaxCacheSize" in m for m in messages)
    smaller, _ = _cache(max_size=9, table_size=3)
    assert smaller.max_cache_size == 3


def test_oldest_evicted_when_full():
    cache, _ = _cache(max_size=5, table_size=3)
    for key in [10, 20, 30, 40]:
        cache.add(key, Record(key))
    assert len(cache) == cache.max_cache_size
    assert 10 not in cache
    assert [r.key for r in cache.fifo] == [20, 30, 40]
    assert [n.key for n in cache.bst.in_order()] == [20, 30, 40]
    assert len(cache.table) == len(cache.bst) == len(cache.fifo)


def test_remove():
    cache, _ = _cache()
    for key in [3, 1, 2]:
        cache.add(key, Record(key))
    assert cache.remove(1) is True
    assert cache.remove(1) is False
    assert 1 not in cache
    assert [r.key for r in cache.fifo] == [3, 2]
    assert 1 not in cache.bst


def test_clear():
    cache, _ = _cache()
    for key in [3, 1, 2]:
        cache.add(key, Record(key))
    cache.clear()
    assert cache.is_empty()
    assert cache.fifo.is_empty()
    assert cache.bst.is_empty()


def test_print_cache_reports_fifo_order():
    cache, messages = _cache()
    for key in [7, 3, 5]:
        cache.add(key, Record(key))
    messages.clear()
    cache.print_cache()
    assert messages == [Record(k).describe() for k in [7, 3, 5]]
    assert messages[0] == "FIFO info from cacheManager:  key: 7"


def test_sort_ascending_and_descending():
    cache, messages = _cache()
    for key in [7, 3, 5]:
        cache.add(key, Record(key))
    messages.clear()
    cache.sort(True)
    ascending = list(messages)
    messages.clear()
    cache.sort(False)
    assert ascending == [cache.bst.describe_node(n) for n in cache.bst.in_order()]
    assert messages == list(reversed(ascending))


def test_print_range():
    cache, messages = _cache()
    for key in [7, 3, 5, 1]:
        cache.add(key, Record(key))
    messages.clear()
    cache.print_range(3, 6)
    assert messages == [cache.bst.describe_node(n) for n in cache.bst.in_range(3, 6)]
    assert len(messages) == 2
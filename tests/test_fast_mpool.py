import pytest

from fastcommon.fast_mpool import MemoryPool, MPoolStats


def test_defaults():
    pool = MemoryPool()
    assert pool.alloc_size_once == 1024 * 1024
    assert pool.discard_size == 64


def test_empty_pool_stats():
    assert MemoryPool().stats() == MPoolStats(0, 0, 0, 0)


def test_alloc_returns_region_of_requested_size():
    pool = MemoryPool(alloc_size_once=1000, discard_size=16)
    region = pool.alloc(100)
    assert len(region) == 100
    assert pool.stats() == MPoolStats(
        total_bytes=1000, free_bytes=900, total_trunk_count=1, free_trunk_count=1
    )


def test_regions_do_not_overlap():
    pool = MemoryPool(alloc_size_once=256, discard_size=8)
    regions = [pool.alloc(40) for _ in range(12)]
    for i, region in enumerate(regions):
        region[:] = bytes([i]) * 40
    for i, region in enumerate(regions):
        assert bytes(region) == bytes([i]) * 40


def test_large_alloc_gets_own_trunk():
    pool = MemoryPool(alloc_size_once=100, discard_size=10)
    pool.alloc(20)
    region = pool.alloc(500)
    assert len(region) == 500
    stats = pool.stats()
    assert stats.total_trunk_count == 2
    assert stats.total_bytes == 600
    assert stats.free_trunk_count == 1
    assert stats.free_bytes == 80


def test_trunk_discarded_when_nearly_full():
    pool = MemoryPool(alloc_size_once=100, discard_size=10)
    pool.alloc(95)
    assert pool.stats().free_trunk_count == 0
    pool.alloc(4)
    stats = pool.stats()
    assert stats.total_trunk_count == 2
    assert stats.free_trunk_count == 1


def test_reuses_space_in_existing_trunk():
    pool = MemoryPool(alloc_size_once=100, discard_size=10)
    pool.alloc(30)
    pool.alloc(30)
    stats = pool.stats()
    assert stats.total_trunk_count == 1
    assert stats.free_bytes == 40


def test_reset_frees_everything():
    pool = MemoryPool(alloc_size_once=100, discard_size=10)
    for _ in range(5):
        pool.alloc(60)
    pool.reset()
    stats = pool.stats()
    assert stats.free_bytes == stats.total_bytes
    assert stats.free_trunk_count == stats.total_trunk_count == 5
    pool.alloc(60)
    assert pool.stats().total_trunk_count == 5


def test_clear_drops_trunks():
    pool = MemoryPool(alloc_size_once=100)
    pool.alloc(10)
    pool.clear()
    assert pool.stats() == MPoolStats(0, 0, 0, 0)


def test_free_bytes_invariant():
    pool = MemoryPool(alloc_size_once=128, discard_size=8)
    sizes = [7, 33, 100, 5, 64, 200, 1, 90]
    for size in sizes:
        pool.alloc(size)
    stats = pool.stats()
    assert stats.total_bytes - stats.free_bytes == sum(sizes)
    assert stats.free_trunk_count <= stats.total_trunk_count


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        MemoryPool().alloc(-1)
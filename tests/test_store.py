"""
Tests for the Redis-backed buffer store.

The TestRedisStore class needs a Redis server on localhost and uses db 15;
it is skipped when none is reachable.
"""

import pytest
import redis

from blissword.core import buffer as ops
from blissword.core.buffer import EditBuffer
from blissword.core.store import BufferStore


@pytest.fixture
def store(fake_redis):
    return BufferStore(fake_redis, prefix="test")


def test_empty_store(store):
    assert store.get() == EditBuffer()


def test_apply_persists(store, fake_redis):
    buf = store.apply(ops.append, "p1", "house", 17720)
    assert buf.caret == 0
    assert "test:buffer" in fake_redis.data
    assert store.get() == buf


def test_apply_noop_skips_write(store, fake_redis):
    store.apply(ops.move_caret_forward)
    assert fake_redis.writes == 0


def test_apply_passes_arguments(store):
    store.apply(ops.append, "p1", "house", 17720)
    buf = store.apply(ops.add_or_replace_indicator, 9011, "9011")
    assert list(buf.items[0].symbol) == [17720, ";", 9011]
    assert store.get().items[0].id == "p1:9011"


def test_prefixes_are_separate(fake_redis):
    a = BufferStore(fake_redis, prefix="a")
    b = BufferStore(fake_redis, prefix="b")
    a.apply(ops.append, "p1", "house", 17720)
    assert len(a.get()) == 1
    assert len(b.get()) == 0


def test_clear(store):
    store.apply(ops.append, "p1", "house", 17720)
    store.clear()
    assert store.get() == EditBuffer()


def _redis_or_skip():
    client = redis.Redis(host="localhost", port=6379, db=15)
    try:
        client.ping()
    except redis.ConnectionError:
        pytest.skip("Redis not available")
    return client


class TestRedisStore:
    @pytest.fixture
    def store(self):
        store = BufferStore(_redis_or_skip(), prefix="blissword_test")
        store.clear()
        yield store
        store.clear()

    def test_round_trip(self, store):
        store.apply(ops.append, "p1", "house", [17720, "/", 17697])
        store.apply(ops.add_modifier, 14947, "much")
        buf = store.get()
        assert list(buf.items[0].symbol) == [17720, "/", 17697, "/", 14947]
        assert buf.items[0].gloss == "house much"

    def test_clear_all(self, store):
        store.apply(ops.append, "p1", "house", 17720)
        store.apply(ops.clear_all)
        assert store.get() == EditBuffer()

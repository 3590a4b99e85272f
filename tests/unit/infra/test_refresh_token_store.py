"""
Unit tests for the refresh token stores.

The Redis store runs against :class:`fakeredis.FakeRedis`; the in-memory
store gets a movable clock so expiry can be checked without sleeping.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import fakeredis
import redis
import pytest

from kindiary.infra.redis.redis_refresh_token_store import RedisRefreshTokenStore
from kindiary.services._shared.ports import InMemoryRefreshTokenStore
from kindiary.services._shared.ports.refresh_token_store import ensure_ttl, key_for

TTL_MS = 60_000


@pytest.fixture
def fake_redis():
    """Provide a fresh FakeRedis instance for each test."""
    r = fakeredis.FakeRedis()
    # ensure a clean starting point
    r.flushall()
    return r


@pytest.fixture
def store(fake_redis):
    """Provide a RedisRefreshTokenStore backed by FakeRedis."""
    return RedisRefreshTokenStore(r=fake_redis)


class _Clock:
    def __init__(self, start: datetime) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **delta) -> None:
        self.now += timedelta(**delta)


def test_key_layout():
    assert key_for(7) == "refresh_token:7"
    assert key_for("7") == key_for(7)


@pytest.mark.parametrize("ttl", [0, -1])
def test_ensure_ttl_rejects_non_positive(ttl):
    with pytest.raises(ValueError):
        ensure_ttl(ttl)


class TestRedisRefreshTokenStore:
    def test_set_then_get_returns_str(self, store):
        store.set(7, "r1", TTL_MS)
        assert store.get(7) == "r1"

    def test_set_overwrites_previous_token(self, store):
        """A second login for the same identity replaces the first token."""
        store.set(7, "r1", TTL_MS)
        store.set(7, "r2", TTL_MS)
        assert store.get(7) == "r2"

    def test_set_applies_millisecond_ttl(self, store, fake_redis):
        store.set(7, "r1", TTL_MS)
        pttl = fake_redis.pttl(key_for(7))
        assert 0 < pttl <= TTL_MS

    def test_get_absent_returns_none(self, store):
        assert store.get(404) is None

    def test_delete_reports_whether_a_token_existed(self, store):
        store.set(7, "r1", TTL_MS)
        assert store.delete(7) is True
        assert store.get(7) is None
        assert store.delete(7) is False

    def test_identities_are_isolated(self, store):
        store.set(1, "one", TTL_MS)
        store.set(2, "two", TTL_MS)
        store.delete(1)
        assert store.get(2) == "two"

    def test_non_positive_ttl_never_writes(self, store, fake_redis):
        with pytest.raises(ValueError):
            store.set(7, "r1", 0)
        assert fake_redis.exists(key_for(7)) == 0


class TestRedisRefreshTokenStoreOutage:
    @pytest.fixture
    def down_store(self, unreachable_redis):
        return RedisRefreshTokenStore(r=unreachable_redis)

    @pytest.mark.parametrize(
        "call",
        [
            lambda s: s.set(7, "r1", TTL_MS),
            lambda s: s.get(7),
            lambda s: s.delete(7),
        ],
        ids=["set", "get", "delete"],
    )
    def test_connection_errors_propagate(self, down_store, call):
        with pytest.raises(redis.ConnectionError):
            call(down_store)


class TestInMemoryRefreshTokenStore:
    @pytest.fixture
    def clock(self):
        return _Clock(datetime(2026, 1, 1, tzinfo=UTC))

    @pytest.fixture
    def mem_store(self, clock):
        return InMemoryRefreshTokenStore(clock=clock)

    def test_token_lives_until_ttl(self, mem_store, clock):
        mem_store.set(7, "r1", 1000)
        clock.advance(milliseconds=999)
        assert mem_store.get(7) == "r1"
        clock.advance(milliseconds=1)
        assert mem_store.get(7) is None

    def test_delete_of_expired_entry_is_false(self, mem_store, clock):
        mem_store.set(7, "r1", 1000)
        clock.advance(seconds=2)
        assert mem_store.delete(7) is False

    def test_delete_live_entry(self, mem_store):
        mem_store.set(7, "r1", 1000)
        assert mem_store.delete(7) is True
        assert mem_store.get(7) is None

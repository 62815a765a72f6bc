"""Tests for CoalescingCache TTL and request coalescing."""

import asyncio

import pytest

from neo_membership.features.cache.entities import CacheEntry
from neo_membership.features.cache.services.coalescing_cache import CoalescingCache


class CountingProducer:
    """Producer that counts calls and can be held open."""

    def __init__(self, value="value", error=None):
        self.value = value
        self.error = error
        self.calls = 0
        self.release = asyncio.Event()

    async def __call__(self):
        self.calls += 1
        await self.release.wait()
        if self.error is not None:
            raise self.error
        return self.value


class TestCacheEntry:
    """Tests for entry freshness."""

    def test_fresh_strictly_before_ttl(self):
        entry = CacheEntry(value=1, created_at=100.0)
        assert entry.is_fresh(now=109.9, ttl_seconds=10)
        assert not entry.is_fresh(now=110.0, ttl_seconds=10)


class TestCoalescingCache:
    """Tests for the cache primitive."""

    def test_get_absent(self):
        assert CoalescingCache().get("missing") is None

    def test_set_and_get(self, clock):
        cache = CoalescingCache(ttl_seconds=900, clock=clock)
        cache.set("k", [1, 2])

        assert cache.get("k") == [1, 2]
        assert "k" in cache

    def test_expiry(self, clock):
        cache = CoalescingCache(ttl_seconds=900, clock=clock)
        cache.set("k", "v")

        clock.advance(899)
        assert cache.get("k") == "v"
        clock.advance(1)
        assert cache.get("k") is None
        assert len(cache) == 0
        assert cache.stats()["expirations"] == 1

    def test_negative_ttl_rejected(self):
        with pytest.raises(ValueError):
            CoalescingCache(ttl_seconds=-1)

    def test_clear_and_clear_all(self, clock):
        cache = CoalescingCache(clock=clock)
        cache.set("a", 1)
        cache.set("b", 2)

        assert cache.clear("a") is True
        assert cache.clear("a") is False
        assert cache.get("a") is None
        assert cache.get("b") == 2
        assert cache.clear_all() == 1
        assert cache.get("b") is None

    @pytest.mark.asyncio
    async def test_populates_on_success(self, clock):
        cache = CoalescingCache(clock=clock)

        async def produce():
            return "fresh"

        assert await cache.resolve_with_coalescing("k", produce) == "fresh"
        assert cache.get("k") == "fresh"
        assert cache.pending_count == 0

    @pytest.mark.asyncio
    async def test_cached_value_skips_producer(self, clock):
        cache = CoalescingCache(clock=clock)
        cache.set("k", "cached")
        producer = CountingProducer()

        assert await cache.resolve_with_coalescing("k", producer) == "cached"
        assert producer.calls == 0
        assert cache.stats()["hits"] == 1

    @pytest.mark.asyncio
    async def test_concurrent_callers_share_one_resolution(self):
        cache = CoalescingCache()
        producer = CountingProducer(value=["alice"])

        first = asyncio.create_task(cache.resolve_with_coalescing("k", producer))
        second = asyncio.create_task(cache.resolve_with_coalescing("k", producer))
        await asyncio.sleep(0)
        assert cache.is_pending("k")

        producer.release.set()
        results = await asyncio.gather(first, second)

        assert producer.calls == 1
        assert results[0] is results[1]
        assert cache.stats()["coalesced"] == 1
        assert not cache.is_pending("k")

    @pytest.mark.asyncio
    async def test_failure_reaches_all_waiters_and_is_not_cached(self):
        cache = CoalescingCache()
        producer = CountingProducer(error=LookupError("gone"))

        first = asyncio.create_task(cache.resolve_with_coalescing("k", producer))
        second = asyncio.create_task(cache.resolve_with_coalescing("k", producer))
        await asyncio.sleep(0)
        producer.release.set()
        results = await asyncio.gather(first, second, return_exceptions=True)

        assert all(isinstance(result, LookupError) for result in results)
        assert producer.calls == 1
        assert cache.get("k") is None
        assert cache.pending_count == 0

        retry = CountingProducer(value="ok")
        retry.release.set()
        assert await cache.resolve_with_coalescing("k", retry) == "ok"

    @pytest.mark.asyncio
    async def test_different_keys_do_not_coalesce(self):
        cache = CoalescingCache()
        producer = CountingProducer()
        producer.release.set()

        await asyncio.gather(
            cache.resolve_with_coalescing("a", producer),
            cache.resolve_with_coalescing("b", producer),
        )

        assert producer.calls == 2

    @pytest.mark.asyncio
    async def test_expired_entry_triggers_fresh_resolution(self, clock):
        cache = CoalescingCache(ttl_seconds=900, clock=clock)
        producer = CountingProducer()
        producer.release.set()

        await cache.resolve_with_coalescing("k", producer)
        await cache.resolve_with_coalescing("k", producer)
        assert producer.calls == 1

        clock.advance(900)
        await cache.resolve_with_coalescing("k", producer)
        assert producer.calls == 2

    @pytest.mark.asyncio
    async def test_zero_ttl_disables_caching_but_still_coalesces(self):
        cache = CoalescingCache(ttl_seconds=0)
        producer = CountingProducer()

        tasks = [asyncio.create_task(cache.resolve_with_coalescing("k", producer)) for _ in range(3)]
        await asyncio.sleep(0)
        producer.release.set()
        await asyncio.gather(*tasks)
        assert producer.calls == 1

        await cache.resolve_with_coalescing("k", producer)
        assert producer.calls == 2
        assert len(cache) == 0

    @pytest.mark.asyncio
    async def test_cancelled_waiter_does_not_cancel_resolution(self):
        cache = CoalescingCache()
        producer = CountingProducer(value="done")

        abandoned = asyncio.create_task(cache.resolve_with_coalescing("k", producer))
        patient = asyncio.create_task(cache.resolve_with_coalescing("k", producer))
        await asyncio.sleep(0)

        abandoned.cancel()
        await asyncio.sleep(0)
        producer.release.set()

        assert await patient == "done"
        assert abandoned.cancelled()
        assert cache.get("k") == "done"

    @pytest.mark.asyncio
    async def test_clear_does_not_affect_other_in_flight_keys(self):
        cache = CoalescingCache()
        cache.set("done", 1)
        producer = CountingProducer(value=2)

        pending = asyncio.create_task(cache.resolve_with_coalescing("busy", producer))
        await asyncio.sleep(0)
        cache.clear_all()
        producer.release.set()

        assert await pending == 2
        assert cache.get("busy") == 2
        assert cache.get("done") is None

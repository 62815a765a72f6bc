"""Time-bounded cache with request coalescing.

A ``CoalescingCache`` keeps resolved values for a TTL and collapses
concurrent requests for the same key into a single producer call. It is
a general-purpose primitive: group membership and document metadata both
resolve through it.

Instances are created explicitly and injected into services, so tests can
build one with a zero TTL or a fake clock.
"""

import asyncio
import logging
import time
from typing import Awaitable, Callable, Dict, Generic, Hashable, Optional, TypeVar

from ..entities.cache_entry import CacheEntry, CacheStats
from ....config.settings import DEFAULT_CACHE_TTL_SECONDS

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


def _consume_exception(task: "asyncio.Task") -> None:
    # Failures are re-raised to every waiter; this only keeps asyncio from
    # reporting an unretrieved exception when all waiters went away.
    if not task.cancelled():
        task.exception()


class CoalescingCache(Generic[K, V]):
    """In-memory TTL cache plus a registry of in-flight resolutions."""
    
    def __init__(
        self,
        ttl_seconds: float = DEFAULT_CACHE_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
        name: str = "cache"
    ):
        """Initialize the cache.
        
        Args:
            ttl_seconds: Entry lifetime; 0 disables caching but keeps coalescing
            clock: Monotonic time source in seconds
            name: Label used in log messages
        """
        if ttl_seconds < 0:
            raise ValueError(f"ttl_seconds must be >= 0, got: {ttl_seconds}")
        self.ttl_seconds = ttl_seconds
        self.name = name
        self._clock = clock
        self._entries: Dict[K, CacheEntry[V]] = {}
        self._pending: Dict[K, "asyncio.Task[V]"] = {}
        self._stats = CacheStats()
    
    # Plain cache operations
    
    def get(self, key: K) -> Optional[V]:
        """Get a fresh cached value, or None if absent or expired."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        if not entry.is_fresh(self._clock(), self.ttl_seconds):
            del self._entries[key]
            self._stats.expirations += 1
            logger.debug(f"[{self.name}] Entry expired: {key}")
            return None
        return entry.value
    
    def set(self, key: K, value: V) -> None:
        """Store a value stamped with the current time."""
        if self.ttl_seconds <= 0:
            return
        self._entries[key] = CacheEntry(value=value, created_at=self._clock())
    
    def clear(self, key: K) -> bool:
        """Drop one entry. In-flight resolutions are not affected."""
        removed = self._entries.pop(key, None) is not None
        if removed:
            logger.debug(f"[{self.name}] Cleared entry: {key}")
        return removed
    
    def clear_all(self) -> int:
        """Drop every entry and return how many were removed."""
        count = len(self._entries)
        self._entries.clear()
        logger.debug(f"[{self.name}] Cleared {count} entries")
        return count
    
    def __contains__(self, key: object) -> bool:
        return self.get(key) is not None  # type: ignore[arg-type]
    
    def __len__(self) -> int:
        return len(self._entries)
    
    # Coalescing
    
    def is_pending(self, key: K) -> bool:
        return key in self._pending
    
    @property
    def pending_count(self) -> int:
        return len(self._pending)
    
    async def resolve_with_coalescing(self, key: K, producer: Callable[[], Awaitable[V]]) -> V:
        """Return the cached value, join an in-flight resolution, or start one.
        
        The cache check, the pending check and the pending registration run
        without yielding to the event loop, so two callers can never both
        start a resolution for the same key.
        
        Args:
            key: Cache key
            producer: Zero-argument coroutine function producing the value
            
        Returns:
            The resolved value
            
        Raises:
            Whatever the producer raised, for every caller waiting on it
        """
        cached = self.get(key)
        if cached is not None:
            self._stats.hits += 1
            logger.debug(f"[{self.name}] Cache hit: {key}")
            return cached
        
        task = self._pending.get(key)
        if task is not None:
            self._stats.coalesced += 1
            logger.debug(f"[{self.name}] Joining in-flight resolution: {key}")
            return await asyncio.shield(task)
        
        self._stats.misses += 1
        task = asyncio.create_task(self._produce(key, producer))
        task.add_done_callback(_consume_exception)
        self._pending[key] = task
        return await asyncio.shield(task)
    
    async def _produce(self, key: K, producer: Callable[[], Awaitable[V]]) -> V:
        self._stats.producer_runs += 1
        try:
            value = await producer()
        except Exception as e:
            self._stats.producer_failures += 1
            logger.debug(f"[{self.name}] Resolution failed for {key}: {e}")
            raise
        finally:
            self._pending.pop(key, None)
        
        self.set(key, value)
        return value
    
    # Monitoring
    
    def stats(self) -> Dict[str, float]:
        """Get cache statistics."""
        data = self._stats.to_dict()
        data["entries"] = len(self._entries)
        data["pending"] = len(self._pending)
        return data

"""Cache entry and statistics entities."""

from dataclasses import dataclass, asdict
from typing import Any, Dict, Generic, TypeVar

V = TypeVar("V")


@dataclass
class CacheEntry(Generic[V]):
    """Resolved value with its creation timestamp."""
    value: V
    created_at: float
    
    def age(self, now: float) -> float:
        return now - self.created_at
    
    def is_fresh(self, now: float, ttl_seconds: float) -> bool:
        """Valid while ``now - created_at < ttl``."""
        return self.age(now) < ttl_seconds


@dataclass
class CacheStats:
    """Counters for cache and coalescing behaviour."""
    hits: int = 0
    misses: int = 0
    coalesced: int = 0
    producer_runs: int = 0
    producer_failures: int = 0
    expirations: int = 0
    
    @property
    def hit_rate(self) -> float:
        total = self.hits + self.misses + self.coalesced
        return (self.hits / total) if total > 0 else 0.0
    
    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["hit_rate"] = self.hit_rate
        return data

"""Cache entities."""

from .cache_entry import CacheEntry, CacheStats

__all__ = ["CacheEntry", "CacheStats"]

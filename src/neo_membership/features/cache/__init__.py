"""Cache feature for neo-membership.

- entities/: Cache entries and statistics
- services/: Time-bounded cache with request coalescing
"""

from .entities import CacheEntry, CacheStats
from .services import CoalescingCache

__all__ = ["CacheEntry", "CacheStats", "CoalescingCache"]

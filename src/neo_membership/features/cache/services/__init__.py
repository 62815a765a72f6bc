"""Cache services."""

from .coalescing_cache import CoalescingCache

__all__ = ["CoalescingCache"]

"""Membership service - resolves, caches and enriches group members.

Orchestrates expansion, sorting and photo enrichment, and coalesces
concurrent resolutions of the same root group through a shared cache.
"""

import logging
from typing import List, Optional

from ....core.exceptions import (
    PermissionDeniedError,
    PrincipalNotFoundError,
    ValidationError,
)
from ...cache.services.coalescing_cache import CoalescingCache
from ..entities.discovered_user import EnrichedUser
from .group_expander import GroupExpander
from .photo_enricher import PhotoEnricher
from .result_sorter import sort_users

logger = logging.getLogger(__name__)


class MembershipService:
    """Resolves every user in a group, including nested groups."""

    def __init__(
        self,
        expander: GroupExpander,
        cache: CoalescingCache[str, List[EnrichedUser]],
        enricher: Optional[PhotoEnricher] = None,
        key_prefix: str = "group"
    ):
        """Initialize the service.

        Args:
            expander: Recursive group expander
            cache: Cache shared by all callers of this service
            enricher: Photo enricher; photos are skipped when None
            key_prefix: Prefix for cache keys
        """
        self._expander = expander
        self._cache = cache
        self._enricher = enricher
        self._key_prefix = key_prefix

    def _make_key(self, group_name: str) -> str:
        # Group names are case-insensitive in SharePoint
        return f"{self._key_prefix}:{group_name.strip().casefold()}"

    async def resolve(self, group_name: str, force_refresh: bool = False) -> List[EnrichedUser]:
        """Resolve a group's transitive members, sorted by display name.

        Args:
            group_name: Root group name
            force_refresh: Drop any cached result before resolving

        Returns:
            Deduplicated, sorted users with optional photos

        Raises:
            ValidationError: Group name is blank
            GroupNotFoundError: Root group does not exist
            PermissionDeniedError: Root group cannot be read
            DirectoryError: Any other root failure
        """
        if not group_name or not group_name.strip():
            raise ValidationError("Group name is required")

        key = self._make_key(group_name)
        if force_refresh:
            self._cache.clear(key)

        return await self._cache.resolve_with_coalescing(key, lambda: self._resolve_uncached(group_name))

    async def _resolve_uncached(self, group_name: str) -> List[EnrichedUser]:
        logger.info(f"Starting recursive user fetch for group '{group_name}'")

        discovered = await self._expander.expand(group_name)
        ordered = sort_users(discovered)

        if self._enricher is None:
            users = [EnrichedUser(user=user) for user in ordered]
        else:
            users = await self._enricher.enrich(ordered)

        logger.info(f"Resolved {len(users)} users for group '{group_name}'")
        return users

    def get_cached(self, group_name: str) -> Optional[List[EnrichedUser]]:
        """Get a fresh cached result without resolving."""
        return self._cache.get(self._make_key(group_name))

    def invalidate(self, group_name: str) -> bool:
        """Drop the cached result for one group."""
        return self._cache.clear(self._make_key(group_name))

    def invalidate_all(self) -> int:
        """Drop every cached result."""
        return self._cache.clear_all()

    @staticmethod
    def describe_error(error: Exception, group_name: str) -> str:
        """User-facing message distinguishing missing, forbidden and other failures."""
        if isinstance(error, ValidationError):
            return error.message
        if isinstance(error, PrincipalNotFoundError):
            return f'Group "{group_name}" does not exist or you don\'t have permission to access it.'
        if isinstance(error, PermissionDeniedError):
            return f'You don\'t have permission to view users in group "{group_name}".'
        detail = str(error) or "Failed to load group users"
        return f'Failed to load users from group "{group_name}": {detail}'

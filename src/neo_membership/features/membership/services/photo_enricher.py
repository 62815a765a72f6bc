"""Bounded-concurrency photo enrichment.

Per-user photo lookups are network calls. Firing them all at once risks
throttling on large groups, and fetching them one by one is slow, so a
fixed number of worker tasks share a claim counter and write results into
pre-sized slots. Output order always matches input order.
"""

import asyncio
import logging
from typing import List, Optional, Sequence

from ....config.settings import DEFAULT_PHOTO_CONCURRENCY
from ....core.exceptions import ValidationError
from ...cache.services.coalescing_cache import CoalescingCache
from ...directory.entities.protocols import DirectoryService
from ..entities.discovered_user import DiscoveredUser, EnrichedUser

logger = logging.getLogger(__name__)

# Stored in the photo cache for users without a usable photo
NO_PHOTO = b""


class PhotoEnricher:
    """Attaches profile photos to users using a fixed-size worker pool."""

    def __init__(
        self,
        directory: DirectoryService,
        site_url: str = "",
        concurrency_limit: int = DEFAULT_PHOTO_CONCURRENCY,
        photo_size: str = "S",
        photo_cache: Optional[CoalescingCache[str, bytes]] = None
    ):
        if concurrency_limit < 1:
            raise ValidationError(f"concurrency_limit must be at least 1, got: {concurrency_limit}")
        self._directory = directory
        self.site_url = site_url
        self.concurrency_limit = concurrency_limit
        self.photo_size = photo_size
        self._photo_cache = photo_cache

    async def enrich(
        self,
        users: Sequence[DiscoveredUser],
        concurrency_limit: Optional[int] = None
    ) -> List[EnrichedUser]:
        """Fetch photos for users, preserving input order.

        Args:
            users: Users to enrich
            concurrency_limit: Override for the maximum simultaneous fetches

        Returns:
            One EnrichedUser per input user, in the same order
        """
        limit = self.concurrency_limit if concurrency_limit is None else concurrency_limit
        if limit < 1:
            raise ValidationError(f"concurrency_limit must be at least 1, got: {limit}")

        total = len(users)
        if total == 0:
            return []

        results: List[Optional[EnrichedUser]] = [None] * total
        next_index = 0

        async def worker() -> None:
            nonlocal next_index
            while next_index < total:
                index = next_index
                next_index += 1
                user = users[index]
                results[index] = EnrichedUser(user=user, photo=await self._fetch_photo(user))

        await asyncio.gather(*(worker() for _ in range(min(limit, total))))

        with_photo = sum(1 for result in results if result.photo)
        logger.info(f"Enriched {total} users ({with_photo} with photos, concurrency={limit})")
        return results  # type: ignore[return-value]

    async def _fetch_photo(self, user: DiscoveredUser) -> Optional[bytes]:
        principal = user.principal
        login_name = principal.login_name or principal.email
        if not login_name:
            logger.debug(f"No login name for user {principal.id}, skipping photo")
            return None

        try:
            if self._photo_cache is None:
                photo = await self._load_photo(login_name)
            else:
                photo = await self._photo_cache.resolve_with_coalescing(
                    login_name.lower(),
                    lambda: self._load_photo(login_name)
                )
        except Exception as e:
            logger.warning(f"Photo fetch failed for '{login_name}': {e}")
            return None

        return photo or None

    async def _load_photo(self, login_name: str) -> bytes:
        photo = await self._directory.get_user_photo(self.site_url, login_name, self.photo_size)
        if not photo or self._directory.is_default_photo(photo):
            return NO_PHOTO
        return photo

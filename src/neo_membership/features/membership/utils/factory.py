"""Wiring for the membership feature."""

from typing import List, Optional

from ....config.settings import MembershipSettings, get_settings
from ...cache.services.coalescing_cache import CoalescingCache
from ...directory.entities.protocols import DirectoryService
from ..entities.discovered_user import EnrichedUser
from ..services.group_expander import GroupExpander
from ..services.membership_service import MembershipService
from ..services.photo_enricher import PhotoEnricher


def create_membership_service(
    directory: DirectoryService,
    settings: Optional[MembershipSettings] = None,
    cache: Optional[CoalescingCache[str, List[EnrichedUser]]] = None
) -> MembershipService:
    """Build a MembershipService from settings.
    
    Args:
        directory: Directory service implementation
        settings: Settings; read from the environment when omitted
        cache: Result cache to share between services; created when omitted
    """
    settings = settings or get_settings()
    cache_config = settings.get_cache_config()
    enrichment = settings.get_enrichment_config()
    
    if cache is None:
        cache = CoalescingCache(ttl_seconds=cache_config["ttl_seconds"], name="group-members")
    
    enricher = None
    if enrichment["enabled"]:
        enricher = PhotoEnricher(
            directory,
            site_url=settings.site_url,
            concurrency_limit=enrichment["concurrency"],
            photo_size=enrichment["size"],
            photo_cache=CoalescingCache(ttl_seconds=cache_config["photo_ttl_seconds"], name="user-photos"),
        )
    
    return MembershipService(expander=GroupExpander(directory), cache=cache, enricher=enricher)

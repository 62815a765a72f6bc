"""Membership entities."""

from .visited_groups import VisitedGroups
from .discovered_user import DiscoveredUser, EnrichedUser, UserMap, upsert

__all__ = ["VisitedGroups", "DiscoveredUser", "EnrichedUser", "UserMap", "upsert"]

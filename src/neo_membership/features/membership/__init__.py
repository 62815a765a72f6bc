"""Membership feature for neo-membership.

Feature-First architecture:
- entities/: Discovered users, provenance and the visited-group set
- services/: Expansion, sorting, photo enrichment and orchestration
- utils/: Persona initials and colours
"""

from .entities import VisitedGroups, DiscoveredUser, EnrichedUser, UserMap, upsert
from .services import (
    GroupExpander,
    PhotoEnricher,
    MembershipService,
    sort_users,
    sort_key,
    collation_key,
)
from .utils import PersonaColor, get_initials, get_persona_color
from .utils.factory import create_membership_service

__all__ = [
    "VisitedGroups",
    "DiscoveredUser",
    "EnrichedUser",
    "UserMap",
    "upsert",
    "GroupExpander",
    "PhotoEnricher",
    "MembershipService",
    "sort_users",
    "sort_key",
    "collation_key",
    "PersonaColor",
    "get_initials",
    "get_persona_color",
    "create_membership_service",
]

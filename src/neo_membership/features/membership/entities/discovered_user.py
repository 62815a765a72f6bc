"""Discovered and enriched user entities.

This module defines the per-resolution user map entries and the identity
deduplication that merges provenance when a user is reached through more
than one group.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ....core.value_objects import PrincipalId
from ...directory.entities.principal import Principal
from ...directory.services.photo_classifier import to_data_url
from ..utils.persona import PersonaColor, get_initials, get_persona_color


UserMap = Dict[PrincipalId, "DiscoveredUser"]


@dataclass
class DiscoveredUser:
    """A user found during traversal with the groups it was reached through."""
    
    principal: Principal
    source_groups: List[str] = field(default_factory=list)
    
    @property
    def id(self) -> PrincipalId:
        return self.principal.id
    
    def add_source(self, group_name: str) -> bool:
        """Record a source group; return False if it was already recorded."""
        if group_name in self.source_groups:
            return False
        self.source_groups.append(group_name)
        return True


def upsert(user_map: UserMap, principal: Principal, source_group: str) -> DiscoveredUser:
    """Insert a user or merge a new source group into the existing entry.
    
    Idempotent for repeated insertion from the same source group.
    """
    existing = user_map.get(principal.id)
    if existing is None:
        entry = DiscoveredUser(principal=principal, source_groups=[source_group])
        user_map[principal.id] = entry
        return entry
    existing.add_source(source_group)
    return existing


@dataclass
class EnrichedUser:
    """A discovered user plus an optional photo and presentation fields."""
    
    user: DiscoveredUser
    photo: Optional[bytes] = None
    
    @property
    def id(self) -> PrincipalId:
        return self.user.id
    
    @property
    def principal(self) -> Principal:
        return self.user.principal
    
    @property
    def source_groups(self) -> List[str]:
        return self.user.source_groups
    
    @property
    def text(self) -> str:
        p = self.principal
        return p.display_name or p.email or p.login_name or "Unknown User"
    
    @property
    def secondary_text(self) -> str:
        return self.principal.email or self.principal.login_name or ""
    
    @property
    def login_name(self) -> str:
        return self.principal.login_name or self.principal.email or ""
    
    @property
    def initials(self) -> str:
        return get_initials(self.text)
    
    @property
    def initials_color(self) -> PersonaColor:
        return get_persona_color(self.text)
    
    @property
    def photo_data_url(self) -> Optional[str]:
        return to_data_url(self.photo) if self.photo else None

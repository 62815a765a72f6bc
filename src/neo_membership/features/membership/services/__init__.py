"""Membership services."""

from .group_expander import GroupExpander
from .photo_enricher import PhotoEnricher
from .result_sorter import sort_users, sort_key, collation_key
from .membership_service import MembershipService

__all__ = [
    "GroupExpander",
    "PhotoEnricher",
    "sort_users",
    "sort_key",
    "collation_key",
    "MembershipService",
]

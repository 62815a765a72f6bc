"""Directory entities and protocols."""

from .principal import Group, Principal, PrincipalType
from .protocols import DirectoryService

__all__ = ["Group", "Principal", "PrincipalType", "DirectoryService"]

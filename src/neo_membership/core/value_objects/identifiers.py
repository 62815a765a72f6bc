"""Value objects for identifiers in neo-membership.

Directory identifiers are opaque: SharePoint hands out integers, other
directories hand out GUIDs or login names. They are normalized to
non-empty strings so that equality and hashing are stable across sources.
"""

from dataclasses import dataclass
from typing import Union


def _normalize_identifier(kind: str, value: Union[str, int]) -> str:
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise ValueError(f"{kind} must be a string or integer, got: {value!r}")
    normalized = str(value).strip()
    if not normalized:
        raise ValueError(f"{kind} cannot be empty")
    return normalized


@dataclass(frozen=True)
class GroupId:
    """Group identifier value object."""
    value: str
    
    def __post_init__(self):
        object.__setattr__(self, 'value', _normalize_identifier("GroupId", self.value))
    
    def __str__(self) -> str:
        """String representation."""
        return self.value
    
    def __repr__(self) -> str:
        """Detailed representation."""
        return f"GroupId(value={self.value!r})"


@dataclass(frozen=True)
class PrincipalId:
    """Principal (user or group) identifier value object."""
    value: str
    
    def __post_init__(self):
        object.__setattr__(self, 'value', _normalize_identifier("PrincipalId", self.value))
    
    def as_group_id(self) -> GroupId:
        """Reinterpret this principal as a group identifier."""
        return GroupId(self.value)
    
    def __str__(self) -> str:
        """String representation."""
        return self.value
    
    def __repr__(self) -> str:
        """Detailed representation."""
        return f"PrincipalId(value={self.value!r})"

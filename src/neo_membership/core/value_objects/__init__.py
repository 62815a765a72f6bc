"""Value objects for neo-membership."""

from .identifiers import GroupId, PrincipalId

__all__ = ["GroupId", "PrincipalId"]

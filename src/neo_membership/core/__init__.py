"""Core building blocks for neo-membership: exceptions and value objects."""

from .exceptions import (
    NeoMembershipError,
    DirectoryError,
    GroupNotFoundError,
    PermissionDeniedError,
    TransientFetchError,
    DirectoryServiceError,
    ValidationError,
)
from .value_objects import GroupId, PrincipalId

__all__ = [
    "NeoMembershipError",
    "DirectoryError",
    "GroupNotFoundError",
    "PermissionDeniedError",
    "TransientFetchError",
    "DirectoryServiceError",
    "ValidationError",
    "GroupId",
    "PrincipalId",
]

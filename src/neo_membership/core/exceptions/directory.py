"""Directory-service exceptions for neo-membership.

These classify failures reported by the directory service collaborator.
The membership engine propagates them for the root group and swallows
them for nested groups and photo lookups.
"""

from .base import NeoMembershipError


class DirectoryError(NeoMembershipError):
    """Base class for directory service errors."""
    pass


# Not found
class PrincipalNotFoundError(DirectoryError):
    """Raised when a group or user does not exist in the directory."""
    pass


class GroupNotFoundError(PrincipalNotFoundError):
    """Raised when a group cannot be found by name or id."""
    pass


class UserNotFoundError(PrincipalNotFoundError):
    """Raised when a user cannot be found."""
    pass


# Access
class PermissionDeniedError(DirectoryError):
    """Raised when the directory service rejects access."""
    pass


# Transport
class TransientFetchError(DirectoryError):
    """Raised on network failures and timeouts talking to the directory."""
    pass


class DirectoryServiceError(DirectoryError):
    """Raised for directory failures that fit no other category."""
    pass

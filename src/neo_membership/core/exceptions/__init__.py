"""Exceptions module for neo-membership.

This module provides the complete exception hierarchy for neo-membership,
organized by directory concerns and infrastructure concerns.
"""

from .base import (
    NeoMembershipError,
    get_http_status_code,
    create_error_response,
)

from .directory import (
    DirectoryError,
    PrincipalNotFoundError,
    GroupNotFoundError,
    UserNotFoundError,
    PermissionDeniedError,
    TransientFetchError,
    DirectoryServiceError,
)

from .infrastructure import (
    ConfigurationError,
    ValidationError,
    DocumentNotFoundError,
)

__all__ = [
    # Base
    "NeoMembershipError",
    "get_http_status_code",
    "create_error_response",
    
    # Directory Errors
    "DirectoryError",
    "PrincipalNotFoundError",
    "GroupNotFoundError",
    "UserNotFoundError",
    "PermissionDeniedError",
    "TransientFetchError",
    "DirectoryServiceError",
    
    # Infrastructure Errors
    "ConfigurationError",
    "ValidationError",
    "DocumentNotFoundError",
]

"""Infrastructure-specific exceptions for neo-membership.

Configuration, input validation and document lookup failures.
"""

from .base import NeoMembershipError


# Configuration Errors
class ConfigurationError(NeoMembershipError):
    """Raised when required settings are missing or unusable."""
    pass


# Validation Errors
class ValidationError(NeoMembershipError):
    """Raised when input validation fails."""
    pass


# Document Errors
class DocumentNotFoundError(NeoMembershipError):
    """Raised when document metadata cannot be found."""
    pass

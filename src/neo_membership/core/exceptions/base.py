"""Root of the neo-membership exception hierarchy.

Every error carries a machine-readable code (the class name unless given)
and a details dict, so callers can render directory failures without
parsing messages.
"""

from typing import Any, Dict, Optional


class NeoMembershipError(Exception):
    """Base exception for membership resolution, caching and directory access."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or type(self).__name__
        self.details = details or {}


def get_http_status_code(exception: Exception) -> int:
    """HTTP status for an exception; 500 for anything unmapped."""
    from .http_mapping import get_http_status_code as mapped_status
    return mapped_status(exception)


def create_error_response(exception: NeoMembershipError) -> Dict[str, Any]:
    """Serialize an error into the ``{"error": {...}}`` body used by host services.

    Args:
        exception: The error to serialize

    Returns:
        Dict with code, message, details and exception type
    """
    return {
        "error": {
            "code": exception.error_code,
            "message": exception.message,
            "details": exception.details,
            "type": type(exception).__name__,
        }
    }

"""HTTP status code mapping for neo-membership exceptions.

Walks the exception's MRO and returns the status of the most specific
mapped class, so subclasses inherit their parent's code.
"""

from typing import Dict, Type

from .directory import (
    PrincipalNotFoundError,
    PermissionDeniedError,
    TransientFetchError,
)
from .infrastructure import ValidationError, DocumentNotFoundError


DEFAULT_STATUS_CODE = 500

STATUS_CODE_MAPPING: Dict[Type[Exception], int] = {
    PrincipalNotFoundError: 404,
    DocumentNotFoundError: 404,
    PermissionDeniedError: 403,
    ValidationError: 400,
    TransientFetchError: 503,
}


def get_http_status_code(exception: Exception) -> int:
    """Get HTTP status code for an exception.
    
    Args:
        exception: The exception instance
        
    Returns:
        Mapped status code, or 500 for unmapped exceptions
    """
    for exception_class in type(exception).__mro__:
        if exception_class in STATUS_CODE_MAPPING:
            return STATUS_CODE_MAPPING[exception_class]
    return DEFAULT_STATUS_CODE

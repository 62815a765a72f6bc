"""Neo-Membership - recursive group membership resolution for NeoMultiTenant.

Resolves every user reachable from a root group, including through nested
groups, into a deduplicated, sorted list with optional profile photos.
Results are cached for a TTL and concurrent requests are coalesced.
"""

# Initialize logging configuration on import
from .config.logging_config import setup_logging
setup_logging()

from .__version__ import __version__

from .config import MembershipSettings, get_settings

from .core.exceptions import (
    NeoMembershipError,
    DirectoryError,
    PrincipalNotFoundError,
    GroupNotFoundError,
    UserNotFoundError,
    PermissionDeniedError,
    TransientFetchError,
    DirectoryServiceError,
    ValidationError,
    ConfigurationError,
    DocumentNotFoundError,
    get_http_status_code,
    create_error_response,
)

from .core.value_objects import GroupId, PrincipalId

from .features.directory import (
    Group,
    Principal,
    PrincipalType,
    DirectoryService,
    DefaultPhotoClassifier,
    SharePointDirectoryAdapter,
    create_sharepoint_adapter,
)

from .features.cache import CoalescingCache

from .features.membership import (
    DiscoveredUser,
    EnrichedUser,
    GroupExpander,
    PhotoEnricher,
    MembershipService,
    sort_users,
    upsert,
    create_membership_service,
)

from .features.documents import (
    DocumentInfo,
    DocumentSource,
    DocumentMetadataService,
    build_document_cache_key,
)

__all__ = [
    "__version__",
    
    # Configuration
    "MembershipSettings",
    "get_settings",
    
    # Exceptions
    "NeoMembershipError",
    "DirectoryError",
    "PrincipalNotFoundError",
    "GroupNotFoundError",
    "UserNotFoundError",
    "PermissionDeniedError",
    "TransientFetchError",
    "DirectoryServiceError",
    "ValidationError",
    "ConfigurationError",
    "DocumentNotFoundError",
    "get_http_status_code",
    "create_error_response",
    
    # Value Objects
    "GroupId",
    "PrincipalId",
    
    # Directory
    "Group",
    "Principal",
    "PrincipalType",
    "DirectoryService",
    "DefaultPhotoClassifier",
    "SharePointDirectoryAdapter",
    "create_sharepoint_adapter",
    
    # Cache
    "CoalescingCache",
    
    # Membership
    "DiscoveredUser",
    "EnrichedUser",
    "GroupExpander",
    "PhotoEnricher",
    "MembershipService",
    "sort_users",
    "upsert",
    "create_membership_service",
    
    # Documents
    "DocumentInfo",
    "DocumentSource",
    "DocumentMetadataService",
    "build_document_cache_key",
]

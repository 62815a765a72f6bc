"""Directory feature for neo-membership.

Feature-First architecture:
- entities/: Principal types and the DirectoryService protocol
- services/: Placeholder photo detection
- adapters/: SharePoint REST implementation
- utils/: Adapter construction from settings
"""

from .entities import Group, Principal, PrincipalType, DirectoryService
from .services import DefaultPhotoClassifier, DEFAULT_PERSONA_IMAGE_HASHES, to_data_url
from .adapters import SharePointDirectoryAdapter
from .utils import create_sharepoint_adapter

__all__ = [
    "Group",
    "Principal",
    "PrincipalType",
    "DirectoryService",
    "DefaultPhotoClassifier",
    "DEFAULT_PERSONA_IMAGE_HASHES",
    "to_data_url",
    "SharePointDirectoryAdapter",
    "create_sharepoint_adapter",
]

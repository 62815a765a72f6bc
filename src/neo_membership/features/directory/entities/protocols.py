"""Protocol interfaces for the directory service collaborator.

The membership engine depends only on this protocol, so tests can
substitute an in-memory directory and deployments can plug in any
backend (SharePoint REST, Graph, LDAP).
"""

from abc import abstractmethod
from typing import List, Optional, Protocol, runtime_checkable

from ....core.value_objects import GroupId
from .principal import Group, Principal


@runtime_checkable
class DirectoryService(Protocol):
    """Protocol for directory lookups used by membership resolution."""
    
    @abstractmethod
    async def get_group_by_name(self, name: str) -> Optional[Group]:
        """Resolve a group by its name.
        
        Returns None or raises GroupNotFoundError when the group is missing.
        """
        ...
    
    @abstractmethod
    async def get_group_members(self, group_id: GroupId) -> List[Principal]:
        """List a group's direct members (users and nested groups)."""
        ...
    
    @abstractmethod
    async def get_user_photo(self, site_url: str, login_name: str, size: str = "S") -> Optional[bytes]:
        """Fetch a user's profile photo, or None when absent."""
        ...
    
    @abstractmethod
    def is_default_photo(self, photo: bytes) -> bool:
        """Return True when the photo is a placeholder image."""
        ...

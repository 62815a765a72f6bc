"""Directory principal entities.

Principals are the users and groups returned by the directory service.
The principal type is a closed enum so that traversal branches on an
explicit discriminator rather than on runtime type inspection.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from ....core.value_objects import GroupId, PrincipalId


class PrincipalType(str, Enum):
    """Kinds of directory principals."""
    USER = "user"
    GROUP = "group"
    DISTRIBUTION_LIST = "distribution_list"
    SECURITY_GROUP = "security_group"
    
    @classmethod
    def from_sharepoint(cls, code: int) -> "PrincipalType":
        """Map a SharePoint ``PrincipalType`` bit value.
        
        1 = User, 2 = DistributionList, 4 = SecurityGroup, 8 = SharePointGroup
        """
        mapping = {
            1: cls.USER,
            2: cls.DISTRIBUTION_LIST,
            4: cls.SECURITY_GROUP,
            8: cls.GROUP,
        }
        try:
            return mapping[int(code)]
        except (KeyError, TypeError, ValueError):
            raise ValueError(f"Unknown SharePoint principal type: {code!r}")
    
    @property
    def is_terminal(self) -> bool:
        """Only users end a traversal branch with a result."""
        return self is PrincipalType.USER
    
    @property
    def is_expandable(self) -> bool:
        """Only directory-native groups can be listed and recursed into."""
        return self is PrincipalType.GROUP


@dataclass(frozen=True)
class Group:
    """A directory group resolved by name or id."""
    
    id: GroupId
    display_name: str
    
    def __post_init__(self):
        if not isinstance(self.id, GroupId):
            object.__setattr__(self, 'id', GroupId(self.id))
    
    @classmethod
    def create(cls, group_id: Union[str, int], display_name: Optional[str] = None) -> "Group":
        """Create a group, deriving a display name when the directory has none."""
        gid = GroupId(group_id)
        return cls(id=gid, display_name=display_name or f"Group {gid.value}")


@dataclass(frozen=True)
class Principal:
    """A user or group discovered as a group member."""
    
    id: PrincipalId
    display_name: str
    principal_type: PrincipalType
    email: Optional[str] = None
    login_name: Optional[str] = None
    
    def __post_init__(self):
        if not isinstance(self.id, PrincipalId):
            object.__setattr__(self, 'id', PrincipalId(self.id))
    
    @property
    def is_user(self) -> bool:
        return self.principal_type.is_terminal
    
    @property
    def is_group(self) -> bool:
        return self.principal_type.is_expandable
    
    @property
    def sort_name(self) -> str:
        """Display name, falling back to email and then login name."""
        return self.display_name or self.email or self.login_name or ""
    
    def as_group(self) -> Group:
        """View a group-typed member as a Group for recursion."""
        return Group.create(self.id.value, self.display_name)

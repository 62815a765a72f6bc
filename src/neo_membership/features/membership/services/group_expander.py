"""Recursive group expansion.

Walks the membership graph depth-first from a root group, recursing into
nested groups and recording users in a deduplicated map. Failures on the
root group propagate; failures on nested groups are logged and the branch
contributes nothing.
"""

import logging
from typing import List

from ....core.exceptions import DirectoryError, DirectoryServiceError, GroupNotFoundError
from ...directory.entities.principal import Group
from ...directory.entities.protocols import DirectoryService
from ..entities.discovered_user import DiscoveredUser, UserMap, upsert
from ..entities.visited_groups import VisitedGroups

logger = logging.getLogger(__name__)


class GroupExpander:
    """Discovers every user reachable from a root group."""

    def __init__(self, directory: DirectoryService):
        self._directory = directory

    async def expand(self, root_group_name: str) -> List[DiscoveredUser]:
        """Expand a root group into its transitive user members.

        Args:
            root_group_name: Name of the group to start from

        Returns:
            Deduplicated users in discovery order (not sorted)

        Raises:
            GroupNotFoundError: Root group does not exist
            PermissionDeniedError: Root group cannot be read
            DirectoryError: Any other root failure
        """
        visited = VisitedGroups()
        user_map: UserMap = {}

        root = await self._lookup_root(root_group_name)
        await self._expand_group(root, visited, user_map, is_root=True)

        logger.info(
            f"Expanded group '{root_group_name}': {len(user_map)} unique users "
            f"across {len(visited)} groups"
        )
        return list(user_map.values())

    async def _lookup_root(self, group_name: str) -> Group:
        try:
            group = await self._directory.get_group_by_name(group_name)
        except DirectoryError as e:
            logger.error(f"Failed to look up root group '{group_name}': {e}")
            raise
        except Exception as e:
            logger.error(f"Failed to look up root group '{group_name}': {e}")
            raise DirectoryServiceError(
                f"Failed to look up group '{group_name}': {e}",
                details={"group_name": group_name}
            ) from e

        if group is None:
            logger.warning(f"Group not found or has no id: '{group_name}'")
            raise GroupNotFoundError(
                f"Group '{group_name}' not found",
                details={"group_name": group_name}
            )
        return group

    async def _expand_group(
        self,
        group: Group,
        visited: VisitedGroups,
        user_map: UserMap,
        is_root: bool = False
    ) -> None:
        if not visited.mark(group.id):
            logger.info(f"Already processed group '{group.display_name}' ({group.id}), skipping")
            return

        try:
            members = await self._directory.get_group_members(group.id)
        except Exception as e:
            if is_root:
                logger.error(f"Failed to list members of root group '{group.display_name}': {e}")
                if isinstance(e, DirectoryError):
                    raise
                raise DirectoryServiceError(
                    f"Failed to list members of group '{group.display_name}': {e}",
                    details={"group_id": group.id.value}
                ) from e
            logger.error(f"Error processing nested group '{group.display_name}' ({group.id}): {e}")
            return

        logger.info(f"Processing group '{group.display_name}' ({group.id}): {len(members)} members")

        for member in members:
            if member.is_group:
                logger.debug(f"Found nested group '{member.display_name}' ({member.id})")
                await self._expand_group(member.as_group(), visited, user_map)
            elif member.is_user:
                upsert(user_map, member, group.display_name)
            else:
                logger.debug(
                    f"Skipping {member.principal_type.value} '{member.display_name}' "
                    f"in group '{group.display_name}'"
                )

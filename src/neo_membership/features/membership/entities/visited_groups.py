"""Visited-set tracking for cycle-safe traversal."""

from typing import Iterator, Set

from ....core.value_objects import GroupId


class VisitedGroups:
    """Groups already expanded during one resolution.
    
    Once marked, a group is never expanded again, which bounds traversal to
    the number of distinct groups regardless of cycles or graph density.
    """
    
    def __init__(self):
        self._visited: Set[GroupId] = set()
    
    def mark(self, group_id: GroupId) -> bool:
        """Record a group; return False if it was already recorded."""
        if group_id in self._visited:
            return False
        self._visited.add(group_id)
        return True
    
    def __contains__(self, group_id: object) -> bool:
        return group_id in self._visited
    
    def __len__(self) -> int:
        return len(self._visited)
    
    def __iter__(self) -> Iterator[GroupId]:
        return iter(self._visited)

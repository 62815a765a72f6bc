"""Deterministic ordering of resolved users.

Names compare accent- and case-insensitively without consulting the process
locale. Among names that collate equal, lowercase sorts before uppercase
("alice" before "ALICE"), then the principal id decides.
"""

import unicodedata
from typing import Iterable, List, Tuple

from ..entities.discovered_user import DiscoveredUser


def collation_key(text: str) -> str:
    """Accent- and case-insensitive key, independent of the process locale."""
    decomposed = unicodedata.normalize("NFKD", text)
    stripped = "".join(char for char in decomposed if not unicodedata.combining(char))
    return stripped.casefold()


def sort_key(user: DiscoveredUser) -> Tuple[str, str, str]:
    """Collated name first; lowercase-first raw name and id break ties."""
    name = user.principal.sort_name
    return (collation_key(name), name.swapcase(), user.id.value)


def sort_users(users: Iterable[DiscoveredUser]) -> List[DiscoveredUser]:
    """Order users by display name, falling back to email, then login."""
    return sorted(users, key=sort_key)

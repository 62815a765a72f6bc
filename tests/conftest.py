"""Pytest configuration and fixtures for neo-membership tests."""

import asyncio
from collections import Counter
from typing import Dict, List, Optional, Set

import pytest

from neo_membership.core.exceptions import GroupNotFoundError
from neo_membership.core.value_objects import GroupId
from neo_membership.features.directory.entities.principal import Group, Principal, PrincipalType


PLACEHOLDER_PHOTO = b"placeholder-silhouette"


def user(user_id, name: str, email: Optional[str] = None, login: Optional[str] = None) -> Principal:
    """Build a user principal."""
    return Principal(
        id=user_id,
        display_name=name,
        principal_type=PrincipalType.USER,
        email=email,
        login_name=login if login is not None else f"i:0#.f|membership|{name.lower()}@contoso.com",
    )


def group(group_id, name: str) -> Principal:
    """Build a nested group principal."""
    return Principal(id=group_id, display_name=name, principal_type=PrincipalType.GROUP)


class FakeDirectoryService:
    """In-memory directory with call counters and failure injection."""

    def __init__(self, photo_delay: float = 0.0):
        self.groups: Dict[str, Group] = {}
        self.members: Dict[GroupId, List[Principal]] = {}
        self.photos: Dict[str, bytes] = {}
        self.member_errors: Dict[GroupId, Exception] = {}
        self.lookup_errors: Dict[str, Exception] = {}
        self.photo_errors: Set[str] = set()
        self.photo_delay = photo_delay
        self.lookup_delay = 0.0

        self.lookup_calls: Counter = Counter()
        self.member_calls: Counter = Counter()
        self.photo_calls: Counter = Counter()
        self.photos_in_flight = 0
        self.max_photos_in_flight = 0

    def add_group(self, group_id, name: str, members: List[Principal]) -> Group:
        created = Group.create(group_id, name)
        self.groups[name] = created
        self.members[created.id] = list(members)
        return created

    async def get_group_by_name(self, name: str) -> Optional[Group]:
        self.lookup_calls[name] += 1
        if self.lookup_delay:
            await asyncio.sleep(self.lookup_delay)
        if name in self.lookup_errors:
            raise self.lookup_errors[name]
        if name not in self.groups:
            raise GroupNotFoundError(f"Group '{name}' not found")
        return self.groups[name]

    async def get_group_members(self, group_id: GroupId) -> List[Principal]:
        self.member_calls[group_id.value] += 1
        await asyncio.sleep(0)
        if group_id in self.member_errors:
            raise self.member_errors[group_id]
        return list(self.members.get(group_id, []))

    async def get_user_photo(self, site_url: str, login_name: str, size: str = "S") -> Optional[bytes]:
        self.photo_calls[login_name] += 1
        self.photos_in_flight += 1
        self.max_photos_in_flight = max(self.max_photos_in_flight, self.photos_in_flight)
        try:
            await asyncio.sleep(self.photo_delay)
            if login_name in self.photo_errors:
                raise ConnectionError(f"photo service unreachable for {login_name}")
            return self.photos.get(login_name)
        finally:
            self.photos_in_flight -= 1

    def is_default_photo(self, photo: bytes) -> bool:
        return photo == PLACEHOLDER_PHOTO


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def directory():
    """Empty fake directory."""
    return FakeDirectoryService()


@pytest.fixture
def approvers_directory():
    """Approvers -> (Alice, Bob, SubApprovers -> (Bob, Carol))."""
    fake = FakeDirectoryService()
    alice = user(1, "Alice", email="alice@contoso.com")
    bob = user(2, "Bob", email="bob@contoso.com")
    carol = user(3, "Carol", email="carol@contoso.com")
    fake.add_group(10, "Approvers", [alice, bob, group(11, "SubApprovers")])
    fake.add_group(11, "SubApprovers", [bob, carol])
    return fake


@pytest.fixture
def clock():
    """Fake clock for TTL tests."""
    return FakeClock()

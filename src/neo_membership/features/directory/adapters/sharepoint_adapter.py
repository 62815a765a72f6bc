"""SharePoint REST adapter for the directory service protocol.

Talks to the ``_api/web/sitegroups`` endpoints and ``userphoto.aspx`` with
httpx. Authentication is the caller's concern: pass pre-authenticated
headers or an already configured ``httpx.AsyncClient``.
"""

import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx

from ....core.exceptions import (
    DirectoryServiceError,
    GroupNotFoundError,
    PermissionDeniedError,
    TransientFetchError,
)
from ....core.value_objects import GroupId
from ..entities.principal import Group, Principal, PrincipalType
from ..services.photo_classifier import DefaultPhotoClassifier

logger = logging.getLogger(__name__)


ODATA_HEADERS = {"Accept": "application/json;odata=nometadata"}


class SharePointDirectoryAdapter:
    """Directory service backed by the SharePoint REST API."""

    def __init__(
        self,
        site_url: str,
        http_client: Optional[httpx.AsyncClient] = None,
        headers: Optional[Dict[str, str]] = None,
        timeout: float = 30.0,
        photo_classifier: Optional[DefaultPhotoClassifier] = None,
    ):
        """Initialize the adapter.

        Args:
            site_url: Absolute URL of the SharePoint web
            http_client: Optional client to reuse; not closed by the adapter
            headers: Extra request headers (e.g. Authorization)
            timeout: HTTP timeout in seconds for an owned client
            photo_classifier: Placeholder photo detector
        """
        self.site_url = site_url.rstrip("/")
        self.timeout = timeout
        self._headers = {**ODATA_HEADERS, **(headers or {})}
        self._http_client = http_client
        self._owns_client = http_client is None
        self._photo_classifier = photo_classifier or DefaultPhotoClassifier()

    async def __aenter__(self):
        """Async context manager entry."""
        self._ensure_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    def _ensure_client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(timeout=self.timeout)
            self._owns_client = True
        return self._http_client

    async def close(self) -> None:
        """Close the HTTP client if this adapter created it."""
        if self._owns_client and self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None

    async def _get(self, url: str, params: Optional[Dict[str, Any]] = None, what: str = "resource") -> httpx.Response:
        client = self._ensure_client()
        try:
            response = await client.get(url, params=params, headers=self._headers)
        except httpx.TimeoutException as e:
            raise TransientFetchError(f"Timed out fetching {what}: {e}", details={"url": url}) from e
        except httpx.TransportError as e:
            raise TransientFetchError(f"Network error fetching {what}: {e}", details={"url": url}) from e

        status = response.status_code
        if status in (401, 403):
            raise PermissionDeniedError(
                f"Access denied fetching {what}",
                details={"url": url, "status_code": status}
            )
        if status >= 500 or status == 429:
            raise TransientFetchError(
                f"Directory service unavailable fetching {what} (HTTP {status})",
                details={"url": url, "status_code": status}
            )
        return response

    @staticmethod
    def _escape(value: str) -> str:
        """OData string literal, percent-encoded for the URL path."""
        return quote(value.replace("'", "''"), safe="'")

    @staticmethod
    def _results(payload: Dict[str, Any]) -> List[Dict[str, Any]]:
        if "value" in payload:
            return payload["value"]
        data = payload.get("d", {})
        return data.get("results", [])

    @staticmethod
    def _to_principal(item: Dict[str, Any]) -> Principal:
        return Principal(
            id=item["Id"],
            display_name=item.get("Title") or "",
            principal_type=PrincipalType.from_sharepoint(item.get("PrincipalType", 1)),
            email=item.get("Email") or None,
            login_name=item.get("LoginName") or None,
        )

    async def get_group_by_name(self, name: str) -> Optional[Group]:
        """Resolve a site group by name."""
        url = f"{self.site_url}/_api/web/sitegroups/getbyname('{self._escape(name)}')"
        response = await self._get(url, what=f"group '{name}'")

        if response.status_code == 404:
            raise GroupNotFoundError(f"Group '{name}' not found", details={"group_name": name})
        if not response.is_success:
            raise DirectoryServiceError(
                f"Cannot get group '{name}' (HTTP {response.status_code})",
                details={"group_name": name, "status_code": response.status_code}
            )

        payload = response.json()
        data = payload.get("d", payload)
        if not data.get("Id"):
            logger.warning(f"Group '{name}' returned without an id")
            return None
        return Group.create(data["Id"], data.get("Title") or name)

    async def get_group_members(self, group_id: GroupId) -> List[Principal]:
        """List a site group's direct members."""
        url = f"{self.site_url}/_api/web/sitegroups/getbyid({group_id.value})/users"
        response = await self._get(url, what=f"members of group {group_id}")

        if response.status_code == 404:
            raise GroupNotFoundError(f"Group {group_id} not found", details={"group_id": group_id.value})
        if not response.is_success:
            raise DirectoryServiceError(
                f"Cannot list members of group {group_id} (HTTP {response.status_code})",
                details={"group_id": group_id.value, "status_code": response.status_code}
            )

        members = []
        for item in self._results(response.json()):
            try:
                members.append(self._to_principal(item))
            except (KeyError, ValueError) as e:
                logger.warning(f"Skipping malformed member of group {group_id}: {e}")
        return members

    async def get_user_photo(self, site_url: str, login_name: str, size: str = "S") -> Optional[bytes]:
        """Fetch a profile photo from ``userphoto.aspx``."""
        base_url = (site_url or self.site_url).rstrip("/")
        url = f"{base_url}/_layouts/15/userphoto.aspx"
        response = await self._get(
            url,
            params={"size": size, "accountname": login_name},
            what=f"photo for '{login_name}'"
        )
        if not response.is_success:
            return None
        return response.content or None

    def is_default_photo(self, photo: bytes) -> bool:
        return self._photo_classifier.is_default_photo(photo)

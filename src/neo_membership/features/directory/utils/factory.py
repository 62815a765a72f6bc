"""Wiring for the directory feature."""

from typing import Dict, Optional

import httpx

from ....config.settings import MembershipSettings, get_settings
from ....core.exceptions import ConfigurationError
from ..adapters.sharepoint_adapter import SharePointDirectoryAdapter
from ..services.photo_classifier import DefaultPhotoClassifier


def create_sharepoint_adapter(
    settings: Optional[MembershipSettings] = None,
    headers: Optional[Dict[str, str]] = None,
    http_client: Optional[httpx.AsyncClient] = None,
    photo_classifier: Optional[DefaultPhotoClassifier] = None
) -> SharePointDirectoryAdapter:
    """Build a SharePointDirectoryAdapter from settings.
    
    Args:
        settings: Settings; read from the environment when omitted
        headers: Authentication headers for an adapter-owned client
        http_client: Pre-configured client; its own timeout applies
        photo_classifier: Placeholder photo detector
        
    Raises:
        ConfigurationError: No site URL is configured
    """
    settings = settings or get_settings()
    config = settings.get_directory_config()
    
    if not config["site_url"]:
        raise ConfigurationError(
            "A SharePoint site URL is required (set NEO_MEMBERSHIP_SITE_URL)",
            details={"setting": "site_url"}
        )
    
    return SharePointDirectoryAdapter(
        config["site_url"],
        http_client=http_client,
        headers=headers,
        timeout=config["timeout"],
        photo_classifier=photo_classifier,
    )

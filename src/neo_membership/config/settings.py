"""
Configuration for neo-membership.

Settings are read from the environment (prefix ``NEO_MEMBERSHIP_``) and an
optional ``.env`` file, following the pydantic-settings pattern used across
NeoMultiTenant services.
"""
from functools import lru_cache
from typing import Any, Dict, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


PhotoSize = Literal["S", "M", "L"]

# 15 minutes
DEFAULT_CACHE_TTL_SECONDS = 15 * 60
DEFAULT_PHOTO_CONCURRENCY = 5


class MembershipSettings(BaseSettings):
    """Settings for group membership resolution."""
    
    model_config = SettingsConfigDict(
        env_prefix="NEO_MEMBERSHIP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )
    
    # Directory
    site_url: str = Field(default="")
    request_timeout_seconds: float = Field(default=30.0, gt=0)
    
    # Caching
    cache_ttl_seconds: float = Field(default=DEFAULT_CACHE_TTL_SECONDS, ge=0)
    photo_cache_ttl_seconds: float = Field(default=DEFAULT_CACHE_TTL_SECONDS, ge=0)
    
    # Photo enrichment
    enable_photos: bool = Field(default=True)
    photo_concurrency: int = Field(default=DEFAULT_PHOTO_CONCURRENCY, ge=1)
    photo_size: PhotoSize = Field(default="S")
    
    @field_validator("site_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")
    
    def get_directory_config(self) -> Dict[str, Any]:
        """Get directory adapter configuration."""
        return {
            "site_url": self.site_url,
            "timeout": self.request_timeout_seconds,
        }
    
    def get_cache_config(self) -> Dict[str, Any]:
        """Get cache configuration."""
        return {
            "ttl_seconds": self.cache_ttl_seconds,
            "photo_ttl_seconds": self.photo_cache_ttl_seconds,
        }
    
    def get_enrichment_config(self) -> Dict[str, Any]:
        """Get photo enrichment configuration."""
        return {
            "enabled": self.enable_photos,
            "concurrency": self.photo_concurrency,
            "size": self.photo_size,
        }


@lru_cache()
def get_settings() -> MembershipSettings:
    """Get cached settings instance."""
    return MembershipSettings()

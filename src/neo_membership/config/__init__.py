"""Configuration and logging for neo-membership."""

from .settings import (
    MembershipSettings,
    PhotoSize,
    DEFAULT_CACHE_TTL_SECONDS,
    DEFAULT_PHOTO_CONCURRENCY,
    get_settings,
)
from .logging_config import (
    LoggingConfig,
    LogVerbosity,
    LogFormat,
    setup_logging,
    get_logger,
)

__all__ = [
    "MembershipSettings",
    "PhotoSize",
    "DEFAULT_CACHE_TTL_SECONDS",
    "DEFAULT_PHOTO_CONCURRENCY",
    "get_settings",
    "LoggingConfig",
    "LogVerbosity",
    "LogFormat",
    "setup_logging",
    "get_logger",
]

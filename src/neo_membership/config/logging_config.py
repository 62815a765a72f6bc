"""Logging setup for neo-membership.

Levels come from ``LOG_LEVEL`` or, failing that, from ``LOG_VERBOSITY``
(QUIET, NORMAL, VERBOSE, DEBUG). Per-member traversal and photo logging is
held at WARNING unless ``ENABLE_DIRECTORY_LOGGING=true``.
"""

import logging
import logging.config
import os
from enum import Enum
from typing import Any, Dict, Mapping, Optional


class LogVerbosity(str, Enum):
    """Verbosity modes and the level each one maps to."""
    QUIET = "QUIET"
    NORMAL = "NORMAL"
    VERBOSE = "VERBOSE"
    DEBUG = "DEBUG"


class LogFormat(str, Enum):
    SIMPLE = "simple"
    DETAILED = "detailed"
    JSON = "json"


VERBOSITY_LEVELS = {
    LogVerbosity.QUIET: "ERROR",
    LogVerbosity.NORMAL: "WARNING",
    LogVerbosity.VERBOSE: "INFO",
    LogVerbosity.DEBUG: "DEBUG",
}

FORMAT_STRINGS = {
    LogFormat.SIMPLE: "%(asctime)s - %(levelname)s - %(message)s",
    LogFormat.DETAILED: "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
    LogFormat.JSON: '{"time":"%(asctime)s","level":"%(levelname)s","logger":"%(name)s","message":"%(message)s"}',
}

VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_log_level_from_verbosity(verbosity: str) -> str:
    """Map a verbosity name to a level; unknown names mean WARNING."""
    try:
        return VERBOSITY_LEVELS[LogVerbosity(verbosity.upper())]
    except ValueError:
        return "WARNING"


class LoggingConfig:
    """Builds and applies the package logging configuration."""

    # Log once per member or per photo
    DIRECTORY_MODULES = [
        "neo_membership.features.membership.services.group_expander",
        "neo_membership.features.membership.services.photo_enricher",
    ]

    # HTTP client internals
    ERROR_ONLY_MODULES = ["httpx", "httpcore", "asyncio"]

    @classmethod
    def resolve_level(cls, environ: Mapping[str, str]) -> str:
        level = environ.get("LOG_LEVEL", "").upper()
        if level in VALID_LEVELS:
            return level
        return get_log_level_from_verbosity(environ.get("LOG_VERBOSITY", "NORMAL"))

    @classmethod
    def build(cls, environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
        """Build a ``dictConfig`` mapping from environment variables."""
        environ = os.environ if environ is None else environ
        level = cls.resolve_level(environ)

        try:
            log_format = LogFormat(environ.get("LOG_FORMAT", "simple").lower())
        except ValueError:
            log_format = LogFormat.SIMPLE

        loggers: Dict[str, Dict[str, Any]] = {
            module: {"level": "ERROR", "propagate": True}
            for module in cls.ERROR_ONLY_MODULES
        }
        if environ.get("ENABLE_DIRECTORY_LOGGING", "false").lower() != "true" and level != "DEBUG":
            for module in cls.DIRECTORY_MODULES:
                loggers[module] = {"level": "WARNING", "propagate": True}

        return {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {"format": FORMAT_STRINGS[log_format], "datefmt": "%Y-%m-%d %H:%M:%S"},
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "level": level,
                    "formatter": "default",
                    "stream": "ext://sys.stdout",
                },
            },
            "root": {"level": level, "handlers": ["console"]},
            "loggers": loggers,
        }

    @classmethod
    def configure(cls) -> None:
        config = cls.build()
        logging.config.dictConfig(config)
        logging.getLogger(__name__).debug(f"Logging configured: level={config['root']['level']}")

    @classmethod
    def set_module_level(cls, module_name: str, level: str) -> None:
        logging.getLogger(module_name).setLevel(level.upper())

    @classmethod
    def silence_module(cls, module_name: str) -> None:
        cls.set_module_level(module_name, "CRITICAL")


def setup_logging() -> None:
    """Apply logging configuration from the environment. Called on package import."""
    LoggingConfig.configure()


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)

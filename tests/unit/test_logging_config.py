"""Tests for environment-driven logging configuration."""

import logging

import pytest

from neo_membership.config.logging_config import LoggingConfig, get_log_level_from_verbosity

EXPANDER = "neo_membership.features.membership.services.group_expander"


@pytest.mark.parametrize("verbosity,level", [
    ("quiet", "ERROR"),
    ("NORMAL", "WARNING"),
    ("verbose", "INFO"),
    ("DEBUG", "DEBUG"),
    ("loud", "WARNING"),
])
def test_verbosity_levels(verbosity, level):
    assert get_log_level_from_verbosity(verbosity) == level


def test_log_level_overrides_verbosity():
    config = LoggingConfig.build({"LOG_LEVEL": "info", "LOG_VERBOSITY": "QUIET"})

    assert config["root"]["level"] == "INFO"
    assert config["handlers"]["console"]["level"] == "INFO"


def test_invalid_log_level_falls_back_to_verbosity():
    assert LoggingConfig.build({"LOG_LEVEL": "LOUD", "LOG_VERBOSITY": "VERBOSE"})["root"]["level"] == "INFO"


def test_directory_modules_quiet_by_default():
    loggers = LoggingConfig.build({"LOG_LEVEL": "INFO"})["loggers"]

    assert loggers[EXPANDER]["level"] == "WARNING"
    assert loggers["httpx"]["level"] == "ERROR"


def test_directory_logging_enabled():
    loggers = LoggingConfig.build({"LOG_LEVEL": "INFO", "ENABLE_DIRECTORY_LOGGING": "true"})["loggers"]

    assert EXPANDER not in loggers


def test_formats():
    detailed = LoggingConfig.build({"LOG_FORMAT": "detailed"})["formatters"]["default"]["format"]
    fallback = LoggingConfig.build({"LOG_FORMAT": "xml"})["formatters"]["default"]["format"]

    assert "%(lineno)d" in detailed
    assert fallback == "%(asctime)s - %(levelname)s - %(message)s"


def test_silence_module():
    LoggingConfig.silence_module("neo_membership.test_noise")

    assert logging.getLogger("neo_membership.test_noise").level == logging.CRITICAL

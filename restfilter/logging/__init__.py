"""Logging utilities for restfilter."""

from .config import (
    DEFAULT_LOG_FORMAT,
    PACKAGE_LOGGER_NAME,
    configure_logging,
    get_logging_config,
)

__all__ = [
    "DEFAULT_LOG_FORMAT",
    "PACKAGE_LOGGER_NAME",
    "configure_logging",
    "get_logging_config",
]

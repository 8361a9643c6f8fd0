"""Logging configuration for restfilter.

This module reads the logging settings from the environment and attaches a
console handler to the package logger.
"""

import logging
import os
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

PACKAGE_LOGGER_NAME = "restfilter"
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logging_config() -> Dict[str, Any]:
    """Get logging configuration from environment variables and defaults.

    Returns:
        Dictionary with logging configuration

    Environment Variables:
        RESTFILTER_LOG_ENABLED: Attach a console handler (default: "false")
        RESTFILTER_LOG_LEVEL: Level name for the package logger (default: "WARNING")
        RESTFILTER_LOG_FORMAT: Format string for the console handler
    """
    enabled = os.getenv("RESTFILTER_LOG_ENABLED", "false").lower() == "true"

    level_name = os.getenv("RESTFILTER_LOG_LEVEL", "WARNING").strip().upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        logger.warning(f"Invalid log level: {level_name}, using WARNING")
        level_name = "WARNING"
        level = logging.WARNING

    log_format = os.getenv("RESTFILTER_LOG_FORMAT", DEFAULT_LOG_FORMAT)

    return {
        "enabled": enabled,
        "level": level,
        "level_name": level_name,
        "format": log_format,
    }


def configure_logging(
    config: Optional[Dict[str, Any]] = None,
    level: Optional[int] = None,
) -> logging.Logger:
    """Configure the package logger.

    Calling this more than once does not add duplicate handlers.

    Args:
        config: Configuration dictionary (defaults to ``get_logging_config()``)
        level: Level override

    Returns:
        The configured package logger
    """
    if config is None:
        config = get_logging_config()

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(level if level is not None else config["level"])

    if not config.get("enabled", False):
        return package_logger

    formatter = logging.Formatter(config.get("format", DEFAULT_LOG_FORMAT))
    for handler in package_logger.handlers:
        if getattr(handler, "_restfilter_handler", False):
            handler.setFormatter(formatter)
            return package_logger

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    stream_handler._restfilter_handler = True  # type: ignore[attr-defined]
    package_logger.addHandler(stream_handler)
    return package_logger


__all__ = [
    "PACKAGE_LOGGER_NAME",
    "DEFAULT_LOG_FORMAT",
    "get_logging_config",
    "configure_logging",
]

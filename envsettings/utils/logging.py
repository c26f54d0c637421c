"""
Logging utilities with prefixed loggers for the settings registry.

Usage:
    from envsettings.utils.logging import get_logger

    logger = get_logger(__name__, prefix="Resolver")
    logger.info("Resolved 4 settings")  # Output: [Resolver] Resolved 4 settings

Nothing here ever formats a setting value; callers pass names and sources only.
"""

import logging
from typing import Optional, Union

PACKAGE_LOGGER = "envsettings"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class PrefixedLogger(logging.LoggerAdapter):
    """Logger adapter that adds a prefix to all log messages."""

    def __init__(self, logger: logging.Logger, prefix: str):
        super().__init__(logger, {})
        self.prefix = f"[{prefix}]"

    def process(self, msg, kwargs):
        return f"{self.prefix} {msg}", kwargs


class PackageStreamHandler(logging.StreamHandler):
    """Stream handler installed on the package logger by configure_logging()."""


def get_logger(name: str, prefix: Optional[str] = None) -> Union[logging.Logger, PrefixedLogger]:
    """
    Get a logger with an optional prefix.

    Args:
        name: Logger name (typically __name__)
        prefix: Optional prefix for all messages (e.g., "Settings", "Resolver")

    Returns:
        Logger instance (with prefix adapter if prefix is provided)
    """
    base_logger = logging.getLogger(name)

    if prefix:
        return PrefixedLogger(base_logger, prefix)

    return base_logger


def configure_logging(level: Union[int, str, None] = None) -> logging.Logger:
    """
    Attach a stream handler to the package logger and set its level.

    Safe to call more than once; the handler is only added the first time.

    Args:
        level: Logging level name or number. Defaults to RegistryConfig.log_level.

    Returns:
        The package logger
    """
    if level is None:
        from envsettings.config.settings import get_config
        level = get_config().log_level

    if isinstance(level, str):
        level = level.upper()

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)

    if not any(isinstance(h, PackageStreamHandler) for h in package_logger.handlers):
        handler = PackageStreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)

    return package_logger

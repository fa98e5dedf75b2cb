"""Centralized logging configuration for campusnav.

All modules obtain loggers through :func:`get_logger`; they become children
of the ``campusnav`` logger, which owns the only handler. Log records go to
stderr so route output on stdout stays clean.
"""

import logging
import os
import sys
from typing import Optional

ROOT_LOGGER_NAME = "campusnav"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Set once the campusnav logger has a handler attached
_ROOT_LOGGER_CONFIGURED = False


def _level_from_env(default: int) -> int:
    """Resolve ``CAMPUSNAV_LOG_LEVEL`` (a level name such as ``DEBUG``)."""
    name = os.environ.get("CAMPUSNAV_LOG_LEVEL")
    if not name:
        return default
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else default


def setup_root_logger(
    level: Optional[int] = None,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach a single handler to the ``campusnav`` logger.

    Subsequent calls are no-ops until :func:`reset_logging` is called.

    Args:
        level: Logging level. Defaults to ``CAMPUSNAV_LOG_LEVEL`` or INFO.
        format_string: Custom format string (optional).
        handler: Custom handler (optional, defaults to a stderr StreamHandler).
    """
    global _ROOT_LOGGER_CONFIGURED

    if _ROOT_LOGGER_CONFIGURED:
        return

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level if level is not None else _level_from_env(logging.INFO))
    root_logger.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root_logger.addHandler(handler)

    # Propagate so pytest's caplog sees campusnav records
    root_logger.propagate = True

    _ROOT_LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger that inherits the ``campusnav`` configuration.

    Args:
        name: Logger name, normally ``__name__`` of the calling module.

    Returns:
        Logger instance with level NOTSET so the parent level applies.
    """
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of the ``campusnav`` logger and its handlers."""
    setup_root_logger()
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    """Enable debug logging for the entire package."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Return to INFO level."""
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Drop handlers and forget the configuration (used by tests)."""
    global _ROOT_LOGGER_CONFIGURED
    _ROOT_LOGGER_CONFIGURED = False

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


setup_root_logger()

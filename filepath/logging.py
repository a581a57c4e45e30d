"""Package-wide logging setup for filepath.

Modules obtain loggers through ``get_logger(__name__)``; records flow through
the single ``filepath`` root logger configured here. Console output goes to
stderr so command output on stdout stays machine-readable.
"""

import logging
import sys
from typing import Optional, Union

ROOT_LOGGER_NAME = "filepath"

DEFAULT_FORMAT = "%(levelname)s | %(name)s | %(message)s"

_LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

_ROOT_LOGGER_CONFIGURED = False


def parse_level(level: Union[int, str, None]) -> int:
    """Translate a level name such as ``"debug"`` into a logging constant.

    Integers pass through unchanged; empty or unknown names map to INFO.
    """
    if isinstance(level, int):
        return level
    if not level:
        return logging.INFO
    return _LEVEL_MAP.get(level.strip().upper(), logging.INFO)


def setup_root_logger(
    level: Union[int, str] = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach one console handler to the ``filepath`` root logger.

    Repeated calls are no-ops until ``reset_logging()`` runs.

    Args:
        level: Logging level or level name (default: INFO).
        format_string: Custom format string (optional).
        handler: Custom handler (optional, defaults to a stderr StreamHandler).
    """
    global _ROOT_LOGGER_CONFIGURED

    if _ROOT_LOGGER_CONFIGURED:
        return

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(parse_level(level))
    root_logger.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stderr)

    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root_logger.addHandler(handler)

    # Propagate so pytest's caplog sees records
    root_logger.propagate = True

    _ROOT_LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger that inherits the ``filepath`` root configuration.

    Args:
        name: Logger name, normally ``__name__`` of the calling module.

    Returns:
        Logger instance with level NOTSET so the root level applies.
    """
    setup_root_logger()

    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: Union[int, str]) -> None:
    """Set the level of the root logger and its handlers.

    Args:
        level: Logging level or level name (e.g., logging.DEBUG, "warning").
    """
    setup_root_logger()

    level_int = parse_level(level)
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level_int)
    for handler in root_logger.handlers:
        handler.setLevel(level_int)


def enable_debug_logging() -> None:
    """Switch all filepath loggers to DEBUG."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Switch all filepath loggers back to INFO."""
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Drop handlers and forget prior setup (used by tests)."""
    global _ROOT_LOGGER_CONFIGURED
    _ROOT_LOGGER_CONFIGURED = False

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


setup_root_logger()

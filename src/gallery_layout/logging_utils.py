"""
Logging helpers for the gallery layout engine.

The engine itself only emits debug summaries; the CLI raises or lowers
the shared logger's level through :func:`set_verbosity`.
"""

import logging

LOGGER_NAME = "gallery_layout"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"

_VERBOSITY_LEVELS = {
    -1: logging.WARNING,
    0: logging.INFO,
    1: logging.DEBUG,
}


def setup_logger(
        name: str = LOGGER_NAME,
        level: int = logging.INFO,
        formatter: logging.Formatter | None = None,
        handler: logging.Handler | None = None,
) -> logging.Logger:
    """
    Return the named logger, attaching a stream handler on first use.

    A logger that already has handlers keeps them, so calling this twice
    with the same name never duplicates output. Only the level is
    updated on subsequent calls.

    Args:
        name: Logger name.
        level: Logging level (e.g., logging.INFO, logging.DEBUG).
        formatter: Formatter for a newly attached handler.
        handler: Handler to attach instead of a stderr stream handler.

    Returns:
        The configured logger.

    """
    log = logging.getLogger(name)
    log.setLevel(level)
    if log.handlers:
        return log

    handler = handler or logging.StreamHandler()
    handler.setFormatter(formatter or logging.Formatter(LOG_FORMAT))
    log.addHandler(handler)
    log.propagate = False
    return log


def set_verbosity(verbosity: int, name: str = LOGGER_NAME) -> int:
    """
    Map a CLI verbosity count onto a logging level and apply it.

    Negative values mean quiet, zero is the default and anything
    positive enables debug output. Returns the level that was set.
    """
    clamped = max(-1, min(1, verbosity))
    level = _VERBOSITY_LEVELS[clamped]
    logging.getLogger(name).setLevel(level)
    return level


# Shared logger used across modules
logger = setup_logger()

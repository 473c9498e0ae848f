"""Logging helpers for asciibits.

The library only creates loggers; handlers are installed by applications
(the asciibits CLI calls configure_logging).
"""

from __future__ import annotations

import logging
import sys

ROOT_LOGGER_NAME = "asciibits"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(message)s"
DATE_FORMAT = "%H:%M:%S"


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """Return a logger in the asciibits namespace.

    Args:
        name: Module name, usually ``__name__``

    Returns:
        Logger named ``name`` if it already lives under ``asciibits``,
        otherwise ``asciibits.<name>``
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach a stderr handler to the asciibits root logger.

    Calling this more than once does not add duplicate handlers.

    Args:
        verbose: Log at DEBUG if True, WARNING otherwise

    Returns:
        The configured asciibits root logger
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)

    for handler in logger.handlers:
        handler.setLevel(level)

    return logger

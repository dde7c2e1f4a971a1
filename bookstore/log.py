"""Logging setup for the bookstore package.

The package itself only creates loggers; the embedding application calls
``setup_logger`` once at startup to attach a handler.
"""

import logging
import sys

from .config import get_settings


def setup_logger(name: str = "bookstore", level: str | None = None) -> logging.Logger:
    """
    Configure and return a logger.

    Args:
        name: Logger name. Children such as ``bookstore.service`` propagate to it.
        level: Level name; defaults to ``Settings.log_level``.

    Returns:
        Configured logger. Calling again returns it unchanged.
    """
    log = logging.getLogger(name)
    if log.handlers:
        return log

    log.setLevel((level or get_settings().log_level).upper())
    fmt = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(fmt)
    log.addHandler(handler)
    return log

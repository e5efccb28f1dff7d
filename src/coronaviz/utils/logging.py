"""Logging setup for coronaviz.

Modules log through get_logger(__name__). Only the entry points (the vignette
page and the HTML export CLI) call configure_logging(); everywhere else the
records go wherever the host application sends them.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional, TextIO, Union

PACKAGE_LOGGER_NAME = "coronaviz"
LOG_LEVEL_ENV_VAR = "CORONAVIZ_LOG_LEVEL"
DEFAULT_LEVEL = logging.INFO

DEFAULT_FMT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
DEFAULT_DATEFMT = "%H:%M:%S"

# marks the handler installed by configure_logging() so a later call can replace it
_OWNED_ATTR = "_coronaviz_owned"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger inside the coronaviz hierarchy.

    None gives the package logger and module names under coronaviz are used
    as is. Any other name ("__main__", a notebook or script name) is nested
    under coronaviz so configure_logging() applies to it too.
    """
    if not name or name == PACKAGE_LOGGER_NAME:
        return logging.getLogger(PACKAGE_LOGGER_NAME)
    if name.startswith(PACKAGE_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{PACKAGE_LOGGER_NAME}.{name}")


def install_null_handler() -> logging.Logger:
    """Attach a NullHandler to the package logger once (done on import)."""
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
        logger.addHandler(logging.NullHandler())
    return logger


def resolve_level(level: Optional[Union[str, int]] = None) -> int:
    """Numeric level from an int, a level name or CORONAVIZ_LOG_LEVEL.

    Unset or unrecognized values give INFO (an unrecognized one is logged).
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV_VAR, "")
    if isinstance(level, int):
        return level
    text = str(level).strip().upper()
    if not text:
        return DEFAULT_LEVEL
    if text.isdigit():
        return int(text)
    value = logging.getLevelName(text)
    if isinstance(value, int):
        return value
    get_logger(__name__).warning(f"Unknown log level {level!r}, using INFO")
    return DEFAULT_LEVEL


def configure_logging(
    level: Optional[Union[str, int]] = None,
    *,
    stream: Optional[TextIO] = None,
    fmt: str = DEFAULT_FMT,
    datefmt: str = DEFAULT_DATEFMT,
) -> logging.Handler:
    """Send coronaviz records to a stream (stderr by default).

    A second call replaces the handler from the first one, so an entry point
    can change verbosity. Handlers added by the host application stay, and the
    root logger is never touched.

    Args:
        level: Level name or number; None reads CORONAVIZ_LOG_LEVEL.
        stream: Output stream, sys.stderr when None.
        fmt: Record format.
        datefmt: Timestamp format.

    Returns:
        The installed handler.
    """
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    resolved = resolve_level(level)

    for h in logger.handlers[:]:
        if getattr(h, _OWNED_ATTR, False):
            logger.removeHandler(h)
            h.close()

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(fmt=fmt, datefmt=datefmt))
    setattr(handler, _OWNED_ATTR, True)
    logger.addHandler(handler)
    logger.setLevel(resolved)
    return handler

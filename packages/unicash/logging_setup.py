"""Logging for the ``unicash`` package.

Modules get their logger from :func:`get_logger` with a ``unicash.<module>``
name and never attach handlers. Records stay silent (``NullHandler``) until
the CLI calls :func:`configure_logging` with the loaded :class:`Config`.
"""

from __future__ import annotations

import logging
import sys
from typing import IO

from .config import Config

PACKAGE_LOGGER = "unicash"
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# The handler installed by configure_logging, if any.
_handler: logging.Handler | None = None


def resolve_level(level: str | int | None) -> int:
    """Turn ``Config.log_level`` into a ``logging`` level.

    Accepts level names in any case (``"debug"``) or numbers (``"10"``).
    Unset or unrecognised values mean ``INFO``.
    """

    if level is None:
        return logging.INFO
    if isinstance(level, int):
        return level
    text = level.strip().upper()
    if text.isdigit():
        return int(text)
    named = logging.getLevelNamesMapping().get(text)
    return named if named is not None else logging.INFO


def configure_logging(config: Config, *, stream: IO[str] | None = None) -> logging.Logger:
    """Send package records to ``stream`` (stderr by default) at the configured level.

    Calling it again replaces the previous handler instead of adding a second.
    """

    global _handler
    logger = logging.getLogger(PACKAGE_LOGGER)
    for h in list(logger.handlers):
        if isinstance(h, logging.NullHandler) or h is _handler:
            logger.removeHandler(h)

    level = resolve_level(config.log_level)
    _handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    _handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(_handler)
    logger.setLevel(level)
    # The REPL owns the terminal; keep records off the root logger.
    logger.propagate = False
    return logger


def get_logger(name: str) -> logging.Logger:
    pkg = logging.getLogger(PACKAGE_LOGGER)
    if _handler is None and not pkg.handlers:
        pkg.addHandler(logging.NullHandler())
    return logging.getLogger(name)


__all__ = ["PACKAGE_LOGGER", "configure_logging", "get_logger", "resolve_level"]

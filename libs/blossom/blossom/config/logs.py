"""Logging setup for the ``blossom`` logger hierarchy."""

from __future__ import annotations

import logging
from pathlib import Path

from blossom.config.loader import LoggingConfig

LOGGER_NAME = "blossom"


def setup_logging(settings: LoggingConfig) -> logging.Handler:
    """Attach a handler to the ``blossom`` logger according to *settings*.

    A file target has its parent directory created. Any handler installed by
    an earlier call is replaced. Returns the new handler.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    handler: logging.Handler
    if settings.file:
        target = Path(settings.file)
        target.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(target, encoding="utf-8")
    else:
        handler = logging.StreamHandler()

    # Elapsed milliseconds since startup, like an uptime clock.
    fmt = "%(relativeCreated)10.3fms %(levelname)-7s "
    if settings.thread_names:
        fmt += "[%(threadName)s] "
    fmt += "%(name)s: %(message)s"
    handler.setFormatter(logging.Formatter(fmt))

    logger.addHandler(handler)
    logger.setLevel(settings.level)
    logger.propagate = False
    return handler

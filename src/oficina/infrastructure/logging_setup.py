"""Logging configuration for the command-line entry point."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: int = logging.WARNING) -> logging.Logger:
    """Send ``oficina.*`` records to stderr at *level*.

    Safe to call more than once: the previous handler is replaced.
    """
    logger = logging.getLogger("oficina")
    logger.setLevel(level)

    while logger.handlers:
        logger.removeHandler(logger.handlers[0])

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger

"""Logging configuration helpers."""

import logging


def configure_logging(level: str = "WARNING") -> None:
    """Configure application logging with a single stream handler."""
    logger = logging.getLogger("diet_tracker")
    logger.setLevel(level.upper())
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False

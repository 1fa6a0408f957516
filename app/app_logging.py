"""Logging configuration helpers."""

import logging


def configure_logging() -> None:
    """Install a single stream handler on the application logger."""
    logger = logging.getLogger("app")
    logger.setLevel(logging.INFO)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False

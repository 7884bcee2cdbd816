"""Logging configuration helpers."""

import logging

LOGGER_NAME = "snap_nutrition"


def configure_logging(level: int = logging.INFO) -> None:
    """Configure the package logger with a single stream handler."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False

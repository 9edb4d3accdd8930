#!/usr/bin/env python3
"""Logging configuration for the three-body simulator."""
import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: Optional[str] = None, name: str = "tribody") -> logging.Logger:
    """
    Attach a console handler to the package logger.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ...); defaults to INFO.
        name: Logger to configure; the package root so every module inherits it.

    Returns:
        The configured logger.
    """
    level_value = getattr(logging, (level or "INFO").upper(), logging.INFO)
    logger = logging.getLogger(name)
    logger.setLevel(level_value)

    if not any(getattr(h, "_tribody_console", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._tribody_console = True
        logger.addHandler(handler)
    for handler in logger.handlers:
        handler.setLevel(level_value)
    return logger

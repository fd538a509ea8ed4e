"""
Logging configuration and utilities.

This module provides:
- Centralized logger creation
- Consistent log formatting across modules
- Level control from the environment or the CLI
"""

from __future__ import annotations

import logging
import os

_PROJECT_LOGGER = "selector_extractor"




# ==== LOGGER FACTORY ==== #

def _level_from_name(name: str | None) -> int:
    """Map a level name such as 'DEBUG' to its numeric value (INFO if unknown)."""
    if not name:
        return logging.INFO

    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO




def get_logger(name: str) -> logging.Logger:
    """
    Get or create logger with standardized formatting.

    Args:
        name: Logger name (typically __name__ from calling module)

    Returns:
        Configured logging.Logger instance

    Format:
        YYYY-MM-DD HH:MM:SS,mmm LEVEL module.name message

    Note:
        Logger is configured only on first call for each name. The initial
        level comes from SELECTOR_EXTRACTOR_LOG_LEVEL (default INFO).
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(_level_from_name(os.getenv("SELECTOR_EXTRACTOR_LOG_LEVEL")))

    return logger




def set_log_level(level: str) -> None:
    """
    Apply a level to every project logger created so far.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ...)
    """
    numeric = _level_from_name(level)

    for name in list(logging.root.manager.loggerDict):
        if name == _PROJECT_LOGGER or name.startswith(_PROJECT_LOGGER + "."):
            logging.getLogger(name).setLevel(numeric)

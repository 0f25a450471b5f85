"""
Logging configuration for enrollment analysis.
Provides centralized logging setup.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from .config import LOG_LEVEL, LOG_FORMAT, LOG_FILE


def setup_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Set up a logger with a console handler and an optional file handler.

    The console handler writes to stderr so the report on stdout stays clean.
    A file handler is added only when ENROLLMENT_LOG_FILE is configured.

    Args:
        name: Name of the logger (typically __name__)
        level: Override for the configured log level

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level or LOG_LEVEL, logging.WARNING))
    logger.propagate = False

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(console_handler)

    if LOG_FILE:
        log_path = Path(LOG_FILE)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(file_handler)

    return logger


def set_package_log_level(level: str) -> None:
    """Change the level of every logger already created under this package."""
    package = __name__.rsplit(".", 1)[0]
    for name, existing in logging.Logger.manager.loggerDict.items():
        if name == package or name.startswith(package + "."):
            if isinstance(existing, logging.Logger):
                existing.setLevel(getattr(logging, level.upper(), logging.WARNING))

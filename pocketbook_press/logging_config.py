"""
Logging setup for the pocketbook_press package.

Usage:
    setup_logger()  # once, from the entry point
    from pocketbook_press.logging_config import get_logger
    logger = get_logger(__name__)
"""
import logging
import os

PACKAGE_LOGGER = "pocketbook_press"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVEL_ENV = "POCKETBOOK_LOG_LEVEL"


def setup_logger(level: str = None) -> logging.Logger:
    """
    Configure the package logger once and return it.

    Args:
        level: Level name. If None, read from POCKETBOOK_LOG_LEVEL (default WARNING).
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    level_name = (level or os.environ.get(LOG_LEVEL_ENV, "WARNING")).upper()
    logger.setLevel(getattr(logging, level_name, logging.WARNING))

    # Avoid adding handlers multiple times
    if logger.handlers:
        return logger

    console = logging.StreamHandler()
    console.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(console)
    return logger


def get_logger(name: str = None) -> logging.Logger:
    """Logger under the package namespace. Handlers are left to setup_logger."""
    return logging.getLogger(name or PACKAGE_LOGGER)

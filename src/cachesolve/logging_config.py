"""
Logging Configuration
Sets up the package logger for applications using cachesolve.
"""
import logging
import sys
from typing import Optional

from cachesolve.config import DEFAULT_LOG_LEVEL, LOG_DATE_FORMAT, LOG_FORMAT, LOGGER_NAME


def setup_logging(level: Optional[int] = None, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the logger for the 'cachesolve' namespace.

    The library never calls this itself; applications opt in.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO). Defaults to
            config.DEFAULT_LOG_LEVEL.
        log_file: Optional path to save logs to a file.

    Returns:
        The configured package logger.
    """
    if level is None:
        level = DEFAULT_LOG_LEVEL

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Repeated setup must not duplicate output
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    # 1. Console Handler (stdout)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # 2. File Handler (Optional)
    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info("Logging initialized.")
    return logger

"""
Configuration & Constants
=========================
This module serves as the central registry for global constants.

Why is this file needed?
------------------------
1. Abstraction: It keeps the logger namespace and message format in one place
   instead of repeating them in every module.
2. Deployment: It lets the default logging level be changed through the
   environment without touching the code.

Exports:
    LOGGER_NAME (str): Namespace of the package logger.
    LOG_FORMAT (str): Format string for log records.
    LOG_DATE_FORMAT (str): Time format for log records.
    DEFAULT_LOG_LEVEL (int): Level used by setup_logging when none is given.
"""
import logging
import os


def get_log_level(name: str | None = None) -> int:
    """
    Resolve a logging level from its name, e.g. "DEBUG".

    Falls back to the CACHESOLVE_LOG_LEVEL environment variable and then to INFO.
    Unknown names resolve to INFO.
    """
    if name is None:
        name = os.environ.get("CACHESOLVE_LOG_LEVEL", "INFO")

    level = logging.getLevelName(name.strip().upper())
    if isinstance(level, int):
        return level
    return logging.INFO


# Global Constants
LOGGER_NAME: str = "cachesolve"
LOG_FORMAT: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT: str = '%H:%M:%S'
DEFAULT_LOG_LEVEL: int = get_log_level()

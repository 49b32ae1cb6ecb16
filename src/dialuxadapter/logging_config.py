"""
Logging Configuration
Sets up the package logger for the converter and its command-line interface.

The level comes from, in order of precedence: the explicit argument (CLI),
the DIALUXADAPTER_LOG_LEVEL environment variable, then config.DEFAULT_LOG_LEVEL.
"""
import logging
import os
import sys
from typing import Optional, Union

from dialuxadapter.config import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV

PACKAGE_LOGGER = "dialuxadapter"


def resolve_level(level: Optional[Union[int, str]] = None) -> int:
    """
    Turn a level name or number into a logging level.

    Args:
        level: e.g. logging.DEBUG, "debug" or "20". None falls back to the
            environment variable, then to the configured default.

    Raises:
        ValueError: If the name is not a known logging level.
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL
    if isinstance(level, int):
        return level

    name = level.strip().upper()
    if name.isdigit():
        return int(name)
    value = logging.getLevelName(name)
    if not isinstance(value, int):
        raise ValueError(f"Unknown logging level '{level}'.")
    return value


def setup_logging(level: Optional[Union[int, str]] = None, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the logger for the 'dialuxadapter' namespace.

    Host-resolution failures during a reverse conversion are ERROR records on
    this logger, so a batch keeps running and the misses still get reported.

    Args:
        level: Logging level or level name; see `resolve_level`.
        log_file: Optional path to save logs to a file.

    Returns:
        The configured package logger.
    """
    resolved = resolve_level(level)
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(resolved)

    # Drop our own handlers from a previous call (CLI invoked repeatedly in one process)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(resolved)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(resolved)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug(f"Logging initialized at level {logging.getLevelName(resolved)}.")
    return logger

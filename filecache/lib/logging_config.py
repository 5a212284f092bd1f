#!/usr/bin/env python3
"""
Centralized logging configuration for the file cache service.
Cloud Functions picks up anything written to stderr, so a single
stream handler on the root logger is all we need.
"""

import logging
import os
import sys

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

LEVELS = {
    'DEBUG': logging.DEBUG,
    'INFO': logging.INFO,
    'WARNING': logging.WARNING,
    'ERROR': logging.ERROR,
    'CRITICAL': logging.CRITICAL,
}


def get_log_level_from_env() -> int:
    """
    Resolve the LOG_LEVEL environment variable to a logging constant.

    Unknown values fall back to INFO and emit a warning.
    """
    raw_level = os.environ.get('LOG_LEVEL', 'INFO')
    level = LEVELS.get(raw_level.upper())

    if level is None:
        logging.getLogger(__name__).warning(
            f"Invalid LOG_LEVEL value '{raw_level}'. "
            f"Valid values are: {', '.join(LEVELS)}. Defaulting to INFO."
        )
        return logging.INFO

    return level


def setup_logging(force: bool = False) -> None:
    """
    Configure the root logger once per process.

    Args:
        force: Drop existing handlers and reconfigure. Without it, a root
               logger that already has handlers only gets its level refreshed.
    """
    root_logger = logging.getLogger()
    log_level = get_log_level_from_env()

    if root_logger.handlers and not force:
        root_logger.setLevel(log_level)
        return

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level)

    logging.getLogger(__name__).debug(
        f"Logging configured with level: {logging.getLevelName(log_level)}"
    )

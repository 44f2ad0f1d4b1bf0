# core/logger.py

"""Logging configuration for the Roster Manager."""

import logging
import os
import sys
from typing import Optional

import core.config as config

_logger: Optional[logging.Logger] = None


def setup_logger() -> logging.Logger:
    """
    Sets up and returns the application logger.

    Log records always go to `config.LOG_FILE`. Console output is only enabled in debug mode,
    so that regular command feedback is not interleaved with log lines.

    Returns:
        logging.Logger: The configured application logger.
    """
    global _logger
    if _logger:
        return _logger

    logger = logging.getLogger("RosterManager")
    logger.setLevel(config.LOG_LEVEL)

    if not logger.handlers:
        formatter = logging.Formatter(config.LOG_FORMAT)

        if config.DEBUG:
            ch = logging.StreamHandler(sys.stderr)
            ch.setLevel(config.LOG_LEVEL)
            ch.setFormatter(formatter)
            logger.addHandler(ch)

        try:
            log_dir = os.path.dirname(config.LOG_FILE)
            if log_dir and not os.path.exists(log_dir):
                os.makedirs(log_dir)

            fh = logging.FileHandler(config.LOG_FILE, mode="a", encoding="utf-8")
            fh.setLevel(config.LOG_LEVEL)
            fh.setFormatter(formatter)
            logger.addHandler(fh)
        except OSError as e:
            # continue without file logging
            logger.addHandler(logging.NullHandler())
            logger.warning(f"Failed to create file handler for {config.LOG_FILE}: {e}")

    _logger = logger
    logger.debug("Logger initialized in DEBUG mode.")

    return logger


def get_logger() -> logging.Logger:
    """Returns the singleton logger instance, setting it up if necessary."""
    if _logger is None:
        return setup_logger()
    return _logger

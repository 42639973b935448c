# -*- coding: utf-8 -*-
"""
Logging configuration for StepForm.

All modules log through children of the "stepform" logger:
- rotating file at Config.LOG_PATH, level Config.FILE_LOG_LEVEL
- stdout, level Config.CONSOLE_LOG_LEVEL
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

APP_LOGGER_NAME = "stepform"

# Will be set by setup_logger
_logger: Optional[logging.Logger] = None


def _level(name: str, fallback: int) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else fallback


def setup_logger(log_path: Optional[Path] = None) -> logging.Logger:
    """
    Setup the StepForm logger with file and console handlers.

    Args:
        log_path: Log file to write to instead of Config.LOG_PATH
    """
    global _logger

    # Import here to avoid circular imports
    from app.config import Config

    log_path = Path(log_path) if log_path is not None else Config.LOG_PATH
    log_path.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(APP_LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    # Re-running setup replaces the handlers instead of duplicating them
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    file_handler = RotatingFileHandler(
        log_path,
        maxBytes=Config.LOG_MAX_BYTES,
        backupCount=Config.LOG_BACKUP_COUNT,
        encoding="utf-8"
    )
    file_handler.setLevel(_level(Config.FILE_LOG_LEVEL, logging.DEBUG))
    file_handler.setFormatter(logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    ))
    logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(_level(Config.CONSOLE_LOG_LEVEL, logging.INFO))
    console_handler.setFormatter(logging.Formatter("%(levelname)-8s | %(message)s"))
    logger.addHandler(console_handler)

    _logger = logger
    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a child of the StepForm logger for a module.
    """
    global _logger

    if _logger is None:
        _logger = setup_logger()

    return _logger.getChild(name)

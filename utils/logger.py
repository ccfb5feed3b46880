# -*- coding: utf-8 -*-
"""
Logging configuration for the BEP generator.

All modules log through children of the ``bepgen`` logger:

    logger = get_logger(__name__)
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

ROOT_LOGGER_NAME = "bepgen"

# Will be set by setup_logger
_logger: Optional[logging.Logger] = None


def setup_logger(
    log_path: Optional[Path] = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG
) -> logging.Logger:
    """
    Setup application logger with a rotating file handler and a console handler.

    Args:
        log_path: Log file location (default: Config.LOG_PATH)
        console_level: Minimum level echoed to stdout
        file_level: Minimum level written to the log file

    Returns:
        The configured ``bepgen`` logger
    """
    global _logger

    # Import here to avoid circular imports
    from app.config import Config

    log_path = Path(log_path) if log_path else Config.LOG_PATH
    log_path.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(min(console_level, file_level))

    # Re-running setup must not stack handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    file_handler = RotatingFileHandler(
        log_path,
        maxBytes=Config.LOG_MAX_BYTES,
        backupCount=Config.LOG_BACKUP_COUNT,
        encoding="utf-8"
    )
    file_handler.setLevel(file_level)
    file_handler.setFormatter(logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt=Config.DATETIME_FORMAT
    ))
    logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter("%(levelname)-8s | %(name)s | %(message)s"))
    logger.addHandler(console_handler)

    _logger = logger
    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a child logger for a module, configuring the root on first use.
    """
    global _logger

    if _logger is None:
        _logger = setup_logger()

    # Strip the package path so records read "bepgen.bep_reducer"
    short_name = name.rsplit(".", 1)[-1] if name != "__main__" else "main"
    return _logger.getChild(short_name)

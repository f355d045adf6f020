"""
Centralized logging configuration.

Importing this module only attaches a console handler. File logging is
opt-in through add_file_handler(), which the CLI calls when a log file
is configured.
"""
import logging
import logging.handlers
from pathlib import Path
from .constants import (
    LOG_LEVEL, LOG_FORMAT, LOG_FILE,
    LOG_MAX_SIZE_MB, LOG_BACKUP_COUNT
)

ROOT_LOGGER_NAME = 'plan_export'


def setup_logger(name: str = None) -> logging.Logger:
    """
    Get or create a logger with a console handler.

    Usage:
        from config.logging_config import setup_logger
        logger = setup_logger('plan_export')

    Args:
        name: Logger name. If None, uses 'plan_export'.

    Returns:
        Configured logging.Logger instance.
    """
    logger = logging.getLogger(name or ROOT_LOGGER_NAME)

    # Avoid adding handlers multiple times
    if logger.handlers:
        return logger

    logger.setLevel(getattr(logging, LOG_LEVEL))

    console = logging.StreamHandler()
    console.setLevel(logging.INFO)
    console.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(console)
    return logger


def add_file_handler(log_file: str = LOG_FILE, name: str = None) -> logging.Handler:
    """
    Attach a rotating DEBUG file handler to the 'plan_export' logger.

    Returns the existing handler when one already writes to log_file.

    Raises:
        ValueError: log_file is empty
    """
    if not log_file:
        raise ValueError("log_file must be a path")

    logger = setup_logger(name)
    log_path = Path(log_file).resolve()

    for handler in logger.handlers:
        if isinstance(handler, logging.FileHandler) and Path(handler.baseFilename) == log_path:
            return handler

    log_path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=LOG_MAX_SIZE_MB * 1024 * 1024,
        backupCount=LOG_BACKUP_COUNT,
        encoding='utf-8',
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(file_handler)
    return file_handler


def get_logger(name: str = None) -> logging.Logger:
    """
    Return a logger under the 'plan_export' hierarchy.

    Usage:
        from config.logging_config import get_logger
        logger = get_logger(__name__)
    """
    setup_logger(ROOT_LOGGER_NAME)
    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(ROOT_LOGGER_NAME + '.'):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


# Singleton logger for quick imports
# Usage: from config.logging_config import logger
logger = setup_logger(ROOT_LOGGER_NAME)

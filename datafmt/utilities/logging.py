"""
Logging setup for datafmt
Console output always, rotating log files when a log directory is configured
"""

import logging
import os
from logging.handlers import RotatingFileHandler

from datafmt.config import LOG_DIR, LOG_LEVEL

LOG_FORMAT = "[%(asctime)s] %(levelname)-8s [%(name)s:%(lineno)d] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_initialized = False


def setup_logging(log_level: str | None = None, log_dir: str | None = None) -> logging.Logger:
    """
    Configure the root logger once per process

    Args:
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL (defaults to DATAFMT_LOG_LEVEL)
        log_dir: Directory for log files (defaults to DATAFMT_LOG_DIR; console only if unset)

    Returns:
        The root logger
    """
    global _initialized

    root_logger = logging.getLogger()
    if _initialized:
        return root_logger

    level_name = (log_level or LOG_LEVEL).upper()
    level = getattr(logging, level_name, logging.INFO)
    log_dir = log_dir or LOG_DIR

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

        file_handler = RotatingFileHandler(
            os.path.join(log_dir, "datafmt.log"),
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
        )
        file_handler.setLevel(logging.DEBUG)  # Always log DEBUG to file
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

        error_handler = RotatingFileHandler(
            os.path.join(log_dir, "datafmt_errors.log"),
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=3,
        )
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(formatter)
        root_logger.addHandler(error_handler)

    root_logger.setLevel(level)

    # Access logs are noisy at DEBUG
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    _initialized = True
    root_logger.debug(f"Logging configured (level={level_name}, dir={log_dir or '-'})")
    return root_logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a specific module

    Args:
        name: Logger name (usually __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)

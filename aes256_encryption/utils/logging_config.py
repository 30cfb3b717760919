"""
Centralized logging configuration for the AES256 encryption helper.

This module provides a unified logging setup that can be imported and used
throughout the package, ensuring consistent logging behavior.
"""

import logging
import logging.handlers
import sys
from typing import Optional
import os


def setup_logging(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    log_format: Optional[str] = None,
    max_files: Optional[int] = None
) -> None:
    """
    Set up centralized logging configuration.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path for logging
        log_format: Optional custom log format
        max_files: Maximum number of log files to keep (for rotation)
    """
    # Import config here to avoid circular imports
    from aes256_encryption.config import config as app_config

    level = level or app_config.logging.level
    log_file = log_file if log_file is not None else app_config.logging.log_file
    log_format = log_format or app_config.logging.format
    max_files = max_files if max_files is not None else app_config.logging.max_files
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    formatter = logging.Formatter(log_format)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Clear any existing handlers
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=app_config.logging.max_file_size * 1024 * 1024,
            backupCount=max_files
        )
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    logger = logging.getLogger(__name__)
    logger.info("Logging configured with level: %s", level)
    if log_file:
        logger.info("Logging to file: %s", log_file)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the specified name.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)

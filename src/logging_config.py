"""
Logging configuration for the IPUZ importer.
Console plus rotating-file logging for applications embedding the importer.
"""
#
# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

import logging
import os
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler

from config import LoggingConfig

FILE_FORMAT = "%(asctime)s - %(levelname)-8s - %(name)s:%(lineno)d - %(funcName)s - %(message)s"
FILE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
CONSOLE_FORMAT = "%(levelname)-8s - %(message)s"

MAX_LOG_BYTES = 10 * 1024 * 1024
LOG_BACKUP_COUNT = 5


def log_file_path(output_dir: str, prefix: str) -> str:
    """Timestamped log file path inside output_dir."""
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return os.path.join(output_dir, f"{prefix}_{timestamp}.log")


def _file_handler(path: str) -> logging.Handler:
    handler = RotatingFileHandler(
        path,
        maxBytes=MAX_LOG_BYTES,
        backupCount=LOG_BACKUP_COUNT,
        encoding='utf-8'
    )
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, FILE_DATE_FORMAT))
    return handler


def _console_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    return handler


def setup_logging(
    output_dir: str = LoggingConfig.directory,
    log_level: str = LoggingConfig.level,
    log_file_prefix: str = LoggingConfig.file_prefix,
    enable_console: bool = LoggingConfig.enable_console,
) -> str:
    """
    Route all log records to a rotating DEBUG log file and, optionally,
    to stdout at log_level.

    Defaults match LoggingConfig. Handlers from a previous call are
    replaced.

    Returns:
        Path to the log file
    """
    os.makedirs(output_dir, exist_ok=True)
    log_path = log_file_path(output_dir, log_file_prefix)
    console_level = getattr(logging, log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.handlers.clear()

    root_logger.addHandler(_file_handler(log_path))
    if enable_console:
        root_logger.addHandler(_console_handler(console_level))

    logger = logging.getLogger(__name__)
    logger.info(f"IPUZ importer logging to {log_path}")
    logger.debug(f"Console level: {log_level if enable_console else 'disabled'}")

    return log_path


def setup_logging_from_config(config: LoggingConfig) -> str:
    """Configure logging from the 'logging' section of an ImporterConfig."""
    return setup_logging(
        output_dir=config.directory,
        log_level=config.level,
        log_file_prefix=config.file_prefix,
        enable_console=config.enable_console,
    )


def get_logger(name: str) -> logging.Logger:
    """Logger for a module, typically called with __name__."""
    return logging.getLogger(name)

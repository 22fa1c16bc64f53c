"""
Logging setup and utilities for the assistant.
"""

import logging
import os
import sys
from typing import Optional, Dict

import colorlog

from karu_assistant.config import Config

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Store loggers to prevent duplicates
_loggers: Dict[str, logging.Logger] = {}

def setup_logger(logger_name: str, log_file: Optional[str] = None) -> logging.Logger:
    """
    Set up and configure a logger with colored console output.

    Args:
        logger_name (str): Name of the logger
        log_file (Optional[str], optional): Path to log file. Defaults to Config.LOG_FILE.

    Returns:
        logging.Logger: Configured logger
    """
    # Return existing logger if already configured
    if logger_name in _loggers:
        return _loggers[logger_name]

    # Create logger and set propagate to False to prevent double logging
    logger = logging.getLogger(logger_name)
    logger.setLevel(logging.getLevelName(Config.LOG_LEVEL.upper()))
    logger.propagate = False

    # Remove existing handlers if any (to prevent duplicate handlers)
    if logger.handlers:
        logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    if sys.stderr.isatty():  # Colors only in a terminal
        console_handler.setFormatter(colorlog.ColoredFormatter(
            "%(log_color)s" + LOG_FORMAT + "%(reset)s",
            datefmt=DATE_FORMAT,
            log_colors={
                'DEBUG': 'cyan',
                'INFO': 'green',
                'WARNING': 'yellow',
                'ERROR': 'red',
                'CRITICAL': 'red,bg_white',
            },
            style='%'
        ))
    else:
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    logger.addHandler(console_handler)

    # File handler if specified
    log_file = log_file or Config.LOG_FILE
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        # Plain formatter for file (no colors in files)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(file_handler)

    _loggers[logger_name] = logger
    return logger


def clear_loggers():
    """
    Clear all configured loggers.
    Useful for testing or when reloading configuration.
    """
    for logger_name, logger in _loggers.items():
        for handler in logger.handlers[:]:
            handler.close()
            logger.removeHandler(handler)
    _loggers.clear()

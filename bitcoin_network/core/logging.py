"""
File for logging
"""
import logging
import sys
from pathlib import Path
from typing import Optional

from bitcoin_network.core.formats import LOGGING

__all__ = ["get_logger"]


def get_logger(name: str, log_level: Optional[str] = None, log_file: Optional[Path] = None,
               format_string: Optional[str] = None) -> logging.Logger:
    """
    Get or create a logger for a bitcoin_network module.

    Args:
        name: Logger name (typically __name__ from calling module)
        log_level: Logging level name; LOGGING.LEVEL when not given
        log_file: Optional path to log file for persistent logging
        format_string: Optional custom format string, LOGGING.FORMAT otherwise

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Prevent adding duplicate handlers
    if logger.handlers:
        return logger

    logger.setLevel(getattr(logging, (log_level or LOGGING.LEVEL).upper()))
    formatter = logging.Formatter(format_string or LOGGING.FORMAT)

    console_handler = logging.StreamHandler(stream=sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger

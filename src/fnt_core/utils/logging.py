"""
Logging utilities.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

from ..config import get_config


def setup_logging(
    log_file: Optional[str] = None,
    level: Optional[Union[int, str]] = None,
    format_string: str = None,
    name: str = 'fnt_core'
) -> logging.Logger:
    """
    Set up logging configuration.

    Args:
        log_file: Path to log file (if None, only console output)
        level: Logging level (defaults to the configured log_level)
        format_string: Custom format string
        name: Logger name (defaults to the package logger)

    Returns:
        Configured logger
    """
    if format_string is None:
        format_string = '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s'

    if level is None:
        level = get_config().log_level
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    logger.handlers = []

    formatter = logging.Formatter(format_string, datefmt='%Y-%m-%d %H:%M:%S')

    # Console handler: warnings and above only
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(max(level, logging.WARNING))
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


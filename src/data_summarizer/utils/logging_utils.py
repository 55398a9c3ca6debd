"""
Logging utilities for the data summarizer.
Console output is colorized with colorlog; a log file can be added for batch runs.
"""

import logging
import sys
from pathlib import Path
from typing import Optional
import colorlog

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

LOG_COLORS = {
    'DEBUG': 'cyan',
    'INFO': 'green',
    'WARNING': 'yellow',
    'ERROR': 'red',
    'CRITICAL': 'red,bg_white',
}


def setup_logger(
    name: str,
    log_file: Optional[str] = None,
    level: str = "INFO",
    colorize: bool = True
) -> logging.Logger:
    """
    Set up a logger with a console handler and an optional file handler.

    Args:
        name: Logger name (typically __name__ of the calling module)
        log_file: Path to log file (optional)
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        colorize: Whether to colorize console output

    Returns:
        Configured logger instance

    Example:
        >>> logger = setup_logger("data_summarizer", log_file="logs/summarizer.log")
        >>> logger.info("Summarizing upload")
    """
    logger = logging.getLogger(name)
    logger.setLevel(resolve_level(level))

    # Replace handlers so repeated setup does not duplicate output
    logger.handlers = []

    plain_formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    if colorize:
        console_formatter = colorlog.ColoredFormatter(
            '%(log_color)s' + LOG_FORMAT,
            datefmt=DATE_FORMAT,
            log_colors=LOG_COLORS
        )
    else:
        console_formatter = plain_formatter

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path)
        file_handler.setFormatter(plain_formatter)
        logger.addHandler(file_handler)

    return logger


def resolve_level(level: str) -> int:
    """Map a level name to its number, falling back to INFO for unknown names."""
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger inside the ``data_summarizer`` hierarchy.

    Only a NullHandler is attached to the package root logger; output is
    left to the embedding application, or to setup_logger in the CLI.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    root = logging.getLogger(name.split('.')[0])

    if not root.handlers:
        root.addHandler(logging.NullHandler())

    return logging.getLogger(name)

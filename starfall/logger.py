"""Logging for the game: one application log file plus the console."""

import logging
import os
from typing import Optional

from starfall.config import LOG_DIR, LOG_LEVEL

LOG_FILE_NAME = "application.log"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
CONSOLE_FORMAT = "%(levelname)s: %(message)s"

LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def parse_log_level(name: str) -> int:
    """Turn a level name such as ``"debug"`` into its logging constant.

    Raises:
        ValueError: If the name is not one of LEVEL_NAMES.
    """
    level_name = name.strip().upper()
    if level_name not in LEVEL_NAMES:
        raise ValueError(f"Unknown log level: {name}")
    return logging.getLevelName(level_name)


def setup_logger(log_level: int = LOG_LEVEL, log_dir: str = LOG_DIR, console: bool = True) -> str:
    """Route every starfall logger through the root logger.

    Calling it again replaces the previous handlers, so the CLI can override
    the level chosen at import time.

    Args:
        log_level: Level for the root logger
        log_dir: Directory holding the application log
        console: Also echo records to stderr

    Returns:
        str: Path of the log file
    """
    os.makedirs(log_dir, exist_ok=True)
    log_path = os.path.join(log_dir, LOG_FILE_NAME)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    file_handler = logging.FileHandler(log_path)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
    root_logger.addHandler(file_handler)

    if console:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        root_logger.addHandler(console_handler)

    return log_path


def get_logger(name: Optional[str] = None) -> logging.Logger:
    return logging.getLogger(name)


setup_logger()

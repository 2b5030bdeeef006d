"""Utility functions for dataverse-schema-generator."""

import sys
from pathlib import Path
from typing import Optional, Union

from loguru import logger


def setup_logging(
    log_level: str = "INFO",
    log_file: Optional[Union[str, Path]] = None,
    console: bool = True,
) -> None:
    """Configure logging for the application.

    Args:
        log_level: Minimum level for all sinks (DEBUG, INFO, WARNING, ...)
        log_file: Optional file path; written with rotation and retention
        console: Whether to log to stderr
    """
    # Remove default handler and any existing handlers
    logger.remove()

    if console:
        logger.add(sys.stderr, level=log_level, backtrace=True, diagnose=True, colorize=True)

    if log_file:
        log_path = Path(log_file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            str(log_path),
            level=log_level,
            rotation="10 MB",
            retention="10 days",
            backtrace=True,
            diagnose=True,
            enqueue=True,
            colorize=False,
        )

    logger.debug(f"Logging configured at level {log_level}")

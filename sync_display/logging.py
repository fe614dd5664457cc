"""
Logging configuration for Sync Display.

The package logs through loguru. Output from ``sync_display`` is disabled
on import so the library stays silent until an application opts in with
``setup_logging``.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from loguru import logger


PACKAGE_NAME = 'sync_display'

# Default log directory
LOG_DIR = Path('./logs')

logger.disable(PACKAGE_NAME)


def setup_logging(log_dir: Optional[Path] = None, level: str = 'DEBUG') -> Any:
    """Enable package logging to a rotating file.

    Args:
        log_dir: Directory for log files. Defaults to ./logs
        level: Minimum level written to the log file

    Returns:
        The configured loguru logger
    """
    if log_dir is None:
        log_dir = LOG_DIR

    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / 'sync_display.log'

    logger.add(
        log_path,
        rotation='5 MB',
        retention='30 days',
        compression='gz',
        format='{time:YYYY-MM-DD HH:mm:ss} | {level:<8} | {name}:{function}:{line} | {message}',
        level=level,
        filter=PACKAGE_NAME,
    )
    logger.enable(PACKAGE_NAME)
    return logger

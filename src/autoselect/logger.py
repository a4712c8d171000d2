"""Logging for autoselect, built on loguru.

The TUI owns the terminal, so records go to a rotating file by default.
Each module binds a name with ``get_logger`` and the format shows it.
"""

import os
import sys
from typing import Optional

from loguru import logger

from autoselect.utils import get_project_root

DEFAULT_LOG_NAME = "autoselect.log"

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {extra[name]}:{function}:{line} - {message}"
CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan> - <level>{message}</level>"
)

# Sink path of the last setup_logger() call; reused when none is given
_log_file_path: Optional[str] = None


def _resolve_log_file(log_file: Optional[str]) -> str:
    global _log_file_path

    if log_file is None:
        return _log_file_path or os.path.join(get_project_root(), DEFAULT_LOG_NAME)
    if not os.path.isabs(log_file):
        log_file = os.path.join(get_project_root(), log_file)
    _log_file_path = log_file
    return log_file


def setup_logger(
    log_file: Optional[str] = None,
    log_level: str = "INFO",
    rotation: str = "10 MB",
    retention: str = "7 days",
    compression: str = "zip",
    console_output: bool = False,
) -> None:
    """
    Replace every loguru sink with the autoselect file sink.

    Args:
        log_file: Log file path, relative paths resolve against the project root
        log_level: Minimum level written (DEBUG shows controller transitions)
        rotation: Size at which the file rotates
        retention: Age after which rotated files are removed
        compression: Format rotated files are compressed to
        console_output: Also log to stderr (only useful outside the TUI)
    """
    path = _resolve_log_file(log_file)

    logger.remove()
    if console_output:
        logger.add(sys.stderr, level=log_level, format=CONSOLE_FORMAT, colorize=True)
    logger.add(
        path,
        level=log_level,
        format=FILE_FORMAT,
        rotation=rotation,
        retention=retention,
        compression=compression,
        encoding="utf-8",
    )


def get_logger(name: Optional[str] = None):
    """Return the shared logger bound to ``name``."""
    return logger.bind(name=name or "autoselect")


# Records logged without get_logger() still carry a name
logger.configure(extra={"name": "autoselect"})

setup_logger()

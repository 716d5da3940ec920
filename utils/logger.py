# utils/logger.py
"""
Logging configuration for AreaScope.

Modules obtain their logger with get_logger(__name__). The application
calls setup_logging once at session start (see controllers.session) to
route everything to a rotating log file, with warnings echoed to stderr.
"""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional, Union

from constants import (
    APP_NAME,
    CONFIG_DIR_NAME,
    LOG_BACKUP_COUNT,
    LOG_DATE_FORMAT,
    LOG_FILE_NAME,
    LOG_FORMAT,
    LOG_MAX_BYTES
)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

_loggers = {}


def resolve_level(level: Union[int, str]) -> int:
    """Accept a logging constant or one of LOG_LEVELS (any case)."""
    if isinstance(level, int) and not isinstance(level, bool):
        return level
    name = str(level).strip().upper()
    if name not in LOG_LEVELS:
        raise ValueError(f"Unknown log level: {level!r}")
    return getattr(logging, name)


def setup_logging(log_dir: Optional[str] = None, level: Union[int, str] = logging.INFO) -> Path:
    """
    Attach a rotating file handler and a stderr handler to the root logger.

    Handlers from an earlier call are replaced, so calling this again
    (e.g. after the user changes the log level) does not duplicate output.

    Args:
        log_dir: Directory for the log file; ~/.areascope/logs if None
        level: Level for the root logger and the file handler

    Returns:
        Path of the log file
    """
    level = resolve_level(level)
    log_dir = Path(log_dir) if log_dir else Path.home() / CONFIG_DIR_NAME / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    formatter = logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT)
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    file_handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=LOG_MAX_BYTES,
        backupCount=LOG_BACKUP_COUNT,
        encoding='utf-8'
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(max(level, logging.WARNING))
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    root_logger.info(f"{APP_NAME} logging to {log_file} at {logging.getLevelName(level)}")
    return log_file


def get_logger(name: str) -> logging.Logger:
    if name not in _loggers:
        _loggers[name] = logging.getLogger(name)
    return _loggers[name]


def log_exception(logger: logging.Logger, exc: Exception, context: Optional[str] = None) -> None:
    """Log exc with its traceback; must be called from an except block."""
    where = f" during {context}" if context else ""
    logger.exception(f"Exception occurred{where}: {type(exc).__name__}: {exc}")

"""Logging setup for the scraper: stderr always, dated log file optionally.

Command output owns stdout, log lines never go there.
"""

import logging
import sys
from datetime import date
from pathlib import Path

from src.settings import settings

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_LOG_DATE_FORMAT = "%H:%M:%S"
_CONFIGURED: dict[str, logging.Logger] = {}


def setup_logger(
    name: str,
    level: int | str | None = None,
    log_dir: Path | None = None,
    to_file: bool | None = None,
) -> logging.Logger:
    """Return a configured logger, building it on first request.

    Unset arguments fall back to ``settings.logging``.

    Args:
        name: Dotted logger name (e.g., 'imdb.movie').
        level: Logging level, numeric or by name.
        log_dir: Directory for the dated log file.
        to_file: Whether to attach a file handler.

    Returns:
        Configured logger instance.
    """
    if name in _CONFIGURED:
        return _CONFIGURED[name]

    resolved_level = _resolve_level(level)
    if to_file is None:
        to_file = settings.logging.to_file

    logger = logging.getLogger(name)
    logger.setLevel(resolved_level)
    logger.handlers.clear()
    logger.propagate = False

    formatter = logging.Formatter(_LOG_FORMAT, _LOG_DATE_FORMAT)
    logger.addHandler(_console_handler(formatter, resolved_level))

    if to_file:
        file_handler = _file_handler(
            name, formatter, resolved_level, log_dir or settings.logging.log_path
        )
        if file_handler:
            logger.addHandler(file_handler)

    _CONFIGURED[name] = logger
    return logger


def _resolve_level(level: int | str | None) -> int:
    """Turn a level name or number into a logging level."""
    if level is None:
        level = settings.logging.level
    if isinstance(level, str):
        return logging.getLevelName(level.upper())
    return level


def _console_handler(formatter: logging.Formatter, level: int) -> logging.StreamHandler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def _file_handler(
    name: str,
    formatter: logging.Formatter,
    level: int,
    log_dir: Path,
) -> logging.FileHandler | None:
    """Create the dated file handler.

    Returns:
        FileHandler, or None when the log directory is not writable.
    """
    try:
        handler = logging.FileHandler(log_file_path(name, log_dir), encoding="utf-8")
    except OSError as e:
        print(f"Warning: Could not create log file: {e}", file=sys.stderr)
        return None
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def log_file_path(name: str, log_dir: Path) -> Path:
    """Build ``<log_dir>/<name>_<YYYYMMDD>.log``, creating the directory.

    Args:
        name: Logger name, dots become underscores.
        log_dir: Base directory for logs.

    Returns:
        Full path to the log file.
    """
    log_dir.mkdir(parents=True, exist_ok=True)
    safe_name = name.replace(".", "_").replace("/", "_")
    return log_dir / f"{safe_name}_{date.today():%Y%m%d}.log"

"""Logging setup for the status page.

Usage:
    from status_page.utils import get_logger

    logger = get_logger(__name__)
    logger.info("Check cycle started")
    logger.error("Something went wrong", exc_info=True)
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

from ..config import get_settings

# Console handler installed on the root logger, None until setup_logging runs
_console_handler: Optional[logging.Handler] = None


class ColoredFormatter(logging.Formatter):
    """Formatter that colors the level name for terminal output."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, "")
        record.levelname_colored = f"{color}{record.levelname:8}{self.RESET}"
        return super().format(record)


def _build_console_handler(level: str) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(getattr(logging, level.upper()))
    handler.setFormatter(ColoredFormatter(
        "%(asctime)s | %(levelname_colored)s | %(name)s | %(message)s",
        datefmt="%H:%M:%S"
    ))
    return handler


def _build_file_handler(log_dir: Path) -> logging.Handler:
    # One file per day, named by date
    log_dir.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(
        log_dir / f"status_page_{datetime.now():%Y-%m-%d}.log",
        encoding="utf-8",
    )
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    ))
    return handler


def setup_logging(
    level: Optional[str] = None,
    log_to_file: Optional[bool] = None,
    log_dir: Optional[Path] = None,
) -> logging.Logger:
    """Configure the root logger for the status page.

    The first call installs a colored console handler and, when enabled, a
    dated log file. Later calls only adjust the console level, and only when
    ``level`` is given, so a command line flag can override the level that
    importing the package already set up.

    Args:
        level: Console log level (DEBUG, INFO, WARNING, ERROR). Defaults to settings.
        log_to_file: Whether to write to file. Defaults to settings.
        log_dir: Directory for log files. Defaults to settings.

    Returns:
        The ``status_page`` logger
    """
    global _console_handler

    if _console_handler is not None:
        if level:
            _console_handler.setLevel(getattr(logging, level.upper()))
        return logging.getLogger("status_page")

    settings = get_settings()
    log_to_file = log_to_file if log_to_file is not None else settings.log_to_file

    root_logger = logging.getLogger()
    # Filtering happens per handler
    root_logger.setLevel(logging.DEBUG)

    _console_handler = _build_console_handler(level or settings.log_level)
    root_logger.addHandler(_console_handler)

    if log_to_file:
        root_logger.addHandler(_build_file_handler(log_dir or settings.logs_dir))

    return logging.getLogger("status_page")


def get_console_level() -> Optional[int]:
    """Level of the console handler, or None before setup_logging has run."""
    if _console_handler is None:
        return None
    return _console_handler.level


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a module, setting up logging on first use."""
    if _console_handler is None:
        setup_logging()

    return logging.getLogger(name)

"""Utility modules for the status page."""

from .logging import get_console_level, get_logger, setup_logging
from .retry import retry_with_backoff

__all__ = [
    "get_console_level",
    "get_logger",
    "setup_logging",
    "retry_with_backoff",
]

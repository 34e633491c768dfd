"""Utilities - logging."""

from matchday.utilities.logging import get_logger, setup_logging

__all__ = [
    "get_logger",
    "setup_logging",
]

"""Logging setup for Matchday.

Console logging always; rotating file logs when a log directory is configured.
"""

import logging
import os
from logging.handlers import RotatingFileHandler

from matchday.config import Config

LOG_FORMAT = "[%(asctime)s] %(levelname)-8s [%(name)s:%(lineno)d] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_configured = False


def setup_logging(log_level: str | None = None, log_dir: str | None = None) -> None:
    """Configure the root logger. Safe to call more than once.

    Args:
        log_level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to Config.LOG_LEVEL.
        log_dir: Directory for log files. Defaults to Config.LOG_DIR;
            None disables file logging.
    """
    global _configured
    if _configured:
        return

    level = getattr(logging, (log_level or Config.LOG_LEVEL).upper(), logging.INFO)
    log_dir = log_dir or Config.LOG_DIR
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    root = logging.getLogger()
    root.setLevel(level)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            os.path.join(log_dir, "matchday.log"),
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
        )
        file_handler.setLevel(logging.DEBUG)  # Always log DEBUG to file
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    # uvicorn access logs are noisy at INFO
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a module."""
    return logging.getLogger(name)

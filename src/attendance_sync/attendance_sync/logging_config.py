"""
Logging setup for the sync process.

- Console output always
- Optional daily-rotated file under LOG_DIR, kept for LOG_RETENTION_DAYS
- One format across modules; modules use logging.getLogger(__name__)
"""

import logging
import os
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Optional

DEFAULT_LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_RETENTION_DAYS = int(os.getenv("LOG_RETENTION_DAYS", "30"))

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: Optional[str] = None, log_dir: Optional[str] = None) -> logging.Logger:
    """
    Configure the root logger.

    Args:
        level: DEBUG, INFO, WARNING, ERROR or CRITICAL. Defaults to LOG_LEVEL env var.
        log_dir: Directory for rotating log files. No file logging when None.

    Returns:
        The root logger.
    """
    root_logger = logging.getLogger()

    # Avoid reconfiguring if already configured
    if root_logger.handlers:
        return root_logger

    log_level = getattr(logging, (level or DEFAULT_LOG_LEVEL).upper(), logging.INFO)
    root_logger.setLevel(log_level)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_dir:
        path = Path(log_dir)
        path.mkdir(parents=True, exist_ok=True)
        file_handler = TimedRotatingFileHandler(
            filename=path / "attendance_sync.log",
            when="midnight",
            interval=1,
            backupCount=LOG_RETENTION_DAYS,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    # HTTP client chatter stays out of INFO logs
    logging.getLogger("urllib3").setLevel(max(log_level, logging.WARNING))

    return root_logger

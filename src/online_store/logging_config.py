"""Configure application logging using the Python standard library.

This module defines a function that sets up the root logger with a
rotating file handler and, optionally, a console handler.  Logs are
formatted as JSON for structured logging and include the timestamp,
level, module, message and any ``extra`` dict passed by the caller.
The console handler is off by default because JSON lines would
interleave with the interactive menu.
"""

import json
import logging
import logging.handlers
import os
from datetime import datetime, UTC

from online_store.config import LOG_DIR, LOG_FILE_NAME


class JsonFormatter(logging.Formatter):
    """Format log records as JSON strings."""

    def format(self, record: logging.LogRecord) -> str:
        log_record = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "module": record.module,
            "message": record.getMessage(),
        }
        # Merge extra dict into top-level (avoid nested 'extra')
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            log_record.update(extra)
        if record.exc_info:
            log_record["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(log_record, default=str)


def configure_logging(log_dir: str = LOG_DIR, level: int = logging.INFO, console: bool = False) -> None:
    """Configure root logger with JSON formatting and rotating file handler.

    Args:
        log_dir: Directory where log files are written.  The directory
            will be created if it does not exist.
        level: Logging level for the root logger.
        console: Also emit JSON records on stderr.
    """
    os.makedirs(log_dir, exist_ok=True)
    logger = logging.getLogger()
    logger.setLevel(level)
    # Remove any default handlers (e.g. from basicConfig)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    formatter = JsonFormatter()
    if console:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        console_handler.setLevel(level)
        logger.addHandler(console_handler)
    file_handler = logging.handlers.RotatingFileHandler(
        filename=os.path.join(log_dir, LOG_FILE_NAME),
        maxBytes=5 * 1024 * 1024,  # 5 MB per log file
        backupCount=3,
        encoding="utf-8",
    )
    file_handler.setFormatter(formatter)
    file_handler.setLevel(level)
    logger.addHandler(file_handler)

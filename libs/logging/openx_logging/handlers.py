"""Log handlers for openx."""

import logging
import logging.handlers
import sys
from pathlib import Path


def create_file_handler(
    log_file: Path,
    max_bytes: int = 5 * 1024 * 1024,
    backup_count: int = 3,
    formatter: logging.Formatter | None = None
) -> logging.Handler | None:
    """Create a rotating file handler.

    Args:
        log_file: Path to log file
        max_bytes: Maximum file size before rotation
        backup_count: Number of backup files to keep
        formatter: Log formatter to use

    Returns:
        Configured file handler or None if the log directory is not writable
    """
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)

        handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding='utf-8',
            delay=True
        )
    except OSError:
        # Read-only home or similar; file logging is skipped
        return None

    if formatter:
        handler.setFormatter(formatter)

    return handler


def create_console_handler(
    formatter: logging.Formatter | None = None,
    stream=None
) -> logging.Handler:
    """Create a console handler.

    Args:
        formatter: Log formatter to use
        stream: Stream to write to (defaults to stderr)

    Returns:
        Configured console handler
    """
    handler = logging.StreamHandler(stream or sys.stderr)

    if formatter:
        handler.setFormatter(formatter)

    return handler

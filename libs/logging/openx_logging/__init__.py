"""openx centralized logging with logfmt format."""

from openx_logging.logger import OpenxLogger, configure, get_logger
from openx_logging.formatters import LogfmtFormatter
from openx_logging.handlers import create_console_handler, create_file_handler

__all__ = [
    "OpenxLogger",
    "get_logger",
    "configure",
    "LogfmtFormatter",
    "create_file_handler",
    "create_console_handler",
]

"""openx centralized logger."""

import logging
import os
from pathlib import Path

from openx_logging.formatters import LogfmtFormatter
from openx_logging.handlers import create_console_handler, create_file_handler

_TRUTHY = {"1", "true", "yes", "on"}


def default_log_dir() -> Path:
    """Log directory from OPENX_LOG_DIR, else ~/.openx/logs."""
    log_dir = os.getenv("OPENX_LOG_DIR")
    if log_dir:
        return Path(log_dir).expanduser()
    return Path.home() / '.openx' / 'logs'


def default_level() -> str:
    return os.getenv("OPENX_LOG_LEVEL", "INFO")


def default_console() -> bool:
    return os.getenv("OPENX_LOG_CONSOLE", "").strip().lower() in _TRUTHY


class OpenxLogger:
    """Centralized logger for openx components."""

    def __init__(
        self,
        name: str,
        log_dir: Path | None = None,
        level: str = "INFO",
        enable_console: bool = False,
        enable_file: bool = True
    ):
        """Initialize openx logger.

        Args:
            name: Logger name (will be prefixed with 'openx.')
            log_dir: Directory for log files
            level: Log level (DEBUG, INFO, WARNING, ERROR)
            enable_console: Whether to mirror records to stderr
            enable_file: Whether to write a rotating log file
        """
        self.name = f'openx.{name}'
        self.logger = logging.getLogger(self.name)
        self.logger.propagate = False
        self.formatter = LogfmtFormatter()
        self.setup(log_dir=log_dir, level=level,
                   enable_console=enable_console, enable_file=enable_file)

    def setup(
        self,
        log_dir: Path | None = None,
        level: str = "INFO",
        enable_console: bool = False,
        enable_file: bool = True
    ) -> None:
        """(Re)build handlers for this logger."""
        self.log_dir = log_dir or default_log_dir()
        self.logger.setLevel(getattr(logging, level.upper(), logging.INFO))

        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()

        if enable_file:
            handler = create_file_handler(
                self.log_dir / f'{self.name}.log',
                formatter=self.formatter
            )
            if handler:
                self.logger.addHandler(handler)

        if enable_console:
            self.logger.addHandler(create_console_handler(formatter=self.formatter))

        if not self.logger.handlers:
            self.logger.addHandler(logging.NullHandler())

    def _log(self, level: int, msg: str, **kwargs):
        """Log a message with extra context.

        Args:
            level: Log level
            msg: Log message
            **kwargs: Extra context to include in log
        """
        self.logger.log(level, msg, extra=kwargs, stacklevel=3)

    def debug(self, msg: str, **kwargs):
        """Log debug message."""
        self._log(logging.DEBUG, msg, **kwargs)

    def info(self, msg: str, **kwargs):
        """Log info message."""
        self._log(logging.INFO, msg, **kwargs)

    def warning(self, msg: str, **kwargs):
        """Log warning message."""
        self._log(logging.WARNING, msg, **kwargs)

    def error(self, msg: str, **kwargs):
        """Log error message."""
        self._log(logging.ERROR, msg, **kwargs)

    def exception(self, msg: str, **kwargs):
        """Log exception with traceback."""
        self.logger.exception(msg, extra=kwargs, stacklevel=2)


# Global logger cache
_loggers: dict[str, OpenxLogger] = {}

# Overrides applied by configure(); None means "read from the environment"
_settings: dict[str, object] = {"level": None, "log_dir": None, "console": None}


def _effective_settings() -> dict:
    return {
        "level": _settings["level"] or default_level(),
        "log_dir": _settings["log_dir"] or default_log_dir(),
        "enable_console": (
            default_console() if _settings["console"] is None else _settings["console"]
        ),
    }


def get_logger(name: str) -> OpenxLogger:
    """Get or create an openx logger.

    Args:
        name: Logger name

    Returns:
        openx logger instance
    """
    if name not in _loggers:
        _loggers[name] = OpenxLogger(name, **_effective_settings())
    return _loggers[name]


def configure(
    level: str | None = None,
    log_dir: Path | None = None,
    console: bool | None = None
) -> None:
    """Set logging options and re-apply them to every existing logger.

    Args:
        level: Log level name
        log_dir: Directory for log files
        console: Whether to mirror records to stderr
    """
    if level is not None:
        _settings["level"] = level
    if log_dir is not None:
        _settings["log_dir"] = Path(log_dir).expanduser()
    if console is not None:
        _settings["console"] = console

    settings = _effective_settings()
    for logger in _loggers.values():
        logger.setup(**settings)

"""Unit tests for openx logging."""

import io
import logging

import pytest

from openx_logging import (
    LogfmtFormatter,
    OpenxLogger,
    configure,
    create_console_handler,
    create_file_handler,
    get_logger,
)
from openx_logging import logger as logger_module


@pytest.fixture(autouse=True)
def reset_settings(tmp_path, monkeypatch):
    """Isolate the log directory and module-level settings."""
    monkeypatch.setenv("OPENX_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setattr(logger_module, "_settings", {"level": None, "log_dir": None, "console": None})
    monkeypatch.setattr(logger_module, "_loggers", {})


def _record(msg="hello", **extra) -> logging.LogRecord:
    record = logging.LogRecord("openx.test", logging.INFO, __file__, 1, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestLogfmtFormatter:
    """Tests for LogfmtFormatter."""

    def test_basic_fields(self):
        """Test level, component and message are emitted."""
        line = LogfmtFormatter().format(_record())

        assert line.startswith("level=INFO ts=")
        assert "component=openx.test" in line
        assert "msg=hello" in line

    def test_quotes_spaces(self):
        """Test values with spaces are quoted."""
        line = LogfmtFormatter().format(_record("Launch failed", app="Google Chrome"))

        assert 'msg="Launch failed"' in line
        assert 'app="Google Chrome"' in line

    def test_lists_joined(self):
        """Test list context is comma joined."""
        line = LogfmtFormatter().format(_record(patterns=["chrome", "chromium"]))

        assert "patterns=chrome,chromium" in line

    def test_non_string_values(self):
        """Test numbers are written unquoted."""
        line = LogfmtFormatter().format(_record(pid=42))

        assert "pid=42" in line


class TestHandlers:
    """Tests for handler factories."""

    def test_file_handler_creates_directory(self, tmp_path):
        """Test the log directory is created."""
        handler = create_file_handler(tmp_path / "nested" / "openx.log")

        assert handler is not None
        assert (tmp_path / "nested").is_dir()
        handler.close()

    def test_file_handler_unwritable(self, tmp_path):
        """Test an unusable log directory disables file logging."""
        blocker = tmp_path / "file"
        blocker.write_text("")

        assert create_file_handler(blocker / "openx.log") is None

    def test_console_handler_stream(self):
        """Test the console handler writes to the given stream."""
        stream = io.StringIO()
        handler = create_console_handler(LogfmtFormatter(), stream=stream)
        handler.emit(_record("to console"))

        assert 'msg="to console"' in stream.getvalue()


class TestOpenxLogger:
    """Tests for OpenxLogger and the logger cache."""

    def test_prefixed_name(self):
        """Test logger names are prefixed with openx."""
        assert OpenxLogger("launch").name == "openx.launch"

    def test_writes_context_to_file(self, tmp_path):
        """Test keyword context reaches the log file."""
        log = OpenxLogger("filetest", log_dir=tmp_path)
        log.info("Launched", app="code", exit_code=0)
        for handler in log.logger.handlers:
            handler.flush()

        content = (tmp_path / "openx.filetest.log").read_text(encoding="utf-8")
        assert "msg=Launched" in content
        assert "app=code" in content
        assert "exit_code=0" in content

    def test_get_logger_cached(self):
        """Test the same component returns the same logger."""
        assert get_logger("cache") is get_logger("cache")

    def test_level_from_environment(self, monkeypatch):
        """Test OPENX_LOG_LEVEL sets the default level."""
        monkeypatch.setenv("OPENX_LOG_LEVEL", "WARNING")

        assert get_logger("envlevel").logger.level == logging.WARNING

    def test_configure_reapplies(self):
        """Test configure updates existing loggers."""
        log = get_logger("reconfigure")

        configure(level="DEBUG", console=True)

        assert log.logger.level == logging.DEBUG
        assert any(
            isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
            for h in log.logger.handlers
        )

    def test_no_handlers_falls_back_to_null(self):
        """Test a logger without outputs still accepts records."""
        log = OpenxLogger("quiet", enable_file=False)

        assert isinstance(log.logger.handlers[0], logging.NullHandler)

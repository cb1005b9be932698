"""Unit tests for launch actions."""

from unittest.mock import MagicMock, patch

import pytest

from openx_core.actions import LaunchActions
from openx_core.models.config import OpenxConfig
from openx_core.models.process import ProcessResult
from openx_core.platforms import DarwinPlatform, LinuxPlatform
from openx_core.services.config_manager import ConfigManager


@pytest.fixture
def actions(config_manager, linux):
    return LaunchActions(config_manager=config_manager, platform=linux)


class TestLaunchActions:
    """Tests for LaunchActions."""

    def test_launch_configured_app(self, tmp_path, linux):
        """Test a configured Linux command is spawned with its arguments."""
        manager = ConfigManager(tmp_path / "config.yaml")
        manager.save(OpenxConfig.from_dict({"apps": {"testapp": {"linux": "echo"}}}))
        actions = LaunchActions(config_manager=manager, platform=linux)

        with patch("subprocess.Popen") as mock_popen, \
                patch("shutil.which", return_value="/bin/echo"):
            mock_popen.return_value = MagicMock(pid=999)

            result = actions.launch("testapp", ["hello"])

        assert result.success is True
        assert result.message == "Launched: testapp"
        assert result.data["pid"] == 999
        assert mock_popen.call_args[0][0] == ["/bin/echo", "hello"]

    def test_launch_alias(self, actions, linux):
        """Test aliases resolve before launching."""
        with patch.object(linux, "launch", return_value=ProcessResult(True, "ok", 5)) as mock_launch:
            result = actions.launch("ta", ["--flag"])

        assert result.success is True
        mock_launch.assert_called_once_with("echo hello", ["--flag"])

    def test_launch_resolves_file_arguments(self, actions, linux, tmp_path, monkeypatch):
        """Test existing file arguments are passed as absolute paths."""
        (tmp_path / "project").mkdir()
        monkeypatch.chdir(tmp_path)

        with patch.object(linux, "launch", return_value=ProcessResult(True, "ok")) as mock_launch:
            actions.launch("testapp", ["project", "--wait"])

        mock_launch.assert_called_once_with("echo hello", [str(tmp_path / "project"), "--wait"])

    def test_launch_failure_names_target(self, actions, linux):
        """Test spawn failures are wrapped with the token."""
        failure = ProcessResult(False, "failed to start echo: permission denied")
        with patch.object(linux, "launch", return_value=failure):
            result = actions.launch("testapp")

        assert result.success is False
        assert result.message.startswith("failed to launch testapp:")

    def test_no_path_for_platform(self, config_manager):
        """Test an app missing on this OS is an error, not an opener fallback."""
        darwin = DarwinPlatform()
        actions = LaunchActions(config_manager=config_manager, platform=darwin)

        with patch.object(darwin, "open_with_default") as mock_open:
            result = actions.launch("ghost")

        assert result.success is False
        assert result.message == "no launch path configured for ghost on darwin"
        mock_open.assert_not_called()

    def test_unknown_token_uses_default_opener(self, actions, linux):
        """Test unknown names fall back to the system opener."""
        with patch.object(linux, "open_with_default", return_value=ProcessResult(True, "ok")) as mock_open:
            result = actions.launch("https://example.com")

        assert result.success is True
        assert result.message == "Opened: https://example.com"
        mock_open.assert_called_once_with("https://example.com")

    def test_unknown_file_opened_by_absolute_path(self, actions, linux, tmp_path, monkeypatch):
        """Test an unknown token naming a local file is opened by absolute path."""
        (tmp_path / "notes.txt").write_text("x")
        monkeypatch.chdir(tmp_path)

        with patch.object(linux, "open_with_default", return_value=ProcessResult(True, "ok")) as mock_open:
            actions.launch("notes.txt")

        mock_open.assert_called_once_with(str(tmp_path / "notes.txt"))

    def test_unknown_token_with_args(self, actions, linux):
        """Test unknown names with arguments run as applications."""
        with patch.object(linux, "open_with_app", return_value=ProcessResult(True, "ok", 3)) as mock_app:
            result = actions.launch("gimp", ["--no-splash"])

        assert result.success is True
        mock_app.assert_called_once_with("gimp", ["--no-splash"])

    def test_alias_to_missing_app(self, tmp_path, linux):
        """Test an alias pointing to a removed app is reported."""
        manager = ConfigManager(tmp_path / "config.yaml")
        manager.save(OpenxConfig.from_dict({"apps": {}, "aliases": {"ta": "testapp"}}))
        actions = LaunchActions(config_manager=manager, platform=linux)

        result = actions.launch("ta")

        assert result.success is False
        assert result.message == "alias 'ta' points to unknown app 'testapp'"

    def test_missing_config(self, tmp_path, linux):
        """Test a missing config file is a load failure."""
        actions = LaunchActions(config_manager=ConfigManager(tmp_path / "none.yaml"), platform=linux)

        result = actions.launch("testapp")

        assert result.success is False
        assert result.message.startswith("failed to load config:")


class TestDirectLaunch:
    """Tests for launching by filesystem path."""

    def test_direct_path_skips_resolution(self, actions, linux, tmp_path):
        """Test tokens with separators bypass alias lookup."""
        tool = tmp_path / "tool"
        tool.write_text("")

        with patch.object(linux, "launch", return_value=ProcessResult(True, "ok")) as mock_launch:
            result = actions.launch(str(tool), ["-x"])

        assert result.success is True
        mock_launch.assert_called_once_with(str(tool), ["-x"])

    def test_direct_path_document(self, actions, linux, tmp_path):
        """Test a non-executable file path opens with its default handler."""
        report = tmp_path / "report.pdf"
        report.write_text("")

        with patch.object(linux, "open_with_default", return_value=ProcessResult(True, "ok")) as mock_open, \
                patch.object(linux, "launch") as mock_launch:
            result = actions.launch(str(report))

        assert result.success is True
        mock_open.assert_called_once_with(str(report))
        mock_launch.assert_not_called()

    def test_direct_path_executable(self, actions, linux, tmp_path):
        """Test an executable path is spawned."""
        tool = tmp_path / "tool"
        tool.write_text("#!/bin/sh\n")
        tool.chmod(0o755)

        with patch.object(linux, "launch", return_value=ProcessResult(True, "ok")) as mock_launch:
            actions.launch(str(tool))

        mock_launch.assert_called_once_with(str(tool), [])

    def test_direct_path_missing(self, actions, tmp_path):
        """Test a missing direct path is reported."""
        missing = str(tmp_path / "missing-tool")

        result = actions.launch(missing)

        assert result.success is False
        assert result.message == f"application not found: {missing}"

    def test_relative_direct_path(self, actions, linux, tmp_path, monkeypatch):
        """Test ./ paths expand against the working directory."""
        (tmp_path / "run.sh").write_text("")
        monkeypatch.chdir(tmp_path)

        with patch.object(linux, "launch", return_value=ProcessResult(True, "ok")) as mock_launch:
            actions.run_direct("./run.sh")

        assert mock_launch.call_args[0][0] == str(tmp_path / "run.sh")


class TestStrictLaunch:
    """Tests for run_alias and batch launches."""

    def test_run_alias_unknown(self, actions, linux):
        """Test the strict form never falls back to the opener."""
        with patch.object(linux, "open_with_default") as mock_open:
            result = actions.run_alias("nope")

        assert result.success is False
        assert result.message == "unknown app: nope"
        mock_open.assert_not_called()

    def test_launch_many_aggregates(self, actions, linux):
        """Test every token is attempted and failures are counted."""
        with patch.object(linux, "launch", return_value=ProcessResult(True, "ok")) as mock_launch:
            result = actions.launch_many(["testapp", "nope", "unknown2"])

        assert result.success is False
        assert result.message == "2 apps failed to launch"
        assert mock_launch.call_count == 1
        assert [r["success"] for r in result.data["results"]] == [True, False, False]

    def test_launch_many_success(self, actions, linux):
        """Test a clean batch lists what was launched."""
        with patch.object(linux, "launch", return_value=ProcessResult(True, "ok")):
            result = actions.launch_many(["testapp", "chrome"])

        assert result.success is True
        assert result.message == "Launched: testapp, chrome"

"""Shared fixtures for openx core tests."""

import pytest

from openx_core.models.config import OpenxConfig
from openx_core.platforms import GenericPlatform, LinuxPlatform
from openx_core.services.config_manager import ConfigManager


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep logs and config out of the real home directory."""
    monkeypatch.setenv("OPENX_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.delenv("OPENX_CONFIG_PATH", raising=False)
    monkeypatch.delenv("OPENX_LOG_CONSOLE", raising=False)


@pytest.fixture
def linux():
    return LinuxPlatform()


@pytest.fixture
def test_config() -> OpenxConfig:
    """A small config with one app on PATH and one missing app."""
    return OpenxConfig.from_dict({
        "apps": {
            "testapp": {"linux": "echo hello", "darwin": "/Applications/TestApp.app"},
            "ghost": {"linux": "/nonexistent/bin/ghost"},
            "chrome": {"linux": "google-chrome", "kill": ["chrome", "chromium"]},
        },
        "aliases": {"ta": "testapp"},
    })


@pytest.fixture
def config_manager(tmp_path, test_config) -> ConfigManager:
    """ConfigManager backed by a file holding test_config."""
    manager = ConfigManager(tmp_path / "config.yaml")
    manager.save(test_config)
    return manager


@pytest.fixture
def generic():
    return GenericPlatform("plan9")

"""Unit tests for alias management and the library facade."""

import json
from unittest.mock import patch

from openx_core import OpenX, __version__
from openx_core.actions import AliasActions
from openx_core.services.config_manager import ConfigManager


class TestAliasActions:
    """Tests for AliasActions."""

    def test_add(self, config_manager):
        """Test a new alias is persisted."""
        result = AliasActions(config_manager).add("t", "testapp")

        assert result.success is True
        assert ConfigManager(config_manager.config_path).load().aliases["t"] == "testapp"

    def test_add_uses_canonical_key(self, config_manager):
        """Test the stored target is the configured key spelling."""
        AliasActions(config_manager).add("t", "TESTAPP")

        assert ConfigManager(config_manager.config_path).load().aliases["t"] == "testapp"

    def test_add_unknown_app(self, config_manager):
        """Test aliases can only point at configured apps."""
        result = AliasActions(config_manager).add("x", "nope")

        assert result.success is False
        assert result.message == "application 'nope' is not configured"

    def test_remove(self, config_manager):
        """Test an alias is removed case-insensitively."""
        result = AliasActions(config_manager).remove("TA")

        assert result.success is True
        assert "ta" not in ConfigManager(config_manager.config_path).load().aliases

    def test_remove_missing(self, config_manager):
        """Test removing an unknown alias fails."""
        result = AliasActions(config_manager).remove("zz")

        assert result.success is False
        assert result.message == "alias 'zz' not found"

    def test_list_is_copy(self, config_manager):
        """Test the returned mapping is detached from the config."""
        aliases = AliasActions(config_manager).list()
        aliases["new"] = "x"

        assert "new" not in config_manager.config.aliases


class TestOpenX:
    """Tests for the OpenX facade."""

    def test_ensure_config(self, tmp_path):
        """Test the starter config is created on first use."""
        ox = OpenX(tmp_path / "openx" / "config.yaml")

        assert ox.ensure_config() is True
        assert ox.config_path.exists()
        assert ox.ensure_config() is False

    def test_version(self, tmp_path):
        """Test the version is exposed."""
        assert OpenX(tmp_path / "config.yaml").version == __version__

    def test_alias_round_trip(self, config_manager):
        """Test add, list and remove through the facade."""
        ox = OpenX(config_manager.config_path)

        assert ox.add_alias("t", "testapp").success
        assert ox.list_aliases()["t"] == "testapp"
        assert ox.remove_alias("t").success
        assert "t" not in ox.list_aliases()

    def test_kill(self, config_manager):
        """Test kill delegates to the platform strategy."""
        ox = OpenX(config_manager.config_path)

        with patch.object(ox.platform, "terminate") as mock_terminate:
            mock_terminate.return_value.success = True
            mock_terminate.return_value.killed = False
            result = ox.kill("chrome")

        assert result.success is True

    def test_doctor_json(self, config_manager):
        """Test doctor_json returns a parseable report."""
        ox = OpenX(config_manager.config_path)

        with patch.object(ox.platform, "is_running", return_value=False):
            data = json.loads(ox.doctor_json())

        assert data["summary"]["total"] == 3

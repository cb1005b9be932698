"""Unit tests for path and argument helpers."""

import os
from pathlib import Path
from unittest.mock import patch

from openx_core import paths


class TestPathPredicates:
    """Tests for URL and direct path detection."""

    def test_is_url(self):
        """Test any scheme counts as a URL."""
        assert paths.is_url("https://example.com")
        assert paths.is_url("vscode://file/x")
        assert not paths.is_url("example.com")

    def test_is_direct_path(self):
        """Test tokens with separators are direct paths."""
        assert paths.is_direct_path("./bin/tool")
        assert paths.is_direct_path("/usr/bin/env")
        assert paths.is_direct_path("C:\\Tools\\app.exe")
        assert not paths.is_direct_path("code")


class TestExpansion:
    """Tests for tilde and dot expansion."""

    def test_expand_tilde_home(self):
        """Test a bare tilde expands to the home directory."""
        with patch.object(paths, "home_dir", return_value="/home/dev"):
            assert paths.expand_tilde("~") == "/home/dev"
            assert paths.expand_tilde("~/projects") == os.path.join("/home/dev", "projects")

    def test_expand_tilde_untouched(self):
        """Test paths without a leading tilde are unchanged."""
        assert paths.expand_tilde("/opt/~odd") == "/opt/~odd"
        assert paths.expand_tilde("relative") == "relative"

    def test_expand_dot(self, tmp_path, monkeypatch):
        """Test leading dot segments resolve against the working directory."""
        monkeypatch.chdir(tmp_path)

        assert paths.expand_dot(".") == str(Path.cwd())
        assert paths.expand_dot("..") == str(Path.cwd().parent)
        assert paths.expand_dot("./file.txt") == os.path.join(str(Path.cwd()), "file.txt")
        assert paths.expand_dot("../x") == os.path.join(str(Path.cwd().parent), "x")
        assert paths.expand_dot("name") == "name"

    def test_exists_empty(self):
        """Test the empty string never exists."""
        assert paths.exists("") is False


class TestResolveArgs:
    """Tests for argument canonicalisation."""

    def test_existing_file_becomes_absolute(self, tmp_path, monkeypatch):
        """Test an existing relative path is made absolute."""
        (tmp_path / "notes.txt").write_text("x")
        monkeypatch.chdir(tmp_path)

        assert paths.resolve_args(["notes.txt"]) == [str(tmp_path / "notes.txt")]

    def test_passthrough(self, tmp_path, monkeypatch):
        """Test flags, URLs and missing paths are forwarded unchanged."""
        monkeypatch.chdir(tmp_path)
        args = ["--new-window", "https://example.com", "missing.txt"]

        assert paths.resolve_args(args) == args

    def test_flag_named_like_file(self, tmp_path, monkeypatch):
        """Test a flag is not resolved even when a file of that name exists."""
        (tmp_path / "-v").write_text("x")
        monkeypatch.chdir(tmp_path)

        assert paths.resolve_args(["-v"]) == ["-v"]

    def test_resolve_target_url(self):
        """Test URLs are not treated as files."""
        assert paths.resolve_target("https://example.com/a") == "https://example.com/a"


class TestSplitCommand:
    """Tests for splitting configured command strings."""

    def test_plain_command(self):
        """Test a single word is returned as the program."""
        assert paths.split_command("firefox") == ("firefox", [])

    def test_command_with_arguments(self):
        """Test whitespace-separated commands are split shell-style."""
        assert paths.split_command("libreoffice --writer") == ("libreoffice", ["--writer"])
        assert paths.split_command("echo hello") == ("echo", ["hello"])

    def test_paths_are_not_split(self):
        """Test bundle paths containing spaces are kept whole."""
        target = "/Applications/Google Chrome.app"

        assert paths.split_command(target) == (target, [])

    def test_unbalanced_quotes(self):
        """Test unparseable commands are returned unchanged."""
        assert paths.split_command('app "unterminated') == ('app "unterminated', [])

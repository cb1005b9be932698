"""Path and URL helpers shared by the launch, close and doctor actions."""

import os
import shlex
import shutil
from pathlib import Path

FLAG_PREFIX = "-"
_PATH_SEPARATORS = ("/", "\\")


def is_url(value: str) -> bool:
    """Check if the value looks like a URL (any scheme)."""
    return "://" in value


def is_direct_path(value: str) -> bool:
    """A token is a direct path when it contains a path separator."""
    return any(sep in value for sep in _PATH_SEPARATORS)


def home_dir() -> str:
    """Get the current user's home directory, or an empty string."""
    try:
        return str(Path.home())
    except RuntimeError:
        return os.getenv("HOME") or os.getenv("USERPROFILE") or ""


def expand_tilde(path: str) -> str:
    """Expand ``~`` and ``~user`` at the start of a path.

    Unknown users and tildes elsewhere in the path are left untouched.
    """
    if not path.startswith("~"):
        return path

    if path == "~" or path.startswith("~/"):
        home = home_dir()
        if not home:
            return path
        if path == "~":
            return home
        rest = path[2:]
        return os.path.join(home, rest) if rest else home

    # ~user lookups only make sense with a passwd database
    if os.name == "nt":
        return path
    return os.path.expanduser(path)


def expand_dot(path: str) -> str:
    """Expand leading ``.``/``..`` segments against the current directory."""
    if path in (".", ".."):
        return str(Path.cwd()) if path == "." else str(Path.cwd().parent)

    if path.startswith("./"):
        return os.path.join(str(Path.cwd()), path[2:])

    if path.startswith("../"):
        return os.path.join(str(Path.cwd().parent), path[3:])

    return path


def expand(path: str) -> str:
    return expand_dot(expand_tilde(path))


def exists(path: str) -> bool:
    """Check if a file or directory exists."""
    if not path:
        return False
    return os.path.exists(path)


def is_executable(path: str) -> bool:
    """Check if the path is a regular file with an executable bit set."""
    return os.path.isfile(path) and os.access(path, os.X_OK)


def resolve_target(target: str) -> str:
    """Turn a file target into an absolute path; URLs pass through."""
    if is_url(target):
        return target

    return os.path.abspath(expand(target))


def resolve_args(args: list[str]) -> list[str]:
    """Canonicalise arguments that name existing local files.

    Flags, URLs and anything that does not exist locally are passed through
    unchanged.
    """
    resolved = []
    for arg in args:
        if arg.startswith(FLAG_PREFIX) or is_url(arg):
            resolved.append(arg)
        elif exists(expand(arg)):
            resolved.append(resolve_target(arg))
        else:
            resolved.append(arg)
    return resolved


def split_command(target: str) -> tuple[str, list[str]]:
    """Split a configured target into program and leading arguments.

    Existing paths and direct paths are never split, so bundle paths with
    spaces survive. Bare commands like ``libreoffice --writer`` are split
    shell-style.
    """
    if exists(target) or is_direct_path(target) or " " not in target.strip():
        return target, []

    try:
        parts = shlex.split(target)
    except ValueError:
        return target, []

    if not parts:
        return target, []
    return parts[0], parts[1:]


def which(command: str) -> str | None:
    """Look up a command on PATH."""
    return shutil.which(command)

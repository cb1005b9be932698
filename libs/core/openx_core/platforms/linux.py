"""Linux platform strategy."""

from openx_core.models.process import KillResult
from openx_core.platforms.base import PosixPlatform


class LinuxPlatform(PosixPlatform):
    """Linux: spawn directly, xdg-open for defaults, kill by command line."""

    name = "linux"

    def default_opener(self) -> list[list[str]]:
        return [["xdg-open"], ["gio", "open"]]

    def terminate(self, pattern: str) -> KillResult:
        return self.force_kill(pattern)

"""Per-OS strategies for launching, terminating and checking applications."""

import sys
from functools import lru_cache
from types import MappingProxyType

from openx_core.platforms.base import PlatformStrategy, PosixPlatform, first_success
from openx_core.platforms.darwin import PROCESS_NAME_EXCEPTIONS, DarwinPlatform
from openx_core.platforms.generic import GenericPlatform
from openx_core.platforms.linux import LinuxPlatform
from openx_core.platforms.windows import WindowsPlatform

PLATFORMS = MappingProxyType({
    "darwin": DarwinPlatform,
    "linux": LinuxPlatform,
    "windows": WindowsPlatform,
})


def platform_name() -> str:
    """Normalised OS identifier used as the config key."""
    if sys.platform == "darwin":
        return "darwin"
    if sys.platform.startswith("linux"):
        return "linux"
    if sys.platform in ("win32", "cygwin"):
        return "windows"
    return sys.platform


@lru_cache(maxsize=None)
def get_platform(name: str | None = None) -> PlatformStrategy:
    """Strategy for the named OS, or for the running one when omitted."""
    name = name or platform_name()
    strategy = PLATFORMS.get(name)
    if strategy is None:
        return GenericPlatform(name)
    return strategy()


__all__ = [
    "PLATFORMS",
    "PROCESS_NAME_EXCEPTIONS",
    "DarwinPlatform",
    "GenericPlatform",
    "LinuxPlatform",
    "PlatformStrategy",
    "PosixPlatform",
    "WindowsPlatform",
    "first_success",
    "get_platform",
    "platform_name",
]

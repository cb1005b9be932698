"""Fallback strategy for platforms without dedicated support."""

import sys

from openx_core.platforms.base import PlatformStrategy


class GenericPlatform(PlatformStrategy):
    """Direct spawning only; no default opener and no termination."""

    def __init__(self, name: str | None = None):
        super().__init__()
        self.name = name or sys.platform

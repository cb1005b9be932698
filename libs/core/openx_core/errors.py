"""Exception hierarchy for openx."""

from pathlib import Path


class OpenxError(Exception):
    """Base class for all openx errors."""


class ConfigError(OpenxError):
    """Configuration file is unreadable or malformed."""


class ConfigNotFoundError(ConfigError):
    """Configuration file does not exist."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(
            f"config file not found at {path} (run 'openx --doctor' to create it)"
        )


class ResolutionError(OpenxError):
    """A name could not be turned into something launchable or killable."""


class UnknownAppError(ResolutionError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"unknown app: {name}")


class AliasTargetError(ResolutionError):
    """An alias points at an application that is no longer configured."""

    def __init__(self, alias: str, target: str):
        self.alias = alias
        self.target = target
        super().__init__(f"alias '{alias}' points to unknown app '{target}'")


class NoLaunchPathError(ResolutionError):
    def __init__(self, name: str, platform: str):
        self.name = name
        self.platform = platform
        super().__init__(f"no launch path configured for {name} on {platform}")


class NoKillPatternsError(ResolutionError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"no kill patterns available for {name}")


class ProcessQueryError(OpenxError):
    """The process table could not be read, so liveness is unknown."""

"""Configuration value types: applications and aliases."""

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from openx_core.errors import ConfigError
from openx_core.paths import expand_tilde

if TYPE_CHECKING:
    from openx_core.platforms.base import PlatformStrategy

KILL_KEY = "kill"


def _frozen(mapping: Mapping) -> Mapping:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class AppConfig:
    """A configured application.

    Attributes:
        paths: OS identifier -> launch target (absolute path, bundle or command)
        kill: Explicit process-name patterns, used verbatim when present
    """

    paths: Mapping[str, str] = field(default_factory=dict)
    kill: tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "paths", _frozen(self.paths))
        object.__setattr__(self, "kill", tuple(self.kill))

    @classmethod
    def from_dict(cls, name: str, data: Any) -> "AppConfig":
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise ConfigError(f"app '{name}' must be a mapping of OS to path")

        paths: dict[str, str] = {}
        kill: list[str] = []
        for key, value in data.items():
            key = str(key)
            if key == KILL_KEY:
                kill = _parse_kill(name, value)
            elif value is None:
                continue
            elif isinstance(value, str):
                paths[key] = value
            else:
                raise ConfigError(f"app '{name}': path for '{key}' must be a string")

        return cls(paths=paths, kill=tuple(kill))

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = dict(self.paths)
        if self.kill:
            data[KILL_KEY] = list(self.kill)
        return data

    def launch_path(self, os_key: str) -> str:
        """Launch target for the given OS, tilde-expanded, or ''."""
        path = self.paths.get(os_key, "")
        return expand_tilde(path) if path else ""

    def kill_patterns(self, platform: "PlatformStrategy") -> list[str]:
        """Explicit kill patterns, else patterns derived from the launch path."""
        if self.kill:
            return list(self.kill)

        launch_path = self.launch_path(platform.name)
        if not launch_path:
            return []
        return platform.derive_kill_patterns(launch_path)


def _parse_kill(name: str, value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value] if value else []
    if isinstance(value, list) and all(isinstance(v, str) for v in value):
        return [v for v in value if v]
    raise ConfigError(f"app '{name}': kill must be a list of strings")


@dataclass(frozen=True)
class OpenxConfig:
    """The whole configuration document.

    Instances are immutable; alias edits return a new value which the caller
    saves explicitly.
    """

    apps: Mapping[str, AppConfig] = field(default_factory=dict)
    aliases: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "apps", _frozen(self.apps))
        object.__setattr__(self, "aliases", _frozen(self.aliases))

    @classmethod
    def from_dict(cls, data: Any) -> "OpenxConfig":
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise ConfigError("config root must be a mapping with 'apps' and 'aliases'")

        raw_apps = data.get("apps") or {}
        raw_aliases = data.get("aliases") or {}
        if not isinstance(raw_apps, Mapping):
            raise ConfigError("'apps' must be a mapping")
        if not isinstance(raw_aliases, Mapping):
            raise ConfigError("'aliases' must be a mapping")

        apps = {str(name): AppConfig.from_dict(str(name), app) for name, app in raw_apps.items()}

        aliases = {}
        for alias, target in raw_aliases.items():
            if not isinstance(target, str):
                raise ConfigError(f"alias '{alias}' must point to an app name")
            aliases[str(alias)] = target

        return cls(apps=apps, aliases=aliases)

    def to_dict(self) -> dict[str, Any]:
        return {
            "apps": {name: app.to_dict() for name, app in self.apps.items()},
            "aliases": dict(self.aliases),
        }

    def find_app(self, name: str) -> tuple[str, AppConfig] | None:
        """Find an app by key; exact match first, then case-insensitive."""
        if name in self.apps:
            return name, self.apps[name]

        folded = name.casefold()
        for key in sorted(self.apps):
            if key.casefold() == folded:
                return key, self.apps[key]
        return None

    def find_alias(self, alias: str) -> tuple[str, str] | None:
        """Find an alias; returns (stored alias, canonical app name)."""
        if alias in self.aliases:
            return alias, self.aliases[alias]

        folded = alias.casefold()
        for key in sorted(self.aliases):
            if key.casefold() == folded:
                return key, self.aliases[key]
        return None

    def with_alias(self, alias: str, app_name: str) -> "OpenxConfig":
        aliases = dict(self.aliases)
        aliases[alias] = app_name
        return replace(self, aliases=aliases)

    def without_alias(self, alias: str) -> "OpenxConfig":
        aliases = {k: v for k, v in self.aliases.items() if k != alias}
        return replace(self, aliases=aliases)

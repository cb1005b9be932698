"""Alias and synonym resolution from user tokens to configured applications."""

from dataclasses import dataclass
from types import MappingProxyType

from openx_core.errors import AliasTargetError, NoLaunchPathError, ResolutionError, UnknownAppError
from openx_core.models.config import AppConfig, OpenxConfig
from openx_core.platforms import PlatformStrategy, get_platform

# Built-in shorthands, consulted after app keys and configured aliases
SYNONYMS = MappingProxyType({
    # Code editors
    "code": "vscode",
    "vs": "visualstudio",
    "idea": "intellij",
    "ij": "intellij",
    "ws": "webstorm",
    "ps": "phpstorm",
    "cl": "clion",
    "pc": "pycharm",
    "rd": "rider",
    "dg": "datagrip",
    "rm": "rubymine",
    "ac": "appcode",
    "st": "sublime",
    "vi": "vim",
    "npp": "notepadpp",
    "z": "zed",
    # Browsers
    "gc": "chrome",
    "ff": "firefox",
    "br": "brave",
    "op": "opera",
    # Terminals
    "pwsh": "powershell",
    "it": "iterm",
    "wez": "wezterm",
    "al": "alacritty",
    # Developer tools
    "pm": "postman",
    "ins": "insomnia",
    "fig": "figma",
    "sk": "sketch",
    "not": "notion",
    "obs": "obsidian",
    # Communication
    "sl": "slack",
    "dc": "discord",
    "tm": "teams",
    "zm": "zoom",
    # Databases
    "tp": "tableplus",
    "sp": "sequel",
    "db": "dbeaver",
    # Other
    "ad": "anydesk",
})


@dataclass(frozen=True)
class ResolvedApp:
    """An application found for a user token.

    Attributes:
        token: What the user typed
        name: Canonical application key
        app: The application configuration
    """

    token: str
    name: str
    app: AppConfig


class AliasResolver:
    """Resolves user tokens through aliases and synonyms to applications.

    Lookup order: application key, configured alias, built-in synonym. Each
    indirection is followed at most once. Resolution never touches the
    filesystem or the process table.
    """

    def __init__(
        self,
        config: OpenxConfig,
        platform: PlatformStrategy | None = None,
        synonyms=SYNONYMS,
    ):
        self.config = config
        self.platform = platform or get_platform()
        self.synonyms = synonyms

    def lookup(self, token: str) -> ResolvedApp:
        """Find the application a token refers to.

        Raises:
            AliasTargetError: The token is an alias whose app is not configured
            UnknownAppError: Nothing matches the token
        """
        found = self.config.find_app(token)
        if found:
            return ResolvedApp(token, *found)

        alias = self.config.find_alias(token)
        if alias:
            alias_name, canonical = alias
            found = self.config.find_app(canonical)
            if not found:
                raise AliasTargetError(alias_name, canonical)
            return ResolvedApp(token, *found)

        canonical = self.synonyms.get(token.lower())
        if canonical:
            found = self.config.find_app(canonical)
            if found:
                return ResolvedApp(token, *found)

        raise UnknownAppError(token)

    def launch_target(self, token: str) -> str:
        """Launch target of the token's application on this OS.

        Raises:
            NoLaunchPathError: The app has no path for this OS
        """
        resolved = self.lookup(token)
        target = resolved.app.launch_path(self.platform.name)
        if not target:
            raise NoLaunchPathError(token, self.platform.name)
        return target

    def resolve(self, token: str) -> tuple[str, bool]:
        """Non-raising form of launch_target: (target, found)."""
        try:
            return self.launch_target(token), True
        except ResolutionError:
            return "", False

    def kill_patterns(self, token: str) -> list[str]:
        return self.lookup(token).app.kill_patterns(self.platform)

"""Library entry point bundling the openx actions behind one object."""

from pathlib import Path

from openx_core.actions import AliasActions, CloseActions, DoctorActions, LaunchActions
from openx_core.models.actions import ActionResult
from openx_core.models.doctor import DoctorReport
from openx_core.platforms import PlatformStrategy, get_platform
from openx_core.services.config_manager import ConfigManager

__version__ = "0.1.0"


class OpenX:
    """Launch, close and inspect configured applications from Python code.

    Example:
        >>> ox = OpenX()
        >>> ox.ensure_config()
        >>> ox.run_alias("code", ["."])
    """

    def __init__(
        self,
        config_path: Path | str | None = None,
        platform: PlatformStrategy | None = None,
    ):
        self.config_manager = ConfigManager(Path(config_path) if config_path else None)
        self.platform = platform or get_platform()
        self.launcher = LaunchActions(self.config_manager, self.platform)
        self.closer = CloseActions(self.config_manager, self.platform)
        self.doctor_actions = DoctorActions(self.config_manager, self.platform)
        self.aliases = AliasActions(self.config_manager)

    @property
    def version(self) -> str:
        return __version__

    @property
    def config_path(self) -> Path:
        return self.config_manager.config_path

    def ensure_config(self) -> bool:
        """Write the starter config for this OS if none exists."""
        return self.config_manager.ensure_config(self.platform.name)

    def launch(self, token: str, args: list[str] | None = None) -> ActionResult:
        return self.launcher.launch(token, args)

    def run_alias(self, alias: str, args: list[str] | None = None) -> ActionResult:
        return self.launcher.run_alias(alias, args)

    def run_direct(self, path: str, args: list[str] | None = None) -> ActionResult:
        return self.launcher.run_direct(path, args)

    def kill(self, alias: str) -> ActionResult:
        return self.closer.close(alias)

    def kill_many(self, aliases: list[str]) -> ActionResult:
        return self.closer.close_many(aliases)

    def add_alias(self, alias: str, app: str) -> ActionResult:
        return self.aliases.add(alias, app)

    def remove_alias(self, alias: str) -> ActionResult:
        return self.aliases.remove(alias)

    def list_aliases(self) -> dict[str, str]:
        return self.aliases.list()

    def doctor(self) -> DoctorReport:
        return self.doctor_actions.build_report()

    def doctor_json(self) -> str:
        return self.doctor_actions.report(as_json=True)

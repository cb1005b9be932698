"""Alias management over the configuration file."""

from openx_core.errors import ConfigError
from openx_core.models.actions import ActionResult
from openx_core.services.config_manager import ConfigManager
from openx_logging import get_logger


class AliasActions:
    """Adds, removes and lists configured aliases.

    Each change loads the configuration, derives a new value and saves the
    whole document.
    """

    def __init__(self, config_manager: ConfigManager | None = None):
        self.config_manager = config_manager or ConfigManager()
        self.logger = get_logger("aliases")

    def add(self, alias: str, app: str) -> ActionResult:
        """Point an alias at a configured application.

        Args:
            alias: Shorthand to add or overwrite
            app: Application key the alias resolves to

        Returns:
            ActionResult indicating success or failure
        """
        try:
            config = self.config_manager.load()
            found = config.find_app(app)
            if not found:
                return ActionResult(
                    success=False,
                    message=f"application '{app}' is not configured",
                )
            app_name, _ = found
            self.config_manager.save(config.with_alias(alias, app_name))
        except ConfigError as e:
            return ActionResult(success=False, message=str(e))

        self.logger.info("Alias added", alias=alias, app=app_name)
        return ActionResult(
            success=True,
            message=f"Added alias: {alias} -> {app_name}",
            data={"alias": alias, "app": app_name},
        )

    def remove(self, alias: str) -> ActionResult:
        """Delete an alias (matched case-insensitively)."""
        try:
            config = self.config_manager.load()
            found = config.find_alias(alias)
            if not found:
                return ActionResult(success=False, message=f"alias '{alias}' not found")
            stored, _ = found
            self.config_manager.save(config.without_alias(stored))
        except ConfigError as e:
            return ActionResult(success=False, message=str(e))

        self.logger.info("Alias removed", alias=stored)
        return ActionResult(success=True, message=f"Removed alias: {stored}")

    def list(self) -> dict[str, str]:
        """Copy of the configured aliases.

        Raises:
            ConfigError: If the configuration cannot be loaded
        """
        return dict(self.config_manager.config.aliases)

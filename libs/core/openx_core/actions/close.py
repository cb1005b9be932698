"""Application termination actions."""

from openx_core.actions.batch import aggregate_results
from openx_core.errors import ConfigError, NoKillPatternsError, ResolutionError
from openx_core.models.actions import ActionResult
from openx_core.platforms import PlatformStrategy, get_platform
from openx_core.resolver import AliasResolver
from openx_core.services.config_manager import ConfigManager
from openx_logging import get_logger


class CloseActions:
    """Encapsulates terminating configured applications by kill pattern.

    Every pattern of an application is processed, so no matching process
    survives a successful close. Finding nothing to kill is not an error.
    """

    def __init__(
        self,
        config_manager: ConfigManager | None = None,
        platform: PlatformStrategy | None = None,
    ):
        """Initialize close actions.

        Args:
            config_manager: Source of the application configuration
            platform: OS strategy (defaults to the running OS)
        """
        self.config_manager = config_manager or ConfigManager()
        self.platform = platform or get_platform()
        self.logger = get_logger("close")

    def kill_patterns(self, name: str) -> list[str]:
        """Patterns that would be used to close the named application.

        Raises:
            ConfigError: If the configuration cannot be loaded
            ResolutionError: If the name does not resolve to an app
        """
        resolver = AliasResolver(self.config_manager.config, self.platform)
        return resolver.kill_patterns(name)

    def close(self, name: str) -> ActionResult:
        """Terminate every process of an application.

        Args:
            name: Application key, alias or synonym

        Returns:
            ActionResult indicating success or failure; data["killed"]
            lists the patterns that matched running processes
        """
        try:
            patterns = self.kill_patterns(name)
            if not patterns:
                raise NoKillPatternsError(name)
        except ConfigError as e:
            return ActionResult(success=False, message=f"failed to load config: {e}")
        except ResolutionError as e:
            return ActionResult(success=False, message=str(e))

        killed: list[str] = []
        errors: list[str] = []
        for pattern in patterns:
            result = self.platform.terminate(pattern)
            if not result.success:
                errors.append(result.message)
            elif result.killed:
                killed.append(pattern)

        data = {"patterns": patterns, "killed": killed}

        if errors:
            self.logger.error("Close failed", app=name, error="; ".join(errors))
            return ActionResult(
                success=False,
                message=f"failed to close {name}: {'; '.join(errors)}",
                data=data,
            )

        if not killed:
            self.logger.info("Nothing to close", app=name, patterns=patterns)
            return ActionResult(
                success=True,
                message=f"No running processes found for: {name}",
                data=data,
            )

        self.logger.info("Closed", app=name, patterns=killed)
        return ActionResult(
            success=True,
            message=f"Killed all processes matching: {', '.join(killed)}",
            data=data,
        )

    def close_many(self, names: list[str]) -> ActionResult:
        """Close several applications, attempting every one.

        Args:
            names: Application keys, aliases or synonyms

        Returns:
            ActionResult failing if any close failed, with per-name results
            in data["results"]
        """
        results = [(name, self.close(name)) for name in names]
        return aggregate_results(results, "close", "Closed")

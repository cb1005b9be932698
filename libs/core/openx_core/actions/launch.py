"""Application launch actions."""

from openx_core import paths
from openx_core.actions.batch import aggregate_results
from openx_core.errors import ConfigError, ResolutionError, UnknownAppError
from openx_core.models.actions import ActionResult
from openx_core.platforms import PlatformStrategy, get_platform
from openx_core.resolver import AliasResolver
from openx_core.services.config_manager import ConfigManager
from openx_logging import get_logger


class LaunchActions:
    """Encapsulates launching applications, files and URLs.

    Tokens are resolved as direct paths, then through the configuration
    (application keys, aliases, synonyms). URLs, documents and unknown tokens
    fall back to the system default opener, or are run as an application
    when arguments are given. Launching never waits for the child process.
    """

    def __init__(
        self,
        config_manager: ConfigManager | None = None,
        platform: PlatformStrategy | None = None,
    ):
        """Initialize launch actions.

        Args:
            config_manager: Source of the application configuration
            platform: OS strategy (defaults to the running OS)
        """
        self.config_manager = config_manager or ConfigManager()
        self.platform = platform or get_platform()
        self.logger = get_logger("launch")

    def launch(self, token: str, args: list[str] | None = None) -> ActionResult:
        """Launch a direct path, a configured app, or fall back to the OS.

        Args:
            token: Path, application key, alias or synonym
            args: Arguments forwarded to the application

        Returns:
            ActionResult indicating success or failure
        """
        args = list(args or [])

        if paths.is_url(token):
            return self._launch_unconfigured(token, args)

        if paths.is_direct_path(token):
            # Documents and folders go to their default handler
            target = paths.expand(token)
            if not args and paths.exists(target) and not self.platform.is_launchable(target):
                return self._open_default(token)
            return self.run_direct(token, args)

        try:
            target = self._resolver().launch_target(token)
        except ConfigError as e:
            return ActionResult(success=False, message=f"failed to load config: {e}")
        except UnknownAppError:
            return self._launch_unconfigured(token, args)
        except ResolutionError as e:
            return ActionResult(success=False, message=str(e))

        return self._start(token, target, args)

    def run_alias(self, token: str, args: list[str] | None = None) -> ActionResult:
        """Launch a configured application only; unknown names are errors.

        Args:
            token: Application key, alias or synonym
            args: Arguments forwarded to the application

        Returns:
            ActionResult indicating success or failure
        """
        if paths.is_direct_path(token):
            return self.run_direct(token, args)

        try:
            target = self._resolver().launch_target(token)
        except ConfigError as e:
            return ActionResult(success=False, message=f"failed to load config: {e}")
        except ResolutionError as e:
            return ActionResult(success=False, message=str(e))

        return self._start(token, target, list(args or []))

    def run_direct(self, path: str, args: list[str] | None = None) -> ActionResult:
        """Launch an application by filesystem path.

        Args:
            path: Path to an executable or bundle (``~`` and ``.`` expanded)
            args: Arguments forwarded to the application

        Returns:
            ActionResult indicating success or failure
        """
        target = paths.expand(path)
        if not paths.exists(target):
            return ActionResult(success=False, message=f"application not found: {path}")

        return self._start(path, target, list(args or []))

    def launch_many(self, tokens: list[str]) -> ActionResult:
        """Launch several configured applications without arguments.

        Every token is attempted; failures are counted, not raised.

        Args:
            tokens: Application keys, aliases or synonyms

        Returns:
            ActionResult with per-token results in data["results"]
        """
        results = [(token, self.run_alias(token)) for token in tokens]
        return aggregate_results(results, "launch", "Launched")

    def _resolver(self) -> AliasResolver:
        return AliasResolver(self.config_manager.config, self.platform)

    def _start(self, label: str, target: str, args: list[str]) -> ActionResult:
        resolved_args = paths.resolve_args(args)
        self.logger.info("Launching", app=label, target=target, argv=resolved_args)

        result = self.platform.launch(target, resolved_args)
        if not result.success:
            self.logger.error("Launch failed", app=label, error=result.message)
            return ActionResult(
                success=False,
                message=f"failed to launch {label}: {result.message}",
            )

        return ActionResult(
            success=True,
            message=f"Launched: {label}",
            data={"pid": result.pid, "target": target, "args": resolved_args},
        )

    def _launch_unconfigured(self, token: str, args: list[str]) -> ActionResult:
        if args:
            resolved_args = paths.resolve_args(args)
            self.logger.info("Launching unconfigured app", app=token, argv=resolved_args)
            result = self.platform.open_with_app(token, resolved_args)
            if not result.success:
                return ActionResult(
                    success=False,
                    message=f"failed to launch {token}: {result.message}",
                )
            return ActionResult(
                success=True,
                message=f"Launched: {token}",
                data={"pid": result.pid, "target": token, "args": resolved_args},
            )

        return self._open_default(token)

    def _open_default(self, token: str) -> ActionResult:
        target = paths.resolve_target(token) if paths.exists(paths.expand(token)) else token
        self.logger.info("Opening with system default", target=target)
        result = self.platform.open_with_default(target)
        if not result.success:
            return ActionResult(
                success=False,
                message=f"failed to open {token}: {result.message}",
            )
        return ActionResult(
            success=True,
            message=f"Opened: {token}",
            data={"target": target},
        )

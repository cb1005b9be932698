"""Health report over every configured application."""

import json

from openx_core.models.config import AppConfig
from openx_core.models.doctor import AppState, AppStatus, DoctorReport
from openx_core.platforms import PlatformStrategy, get_platform
from openx_core.services.config_manager import ConfigManager
from openx_logging import get_logger


class DoctorActions:
    """Builds point-in-time status reports for the configured applications.

    Configuration errors and an unreadable process table propagate;
    per-application problems are recorded as statuses and never raised.
    """

    def __init__(
        self,
        config_manager: ConfigManager | None = None,
        platform: PlatformStrategy | None = None,
    ):
        self.config_manager = config_manager or ConfigManager()
        self.platform = platform or get_platform()
        self.logger = get_logger("doctor")

    def check_app_status(self, name: str, app: AppConfig) -> AppStatus:
        """Classify one application on this OS.

        Args:
            name: Application key
            app: Application configuration

        Returns:
            AppStatus with availability and running state
        """
        patterns = app.kill_patterns(self.platform)
        running = any(self.platform.is_running(pattern) for pattern in patterns)

        launch_path = app.launch_path(self.platform.name)
        if not launch_path:
            return AppStatus(
                name=name,
                launch_path=f"(no path for {self.platform.name})",
                status=AppState.NO_PATH,
                kill_pattern=", ".join(patterns),
                running=running,
            )

        status = AppState.AVAILABLE if self.platform.app_exists(launch_path) else AppState.MISSING
        return AppStatus(
            name=name,
            launch_path=launch_path,
            status=status,
            kill_pattern=", ".join(patterns),
            running=running,
        )

    def build_report(self) -> DoctorReport:
        """Check every configured application in alphabetical order.

        Raises:
            ConfigError: If the configuration cannot be loaded
            ProcessQueryError: If running state cannot be determined
        """
        config = self.config_manager.config
        report = DoctorReport(
            platform=self.platform.name,
            config_path=str(self.config_manager.config_path),
            aliases=dict(config.aliases),
        )

        for name in sorted(config.apps):
            status = self.check_app_status(name, config.apps[name])
            report.apps.append(status)
            report.summary.add(status)

        self.logger.info(
            "Doctor report built",
            total=report.summary.total,
            available=report.summary.available,
            missing=report.summary.missing,
            running=report.summary.running,
        )
        return report

    def report(self, as_json: bool = True) -> str:
        """Render the report as JSON, or as plain text lines."""
        report = self.build_report()
        if as_json:
            return json.dumps(report.to_dict(), indent=2)

        lines = [f"Platform: {report.platform}", f"Config: {report.config_path}", ""]
        for status in report.apps:
            running = " (running)" if status.running else ""
            lines.append(f"{status.name}: {status.status.value}{running} {status.launch_path}")
        summary = report.summary
        lines.append("")
        lines.append(
            f"{summary.total} apps, {summary.available} available, "
            f"{summary.missing} missing, {summary.running} running"
        )
        return "\n".join(lines)

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class AppState(str, Enum):
    AVAILABLE = "available"
    MISSING = "missing"
    NO_PATH = "no-path"


@dataclass
class AppStatus:
    """Status of a single configured application.

    Attributes:
        name: Application key
        launch_path: Launch target for this OS, or a "(no path for ...)" note
        status: available, missing or no-path
        kill_pattern: Kill patterns joined with ", "
        running: Whether any kill pattern matches a running process
    """

    name: str
    launch_path: str
    status: AppState
    kill_pattern: str = ""
    running: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "launchPath": self.launch_path,
            "status": self.status.value,
            "killPattern": self.kill_pattern,
            "running": self.running,
        }


@dataclass
class DoctorSummary:
    total: int = 0
    available: int = 0
    missing: int = 0
    running: int = 0

    def add(self, status: AppStatus) -> None:
        self.total += 1
        if status.status is AppState.AVAILABLE:
            self.available += 1
        elif status.status is AppState.MISSING:
            self.missing += 1
        if status.running:
            self.running += 1

    def to_dict(self) -> dict[str, int]:
        return {
            "total": self.total,
            "available": self.available,
            "missing": self.missing,
            "running": self.running,
        }


@dataclass
class DoctorReport:
    """Point-in-time health report over all configured applications."""

    platform: str
    config_path: str
    apps: list[AppStatus] = field(default_factory=list)
    aliases: dict[str, str] = field(default_factory=dict)
    summary: DoctorSummary = field(default_factory=DoctorSummary)

    def to_dict(self) -> dict[str, Any]:
        return {
            "platform": self.platform,
            "configPath": self.config_path,
            "apps": [status.to_dict() for status in self.apps],
            "aliases": dict(sorted(self.aliases.items())),
            "summary": self.summary.to_dict(),
        }

from openx_core.models.actions import ActionResult
from openx_core.models.config import AppConfig, OpenxConfig
from openx_core.models.doctor import AppState, AppStatus, DoctorReport, DoctorSummary
from openx_core.models.process import CommandResult, KillResult, ProcessResult

__all__ = [
    "ActionResult",
    "AppConfig",
    "AppState",
    "AppStatus",
    "CommandResult",
    "DoctorReport",
    "DoctorSummary",
    "KillResult",
    "OpenxConfig",
    "ProcessResult",
]

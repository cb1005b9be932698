from dataclasses import dataclass


@dataclass
class CommandResult:
    """Result from running a helper command to completion.

    Attributes:
        success: Whether the command exited with status 0
        message: stdout on success, otherwise stderr (or stdout)
        exit_code: Exit code from the command
        stderr: Any error output
    """

    success: bool
    message: str
    exit_code: int = 0
    stderr: str = ""


@dataclass
class ProcessResult:
    """Result from a launch operation.

    Attributes:
        success: Whether the OS accepted the spawn request
        message: Human-readable message about the result
        pid: Process ID of the spawned child if applicable
    """

    success: bool
    message: str
    pid: int | None = None


@dataclass
class KillResult:
    """Result from terminating the processes matching one pattern.

    Attributes:
        success: Whether no matching process survived
        message: Human-readable message about the result
        killed: Whether any process matched and was terminated
    """

    success: bool
    message: str
    killed: bool = False

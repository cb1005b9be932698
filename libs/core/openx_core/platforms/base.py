"""Platform strategy interface shared by every supported OS."""

import os
import posixpath
import signal
import subprocess
import sys
from collections.abc import Callable, Iterable

from openx_core import paths
from openx_core.errors import ProcessQueryError
from openx_core.models.process import CommandResult, KillResult, ProcessResult
from openx_logging import get_logger

Attempt = Callable[[], ProcessResult | KillResult]

# POSIX full process listing; ``command`` keeps the whole argument vector
PROCESS_LIST_COMMAND = ("ps", "-Ao", "pid=,command=")


def first_success(attempts: Iterable[Attempt]):
    """Run attempts in order and return the first successful result.

    When every attempt fails, the last failure is returned.
    """
    result = None
    for attempt in attempts:
        result = attempt()
        if result.success:
            return result
    return result


class PlatformStrategy:
    """OS-specific launch, termination and lookup behaviour.

    Subclasses override the pieces that differ per OS. One instance is
    selected per process by ``openx_core.platforms.get_platform``.
    """

    name = "generic"
    path_module = posixpath

    def __init__(self):
        self.logger = get_logger("platform")

    # ----------------------------------------------------------------------
    # Kill pattern derivation
    # ----------------------------------------------------------------------

    def base_name(self, launch_path: str) -> str:
        return self.path_module.basename(launch_path.rstrip("/\\"))

    def derive_kill_patterns(self, launch_path: str) -> list[str]:
        """Derive process-name patterns from a launch path."""
        base = self.base_name(launch_path)
        return [base] if base else []

    # ----------------------------------------------------------------------
    # Launching
    # ----------------------------------------------------------------------

    def launch(self, target: str, args: list[str]) -> ProcessResult:
        """Start a resolved target with arguments."""
        program, leading = paths.split_command(target)
        command = program if paths.is_direct_path(program) else paths.which(program) or program
        return self.spawn([command, *leading, *args])

    def spawn(self, command: list[str]) -> ProcessResult:
        """Start a detached child process without waiting for it."""
        try:
            process = subprocess.Popen(
                command,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                **self._detach_options(),
            )
        except OSError as e:
            self.logger.warning("Spawn failed", program=command[0], error=str(e))
            return ProcessResult(
                success=False,
                message=f"failed to start {command[0]}: {e}",
            )

        self.logger.info("Spawned process", program=command[0], pid=process.pid)
        return ProcessResult(
            success=True,
            message=f"Started {command[0]} (PID {process.pid})",
            pid=process.pid,
        )

    def _detach_options(self) -> dict:
        return {"start_new_session": True}

    def default_opener(self) -> list[list[str]]:
        """Commands that open a file/URL with its default handler, in order."""
        return []

    def open_with_default(self, target: str) -> ProcessResult:
        """Open a file, URL or unknown name with the system default handler."""
        openers = self.default_opener()
        if not openers:
            return ProcessResult(
                success=False,
                message=f"unsupported operating system: {sys.platform}",
            )

        return first_success(
            (lambda opener=opener: self._run_opener([*opener, target]))
            for opener in openers
        )

    def open_with_app(self, app: str, args: list[str]) -> ProcessResult:
        """Run an unconfigured application name or path with arguments."""
        return self.spawn([app, *args])

    def _run_opener(self, command: list[str]) -> ProcessResult:
        result = self.run_command(*command)
        if result.success:
            return ProcessResult(success=True, message=f"Opened with {command[0]}")
        return ProcessResult(
            success=False,
            message=f"{command[0]} failed: {result.message or f'exit status {result.exit_code}'}",
        )

    # ----------------------------------------------------------------------
    # Termination and liveness
    # ----------------------------------------------------------------------

    def terminate(self, pattern: str) -> KillResult:
        """Terminate every process matching the pattern."""
        return KillResult(
            success=False,
            message=f"unsupported platform: {sys.platform}",
        )

    def is_running(self, pattern: str) -> bool:
        return False

    def is_launchable(self, path: str) -> bool:
        """Whether an existing path is a program rather than a document."""
        return paths.is_executable(path)

    def app_exists(self, launch_path: str) -> bool:
        """Check that a launch target exists on disk or on PATH."""
        if paths.is_direct_path(launch_path):
            return paths.exists(launch_path)

        program, _ = paths.split_command(launch_path)
        return paths.which(program) is not None

    # ----------------------------------------------------------------------
    # Helpers
    # ----------------------------------------------------------------------

    def run_command(self, *args: str) -> CommandResult:
        """Run a helper command to completion and capture its output.

        Args:
            *args: Program followed by its arguments

        Returns:
            CommandResult with command output
        """
        try:
            result = subprocess.run(
                list(args),
                capture_output=True,
                text=True,
                check=False,
            )
        except FileNotFoundError:
            return CommandResult(
                success=False,
                message=f"{args[0]} command not found",
                exit_code=127,
            )
        except (OSError, subprocess.SubprocessError) as e:
            return CommandResult(
                success=False,
                message=f"Command failed: {e}",
                exit_code=1,
                stderr=str(e),
            )

        success = result.returncode == 0
        message = result.stdout if success else result.stderr or result.stdout

        return CommandResult(
            success=success,
            message=message.strip(),
            exit_code=result.returncode,
            stderr=result.stderr.strip(),
        )


class PosixPlatform(PlatformStrategy):
    """Shared ps/kill based process handling for macOS and Linux."""

    def matching_pids(self, pattern: str) -> list[int]:
        """PIDs whose full command line contains the pattern literally.

        The invoking process is excluded since its own arguments usually
        contain the pattern, and so is the ``ps`` listing itself.

        Raises:
            ProcessQueryError: If the process table cannot be read
        """
        if not pattern:
            return []

        result = self.run_command(*PROCESS_LIST_COMMAND)
        if not result.success:
            raise ProcessQueryError(
                f"cannot list processes: {result.message or f'exit status {result.exit_code}'}"
            )

        own = {os.getpid(), os.getppid()}
        listing = " ".join(PROCESS_LIST_COMMAND)
        pids = []
        for line in result.message.splitlines():
            pid, _, command = line.strip().partition(" ")
            command = command.strip()
            if not pid.isdigit() or int(pid) in own or command == listing:
                continue
            if pattern in command:
                pids.append(int(pid))
        return pids

    def is_running(self, pattern: str) -> bool:
        """Whether any process matches.

        Raises:
            ProcessQueryError: If the process table cannot be read
        """
        return bool(self.matching_pids(pattern))

    def force_kill(self, pattern: str) -> KillResult:
        """Send SIGKILL to every process matching the pattern."""
        try:
            pids = self.matching_pids(pattern)
        except ProcessQueryError as e:
            self.logger.error("Process lookup failed", pattern=pattern, error=str(e))
            return KillResult(success=False, message=str(e))

        if not pids:
            return KillResult(success=True, message=f"No running processes match: {pattern}")

        denied = []
        killed = []
        for pid in pids:
            try:
                os.kill(pid, signal.SIGKILL)
                killed.append(pid)
            except ProcessLookupError:
                # Exited between listing and kill
                continue
            except PermissionError:
                denied.append(pid)

        if denied:
            self.logger.warning("Permission denied", pattern=pattern, pids=denied)
            return KillResult(
                success=False,
                message=f"Permission denied to kill process(es) {', '.join(map(str, denied))} matching {pattern}",
                killed=bool(killed),
            )

        self.logger.info("Killed processes", pattern=pattern, pids=killed)
        return KillResult(
            success=True,
            message=f"Killed all processes matching: {pattern}",
            killed=bool(killed),
        )

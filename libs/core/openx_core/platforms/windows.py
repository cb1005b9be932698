"""Windows platform strategy."""

import ntpath
import os
import subprocess

from openx_core.errors import ProcessQueryError
from openx_core.models.process import KillResult
from openx_core.platforms.base import PlatformStrategy, first_success

EXE_SUFFIX = ".exe"
PROGRAM_SUFFIXES = (".exe", ".bat", ".cmd", ".com")


class WindowsPlatform(PlatformStrategy):
    """Windows: detached spawn, ``start`` for defaults, taskkill by image name."""

    name = "windows"
    path_module = ntpath

    def derive_kill_patterns(self, launch_path: str) -> list[str]:
        base = self.base_name(launch_path)
        if not base:
            return []
        if base.lower().endswith(EXE_SUFFIX):
            return [base[: -len(EXE_SUFFIX)]]
        return [base]

    def _detach_options(self) -> dict:
        flags = getattr(subprocess, "DETACHED_PROCESS", 0) | getattr(
            subprocess, "CREATE_NEW_PROCESS_GROUP", 0
        )
        return {"creationflags": flags}

    def is_launchable(self, path: str) -> bool:
        # Every file passes an X_OK check on Windows
        return os.path.isfile(path) and path.lower().endswith(PROGRAM_SUFFIXES)

    def default_opener(self) -> list[list[str]]:
        return [["cmd", "/c", "start", ""]]

    def image_names(self, pattern: str) -> list[str]:
        """Image names to try: with the .exe suffix first, then as given."""
        if pattern.lower().endswith(EXE_SUFFIX):
            return [pattern]
        return [pattern + EXE_SUFFIX, pattern]

    def terminate(self, pattern: str) -> KillResult:
        result = first_success(
            (lambda image=image: self._taskkill(image))
            for image in self.image_names(pattern)
        )
        if result.success:
            self.logger.info("Killed processes", pattern=pattern)
            return result

        # taskkill also fails when nothing matched
        try:
            running = self.is_running(pattern)
        except ProcessQueryError as e:
            return KillResult(success=False, message=f"{result.message}; {e}")

        if not running:
            return KillResult(success=True, message=f"No running processes match: {pattern}")
        return result

    def _taskkill(self, image: str) -> KillResult:
        result = self.run_command("taskkill", "/F", "/IM", image)
        if result.success:
            return KillResult(
                success=True,
                message=f"Killed all processes matching: {image}",
                killed=True,
            )
        return KillResult(
            success=False,
            message=f"taskkill /IM {image} failed: {result.message or f'exit status {result.exit_code}'}",
        )

    def is_running(self, pattern: str) -> bool:
        """Whether any image name starts with the pattern.

        Raises:
            ProcessQueryError: If tasklist fails
        """
        if not pattern:
            return False

        result = self.run_command("tasklist", "/NH", "/FI", f"IMAGENAME eq {pattern}*")
        if not result.success:
            raise ProcessQueryError(
                f"cannot list processes: {result.message or f'exit status {result.exit_code}'}"
            )
        return pattern.lower() in result.message.lower()

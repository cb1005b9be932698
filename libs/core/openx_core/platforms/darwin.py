"""macOS platform strategy."""

import os
from types import MappingProxyType

from openx_core import paths
from openx_core.errors import ProcessQueryError
from openx_core.models.process import KillResult, ProcessResult
from openx_core.platforms.base import PosixPlatform, first_success

BUNDLE_SUFFIX = ".app"

# Bundle display names whose running process is called something else
PROCESS_NAME_EXCEPTIONS = MappingProxyType({
    "Visual Studio Code": "Code",
    "Android Studio": "studio",
    "IntelliJ IDEA": "idea",
})

_QUIT_SCRIPT = """
tell application "System Events"
    set appList to (name of every application process whose name contains "{name}")
    repeat with appProcess in appList
        try
            tell application appProcess to quit
        end try
    end repeat
end tell
"""


def is_bundle(path: str) -> bool:
    return path.rstrip("/").lower().endswith(BUNDLE_SUFFIX)


def _applescript_string(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')


class DarwinPlatform(PosixPlatform):
    """macOS: bundle executables with an ``open`` fallback, quit then kill."""

    name = "darwin"

    def derive_kill_patterns(self, launch_path: str) -> list[str]:
        base = self.base_name(launch_path)
        if not base:
            return []
        if is_bundle(base):
            app_name = base[: -len(BUNDLE_SUFFIX)]
            return [PROCESS_NAME_EXCEPTIONS.get(app_name, app_name)]
        return [base]

    # ----------------------------------------------------------------------
    # Launching
    # ----------------------------------------------------------------------

    def bundle_candidates(self, bundle: str) -> list[str]:
        """Locations to search for a bundle given by path or bare name."""
        if os.path.isabs(bundle) or paths.is_direct_path(bundle):
            return [bundle]

        return [
            os.path.join("/Applications", bundle),
            os.path.join(paths.home_dir(), "Applications", bundle),
            os.path.join("/System/Applications", bundle),
            bundle,
        ]

    def find_bundle_executable(self, bundle: str) -> str | None:
        """Locate the executable inside ``<bundle>/Contents/MacOS``.

        The file named after the bundle is preferred, otherwise the first
        executable file in name order.
        """
        for candidate in self.bundle_candidates(bundle):
            candidate = candidate.rstrip("/")
            if not is_bundle(candidate) or not paths.exists(candidate):
                continue

            macos_dir = os.path.join(candidate, "Contents", "MacOS")
            base = os.path.basename(candidate)[: -len(BUNDLE_SUFFIX)]

            conventional = os.path.join(macos_dir, base)
            if paths.is_executable(conventional):
                return conventional

            try:
                entries = sorted(os.listdir(macos_dir))
            except OSError:
                continue

            for entry in entries:
                exec_path = os.path.join(macos_dir, entry)
                if paths.is_executable(exec_path):
                    return exec_path

        return None

    def launch(self, target: str, args: list[str]) -> ProcessResult:
        if not is_bundle(target):
            return super().launch(target, args)

        return first_success([
            lambda: self._spawn_bundle_executable(target, args),
            lambda: self._open_bundle(target, args),
        ])

    def _spawn_bundle_executable(self, bundle: str, args: list[str]) -> ProcessResult:
        exec_path = self.find_bundle_executable(bundle)
        if exec_path is None:
            self.logger.debug("No bundle executable, falling back to open", bundle=bundle)
            return ProcessResult(
                success=False,
                message=f"cannot find executable for {bundle}",
            )
        return self.spawn([exec_path, *args])

    def _open_bundle(self, bundle: str, args: list[str]) -> ProcessResult:
        command = ["open", "-a", bundle]
        if args:
            command += ["--args", *args]

        result = self.spawn(command)
        if not result.success:
            return ProcessResult(
                success=False,
                message=f"failed to launch {bundle} with 'open' command: {result.message}",
            )
        return result

    def is_launchable(self, path: str) -> bool:
        return is_bundle(path) or paths.is_executable(path)

    def default_opener(self) -> list[list[str]]:
        return [["open"]]

    def open_with_app(self, app: str, args: list[str]) -> ProcessResult:
        return self.spawn(["open", "-a", app, *args])

    # ----------------------------------------------------------------------
    # Termination
    # ----------------------------------------------------------------------

    def terminate(self, pattern: str) -> KillResult:
        try:
            running = self.is_running(pattern)
        except ProcessQueryError as e:
            return KillResult(success=False, message=str(e))

        if not running:
            return KillResult(success=True, message=f"No running processes match: {pattern}")

        return first_success([
            lambda: self.graceful_quit(pattern),
            lambda: self.force_kill(pattern),
        ])

    def graceful_quit(self, pattern: str) -> KillResult:
        """Ask matching applications to quit; succeeds only if none remain."""
        script = _QUIT_SCRIPT.format(name=_applescript_string(pattern))
        result = self.run_command("osascript", "-e", script)

        if not result.success:
            self.logger.debug("Graceful quit failed", pattern=pattern, error=result.message)
            return KillResult(success=False, message=f"osascript failed: {result.message}")

        try:
            still_running = self.is_running(pattern)
        except ProcessQueryError as e:
            return KillResult(success=False, message=str(e))

        if still_running:
            return KillResult(
                success=False,
                message=f"Processes matching {pattern} still running after quit",
            )

        self.logger.info("Quit application", pattern=pattern)
        return KillResult(
            success=True,
            message=f"Quit all applications matching: {pattern}",
            killed=True,
        )

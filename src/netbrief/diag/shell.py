"""Shell helpers used by every netbrief section."""

from __future__ import annotations

import shlex
import subprocess

from netbrief.diag.logging_utils import DEFAULT_LOGGER, LoggingManager
from netbrief.diag.types import CommandResult

TIMEOUT_RC = 124
SPAWN_FAILURE_RC = 255


class ShellRunner:
    """Execute external tools with consistent logging."""

    def __init__(self, *, logger: LoggingManager = DEFAULT_LOGGER) -> None:
        self.logger = logger

    def cmd_str(self, cmd: list[str]) -> str:
        """Return a shell-escaped string for display."""
        return " ".join(shlex.quote(part) for part in cmd)

    def run_cmd(
        self,
        cmd: list[str],
        timeout: float = 10,
    ) -> CommandResult:
        """Run command and capture stdout/stderr."""
        self.logger.debug("Running: %s", self.cmd_str(cmd))
        try:
            proc = subprocess.run(
                cmd,
                stdin=subprocess.DEVNULL,
                capture_output=True,
                timeout=timeout,
                text=True,
                errors="replace",
            )
        except subprocess.TimeoutExpired:
            self.logger.debug("Command timed out after %ss: %s", timeout, self.cmd_str(cmd))
            return CommandResult(
                cmd=cmd,
                returncode=TIMEOUT_RC,
                stdout="",
                stderr=f"timed out after {timeout}s",
            )
        except Exception as exc:  # noqa: BLE001 - broad to log spawn issues
            self.logger.debug("Command failed to start: %s", exc)
            return CommandResult(
                cmd=cmd,
                returncode=SPAWN_FAILURE_RC,
                stdout="",
                stderr=str(exc),
            )

        self.logger.debug(
            "Command rc=%s stdout=%r stderr=%r",
            proc.returncode,
            proc.stdout,
            proc.stderr,
        )
        return CommandResult(
            cmd=cmd,
            returncode=proc.returncode,
            stdout=proc.stdout,
            stderr=proc.stderr,
        )

    def run_attached(self, cmd: list[str]) -> int:
        """Run a command attached to the current terminal (used for the pager)."""
        self.logger.debug("Running attached: %s", self.cmd_str(cmd))
        try:
            proc = subprocess.run(cmd, check=False)
        except OSError as exc:
            self.logger.warning("Could not start %s: %s", cmd[0], exc)
            return SPAWN_FAILURE_RC
        return proc.returncode


DEFAULT_SHELL = ShellRunner()

"""Reusable test utilities and recording stubs for the test suite."""

from __future__ import annotations

import contextlib

from netbrief.diag.types import CommandResult, RunOptions, SectionContext, Tool, ToolAvailability


class RecordingLogger:
    """In-memory logger capturing log messages and setup calls."""

    def __init__(self):
        self.messages: list[str] = []
        self.setup_calls: list[bool] = []

    def setup(self, debug: bool) -> None:
        self.setup_calls.append(debug)

    def warning(self, msg: str, *args) -> None:
        self.messages.append(f"WARNING:{msg % args if args else msg}")

    def debug(self, msg: str, *args) -> None:  # pragma: no cover - simple passthrough
        self.messages.append(f"DEBUG:{msg % args if args else msg}")


class FakeShell:
    """Record issued commands and return canned results.

    Commands without a canned response succeed with ``default_stdout``.
    """

    def __init__(
        self,
        responses: dict[tuple[str, ...], CommandResult] | None = None,
        default_stdout: str = "ok\n",
        default_rc: int = 0,
    ):
        self.responses = responses or {}
        self.default_stdout = default_stdout
        self.default_rc = default_rc
        self.calls: list[list[str]] = []
        self.attached: list[list[str]] = []

    def cmd_str(self, cmd: list[str]) -> str:
        return " ".join(cmd)

    def run_cmd(self, cmd: list[str], timeout: float = 10) -> CommandResult:
        self.calls.append(cmd)
        key = tuple(cmd)
        if key in self.responses:
            return self.responses[key]
        return CommandResult(cmd=list(cmd), returncode=self.default_rc, stdout=self.default_stdout, stderr="")

    def run_attached(self, cmd: list[str]) -> int:
        self.attached.append(cmd)
        return 0

    def executables(self) -> list[str]:
        return [cmd[0] for cmd in self.calls]


def null_spinner(title: str):
    return contextlib.nullcontext()


def make_context(
    tools: set[Tool] | frozenset[Tool] = frozenset(),
    shell: FakeShell | None = None,
    **options,
) -> SectionContext:
    return SectionContext(
        tools=ToolAvailability.of(tools),
        options=RunOptions(**options),
        shell=shell or FakeShell(),
        spinner=null_spinner,
    )


def result(cmd: list[str], returncode: int = 0, stdout: str = "", stderr: str = "") -> CommandResult:
    return CommandResult(cmd=cmd, returncode=returncode, stdout=stdout, stderr=stderr)

"""Application wiring for a netbrief run."""

from __future__ import annotations

import sys
from typing import TextIO

from netbrief.diag.capabilities import detect_tools, missing_ui_modules
from netbrief.diag.logging_utils import DEFAULT_LOGGER, LoggingManager
from netbrief.diag.runner import Printer, run_sections
from netbrief.diag.sections import SECTIONS
from netbrief.diag.selection import SelectionPromptError, resolve_selection
from netbrief.diag.shell import DEFAULT_SHELL, ShellRunner
from netbrief.diag.sink import output_sink
from netbrief.diag.types import RunOptions, Section, SectionContext, ToolAvailability


class NetbriefSideEffects:
    """Handle logging and terminal messages outside the section output."""

    def __init__(
        self,
        logger: LoggingManager = DEFAULT_LOGGER,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        self.logger = logger
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr

    def setup_logging(self, debug: bool) -> None:
        self.logger.setup(debug)

    def warn_missing_ui(self, missing: list[str]) -> None:
        print(
            f"netbrief: {', '.join(missing)} required for styled output "
            f"(install with: pip install {' '.join(missing)}).",
            file=self.stderr,
        )

    def warn_no_pager(self, message: str) -> None:
        print(message, file=self.stderr)

    def report_prompt_failure(self, exc: Exception) -> None:
        print(f"netbrief: {exc}", file=self.stderr)

    def report_nothing_selected(self) -> None:
        print("No sections selected. Exiting.", file=self.stdout)

    def log_interrupted(self) -> None:
        self.logger.warning("Interrupted by user.")


class NetbriefApp:
    """Object-oriented wrapper for one netbrief invocation."""

    def __init__(
        self,
        options: RunOptions,
        side_effects: NetbriefSideEffects | None = None,
        shell: ShellRunner = DEFAULT_SHELL,
    ) -> None:
        self.options = options
        self.side_effects = side_effects or NetbriefSideEffects()
        self.shell = shell

    def run(self) -> int:
        self.side_effects.setup_logging(self.options.debug)

        missing = missing_ui_modules()
        if missing:
            self.side_effects.warn_missing_ui(missing)
            return 1

        tools = self._detect_tools()

        try:
            selection = resolve_selection(SECTIONS, self.options.interactive, prompt=self._prompt)
        except SelectionPromptError as exc:
            self.side_effects.report_prompt_failure(exc)
            return 1

        if not selection:
            self.side_effects.report_nothing_selected()
            return 0

        try:
            self._run_selection(selection, tools)
        except KeyboardInterrupt:
            self.side_effects.log_interrupted()
            return 1
        return 0

    def _detect_tools(self) -> ToolAvailability:
        return detect_tools()

    def _run_selection(self, selection: list[Section], tools: ToolAvailability) -> None:
        color, width = self._terminal_profile()
        ctx = SectionContext(
            tools=tools,
            options=self.options,
            shell=self.shell,
            spinner=self._spinner,
        )
        with output_sink(tools.pager, notify=self.side_effects.warn_no_pager, shell=self.shell) as stream:
            run_sections(selection, ctx, self._printer(stream, color, width))

    # ui is imported lazily; run() reports missing styled console modules first.

    def _prompt(self, labels: list[str]) -> list[str] | None:
        from netbrief.diag import ui

        return ui.choose_sections(labels)

    def _spinner(self, title: str):
        from netbrief.diag import ui

        return ui.spinner(title)

    def _terminal_profile(self) -> tuple[bool, int]:
        from netbrief.diag import ui

        return ui.terminal_profile()

    def _printer(self, stream: TextIO, color: bool, width: int) -> Printer:
        from netbrief.diag import ui

        if not color:
            return ui.SectionPrinter(stream)
        return ui.SectionPrinter(stream, color=True, width=width)


class NetbriefRunner:
    """Facade for constructing and executing the netbrief application."""

    def __init__(self) -> None:
        self._app_class = NetbriefApp

    def run(
        self,
        verbose: bool = False,
        interactive: bool = False,
        ping: bool = True,
        public_ip: bool = True,
        debug: bool = False,
    ) -> int:
        options = RunOptions(
            verbose=verbose,
            interactive=interactive,
            ping=ping,
            public_ip=public_ip,
            debug=debug,
        )
        return self._app_class(options).run()


DEFAULT_RUNNER = NetbriefRunner()


if __name__ == "__main__":
    raise SystemExit(DEFAULT_RUNNER.run())

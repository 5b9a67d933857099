"""Run the selected sections under styled headers."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from netbrief.diag.logging_utils import DEFAULT_LOGGER
from netbrief.diag.types import Section, SectionContext


class Printer(Protocol):
    def header(self, title: str) -> None: ...

    def write(self, text: str) -> None: ...

    def banner(self) -> None: ...


def run_section(section: Section, ctx: SectionContext) -> str:
    """Invoke one handler, turning unexpected errors into inline text."""
    try:
        text = section.handler(ctx)
    except Exception as exc:  # noqa: BLE001 - one broken section must not stop the run
        DEFAULT_LOGGER.warning("Section %r failed: %s", section.label, exc)
        return f"Section failed: {exc}\n"
    return text or "(no output)\n"


def run_sections(selection: Sequence[Section], ctx: SectionContext, printer: Printer) -> None:
    for section in selection:
        DEFAULT_LOGGER.debug("Running section: %s", section.label)
        printer.header(section.title)
        printer.write(run_section(section, ctx))
    printer.banner()

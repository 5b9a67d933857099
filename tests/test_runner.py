"""Tests for running sections under headers."""

import io

from netbrief.diag import runner
from netbrief.diag.types import Section, SectionId
from netbrief.diag.ui import SectionPrinter
from tests.helpers import make_context


class RecordingPrinter:
    def __init__(self):
        self.events: list[tuple[str, str]] = []

    def header(self, title: str) -> None:
        self.events.append(("header", title))

    def write(self, text: str) -> None:
        self.events.append(("write", text))

    def banner(self) -> None:
        self.events.append(("banner", ""))


def _section(section_id: SectionId, title: str, text: str) -> Section:
    return Section(section_id, title, lambda ctx: text)


def test_sections_run_in_order_with_headers_and_banner():
    printer = RecordingPrinter()
    selection = [
        _section(SectionId.ROUTES, "Routing table", "default via 10.0.0.1\n"),
        _section(SectionId.DNS, "DNS", "nameserver 10.0.0.53\n"),
    ]

    runner.run_sections(selection, make_context(), printer)

    assert printer.events == [
        ("header", "Routing table"),
        ("write", "default via 10.0.0.1\n"),
        ("header", "DNS"),
        ("write", "nameserver 10.0.0.53\n"),
        ("banner", ""),
    ]


def test_failing_handler_does_not_stop_the_run(monkeypatch):
    warnings: list[str] = []

    class _Logger:
        def debug(self, *args):
            return None

        def warning(self, msg, *args):
            warnings.append(msg % args)

    def _boom(ctx):
        raise OSError("device vanished")

    monkeypatch.setattr(runner, "DEFAULT_LOGGER", _Logger())
    printer = RecordingPrinter()
    selection = [
        Section(SectionId.WIRELESS, "Wireless", _boom),
        _section(SectionId.NEIGHBORS, "Neighbors", "10.0.0.1 lladdr aa:bb\n"),
    ]

    runner.run_sections(selection, make_context(), printer)

    assert ("write", "Section failed: device vanished\n") in printer.events
    assert ("header", "Neighbors") in printer.events
    assert printer.events[-1] == ("banner", "")
    assert any("Wireless" in msg for msg in warnings)


def test_section_printer_passes_tool_output_verbatim():
    stream = io.StringIO()
    printer = SectionPrinter(stream, color=False, width=80)

    printer.header("DNS configuration and resolution")
    printer.write("[bold]not markup[/bold]\n")
    printer.banner()

    rendered = stream.getvalue()
    assert "DNS configuration and resolution" in rendered
    assert "[bold]not markup[/bold]" in rendered
    assert rendered.rstrip().endswith("netbrief complete.")

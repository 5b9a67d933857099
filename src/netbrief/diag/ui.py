"""Styled console output and prompts built on rich and questionary."""

from __future__ import annotations

import contextlib
from collections.abc import Iterator
from typing import TextIO

import questionary
from questionary import Choice
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from netbrief.diag.selection import SelectionPromptError

HEADER_COLOR = "#89b4fa"
BANNER_COLOR = "#a6e3a1"
COMPLETION_MESSAGE = "netbrief complete."
CHOOSER_HEADER = "Select sections to display (SPACE to toggle, ENTER to confirm):"

PROMPT_STYLE = questionary.Style(
    [
        ("pointer", f"fg:{HEADER_COLOR} bold"),
        ("highlighted", f"fg:{HEADER_COLOR}"),
        ("selected", f"fg:{BANNER_COLOR}"),
    ]
)


class SectionPrinter:
    """Render section headers, bodies and the completion banner."""

    def __init__(self, stream: TextIO, *, color: bool | None = None, width: int | None = None) -> None:
        self.console = Console(
            file=stream,
            force_terminal=color,
            width=width,
            highlight=False,
        )

    def header(self, title: str) -> None:
        self.console.line()
        self.console.print(
            Panel(
                Text(title, style="bold"),
                box=box.SQUARE,
                border_style=HEADER_COLOR,
                padding=(0, 1),
                expand=False,
            )
        )
        self.console.line()

    def write(self, text: str) -> None:
        # Tool output is passed through verbatim: no markup, no wrapping.
        self.console.out(text.rstrip("\n"), highlight=False)

    def banner(self, message: str = COMPLETION_MESSAGE) -> None:
        self.console.line()
        self.console.print(Text(message, style=f"bold {BANNER_COLOR}"))


def terminal_profile() -> tuple[bool, int]:
    """Return whether stdout is a color terminal and its width."""
    console = Console()
    return console.is_terminal, console.width


@contextlib.contextmanager
def spinner(title: str) -> Iterator[None]:
    """Show a spinner on stderr while a blocking probe runs."""
    console = Console(stderr=True)
    with console.status(title, spinner="dots", spinner_style=HEADER_COLOR):
        yield


def choose_sections(labels: list[str]) -> list[str] | None:
    """Let the user toggle sections; None means the prompt was cancelled."""
    try:
        return questionary.checkbox(
            CHOOSER_HEADER,
            choices=[Choice(label, value=label) for label in labels],
            style=PROMPT_STYLE,
        ).unsafe_ask()
    except KeyboardInterrupt:
        return None
    except Exception as exc:  # noqa: BLE001 - prompt_toolkit raises assorted terminal errors
        detail = str(exc) or type(exc).__name__
        raise SelectionPromptError(f"could not show section chooser: {detail}") from exc

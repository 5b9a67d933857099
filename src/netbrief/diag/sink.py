"""Scoped output destination: the terminal, or a temporary file paged afterwards."""

from __future__ import annotations

import contextlib
import os
import sys
import tempfile
from collections.abc import Callable, Iterator
from typing import TextIO

from netbrief.diag.logging_utils import DEFAULT_LOGGER
from netbrief.diag.shell import DEFAULT_SHELL, ShellRunner
from netbrief.diag.types import PAGER_TOOL

PAGER_ARGS = ["--paging=always", "--plain", "--theme=ansi"]
NO_PAGER_ADVISORY = f"netbrief: {PAGER_TOOL.value} not found; output will not be paged."


def pager_command(path: str) -> list[str]:
    return [PAGER_TOOL.value, *PAGER_ARGS, path]


@contextlib.contextmanager
def output_sink(
    pager_available: bool,
    *,
    notify: Callable[[str], None],
    shell: ShellRunner = DEFAULT_SHELL,
) -> Iterator[TextIO]:
    """Yield the stream all section output should be written to.

    Without a pager the real stdout is yielded and ``notify`` receives a
    one-line advisory. With a pager, stdout is redirected into a fresh
    temporary file for the duration of the block; on exit, whether the block
    finished, raised, or was interrupted, stdout is restored, the pager shows
    the file, and the file is removed.
    """

    if not pager_available:
        notify(NO_PAGER_ADVISORY)
        yield sys.stdout
        return

    buffer = tempfile.NamedTemporaryFile(
        "w", prefix="netbrief.", suffix=".txt", encoding="utf-8", delete=False
    )
    path = buffer.name
    DEFAULT_LOGGER.debug("Buffering output in %s", path)
    try:
        try:
            with buffer:
                with contextlib.redirect_stdout(buffer):
                    yield buffer
        finally:
            rc = shell.run_attached(pager_command(path))
            if rc != 0:
                DEFAULT_LOGGER.debug("Pager exited with rc=%s", rc)
    finally:
        with contextlib.suppress(FileNotFoundError):
            os.unlink(path)

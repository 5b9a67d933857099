"""Detect which external tools and UI modules are available."""

from __future__ import annotations

import importlib.util
import shutil
from collections.abc import Callable

from netbrief.diag.logging_utils import DEFAULT_LOGGER
from netbrief.diag.types import Tool, ToolAvailability

UI_MODULES = ("rich", "questionary")


def detect_tools(which: Callable[[str], str | None] = shutil.which) -> ToolAvailability:
    """Probe PATH once for every known tool.

    A missing tool is an ordinary outcome; sections consult the returned
    snapshot and degrade on their own.
    """

    found = [tool for tool in Tool if which(tool.value) is not None]
    availability = ToolAvailability.of(found)
    DEFAULT_LOGGER.debug("Tools detected: %s", availability.as_dict())
    return availability


def missing_ui_modules(
    find_spec: Callable[[str], object | None] = importlib.util.find_spec,
) -> list[str]:
    """Return the styled-console modules that cannot be imported."""
    return [name for name in UI_MODULES if find_spec(name) is None]

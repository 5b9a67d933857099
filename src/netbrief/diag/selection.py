"""Decide which sections run for this invocation."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from netbrief.diag.logging_utils import DEFAULT_LOGGER
from netbrief.diag.types import Section


class SelectionPromptError(RuntimeError):
    """Raised when the section chooser cannot be shown."""


SectionPrompt = Callable[[list[str]], "list[str] | None"]


def resolve_selection(
    sections: Sequence[Section],
    interactive: bool,
    prompt: SectionPrompt | None = None,
) -> list[Section]:
    """Return the sections to run, in registry order.

    Without ``interactive`` every section runs. Otherwise ``prompt`` receives
    the section labels and returns the chosen labels, or None when the user
    cancelled. An empty result means nothing should run. Errors raised by the
    prompt propagate to the caller.
    """

    if not interactive:
        return list(sections)

    if prompt is None:
        raise ValueError("interactive selection requires a prompt")

    chosen = prompt([section.label for section in sections])
    if not chosen:
        DEFAULT_LOGGER.debug("Interactive selection returned nothing: %r", chosen)
        return []

    wanted = set(chosen)
    unknown = wanted.difference(section.label for section in sections)
    if unknown:
        DEFAULT_LOGGER.debug("Ignoring unknown section labels: %s", sorted(unknown))

    return [section for section in sections if section.label in wanted]

#!/usr/bin/env python3
"""Launcher for the netbrief CLI from a source checkout.

Adds the local ``src`` directory to ``sys.path`` so netbrief can be run
without installing the package. All arguments are forwarded to the CLI.
"""

from __future__ import annotations

import sys
from pathlib import Path


def main(argv: list[str] | None = None) -> None:
    """Invoke the CLI, ensuring the local source tree is importable."""
    project_root = Path(__file__).resolve().parents[1]
    src_dir = project_root / "src"
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))

    from netbrief.cli import cli

    raise SystemExit(cli.main(argv))


if __name__ == "__main__":
    main()

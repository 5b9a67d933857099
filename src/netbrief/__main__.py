from __future__ import annotations

import sys
from pathlib import Path


def _ensure_package_on_path() -> None:
    """Insert the ``src`` directory into ``sys.path`` when run as a script.

    Running ``python src/netbrief/__main__.py`` puts this file's directory at
    the front of ``sys.path``, so absolute ``netbrief`` imports would fail
    without the parent directory on the path as well.
    """

    package_dir = Path(__file__).resolve().parent
    project_root = package_dir.parent
    project_root_str = str(project_root)
    if project_root_str not in sys.path:
        sys.path.insert(0, project_root_str)


def _load_cli():
    _ensure_package_on_path()
    from netbrief.cli import cli as netbrief_cli

    return netbrief_cli


cli = _load_cli()


def main() -> None:
    """Entrypoint for ``python -m netbrief``."""

    raise SystemExit(cli.main())


if __name__ == "__main__":
    main()

"""Console entrypoint for netbrief."""

from __future__ import annotations

import typer

from netbrief.diag.cli import DEFAULT_RUNNER

PROG_NAME = "netbrief"
USAGE_ERROR_RC = 2
CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

HELP = """netbrief - concise but rich network diagnostic overview.

Output is automatically paged through bat when available.

\b
Examples:
  netbrief
  netbrief --verbose
  netbrief --interactive --verbose
  netbrief --no-ping --no-public-ip
"""


class NetbriefCLI:
    """Object-oriented wrapper for the Typer command-line interface."""

    def __init__(self) -> None:
        self.runner = DEFAULT_RUNNER
        self.app = typer.Typer(
            help=HELP,
            add_completion=False,
            context_settings=CONTEXT_SETTINGS,
        )
        self.app.command(help=HELP, context_settings=CONTEXT_SETTINGS)(self._main)

    def _main(
        self,
        verbose: bool = typer.Option(
            False,
            "--verbose",
            "-v",
            help="Show more detailed information (full socket lists, etc.).",
        ),
        interactive: bool = typer.Option(
            False,
            "--interactive",
            "-i",
            help="Choose which sections to display from an interactive menu.",
        ),
        no_ping: bool = typer.Option(
            False,
            "--no-ping",
            help="Skip connectivity tests via ping.",
        ),
        no_public_ip: bool = typer.Option(
            False,
            "--no-public-ip",
            help="Skip querying the external/public IP address.",
        ),
        debug: bool = typer.Option(
            False,
            "--debug",
            help="Log every executed command to stderr.",
        ),
    ) -> None:
        """Show a network diagnostic overview."""
        exit_code = self.runner.run(
            verbose=verbose,
            interactive=interactive,
            ping=not no_ping,
            public_ip=not no_public_ip,
            debug=debug,
        )
        raise typer.Exit(code=exit_code)

    def main(self, argv: list[str] | None = None) -> int:
        """Run the command and map usage errors to exit status 1."""
        command = typer.main.get_command(self.app)
        try:
            command.main(args=argv, prog_name=PROG_NAME, standalone_mode=True)
        except SystemExit as exc:
            code = exc.code if isinstance(exc.code, int) else int(exc.code is not None)
            return 1 if code == USAGE_ERROR_RC else code
        return 0


cli = NetbriefCLI()
app = cli.app


def main() -> None:
    raise SystemExit(cli.main())


if __name__ == "__main__":
    main()

from __future__ import annotations

import typer

from gitstat.cli.commands.status import status

app = typer.Typer(
    add_completion=False,
    no_args_is_help=False,
    help="Print a one-line git status summary for shell prompts.",
)

# Single command: invoked as `gitstat [OPTIONS]`
app.command()(status)


def main() -> None:
    app()

"""Status command - print the one-line summary for the current repository."""

from __future__ import annotations

from pathlib import Path

import typer

from gitstat import __version__
from gitstat.cli.context import build_context
from gitstat.core import symbols as defaults
from gitstat.core.result import Err
from gitstat.core.symbols import Symbols
from gitstat.output.errors import print_status_error, status_error_exit_code
from gitstat.services.status_line import build_status_line


def status(
    path: str = typer.Option("", "--path", help="Path to the git repository. Leave empty for CWD."),
    prefix: str = typer.Option(defaults.DEFAULT_PREFIX, "--prefix", help="Prefix symbol"),
    suffix: str = typer.Option(defaults.DEFAULT_SUFFIX, "--suffix", help="Suffix symbol"),
    sep: str = typer.Option(defaults.DEFAULT_SEP, "--sep", help="Separator symbol"),
    local: str = typer.Option(defaults.DEFAULT_LOCAL, "--local", help="Local branch symbol"),
    modified: str = typer.Option(defaults.DEFAULT_MODIFIED, "--modified", help="Modified symbol"),
    staged: str = typer.Option(defaults.DEFAULT_STAGED, "--staged", help="Staged symbol"),
    conflict: str = typer.Option(defaults.DEFAULT_CONFLICT, "--conflict", help="Conflict symbol"),
    untracked: str = typer.Option(
        defaults.DEFAULT_UNTRACKED, "--untracked", help="Untracked symbol"
    ),
    stashed: str = typer.Option(defaults.DEFAULT_STASHED, "--stashed", help="Stashed symbol"),
    ahead: str = typer.Option(defaults.DEFAULT_AHEAD, "--ahead", help="Ahead symbol"),
    behind: str = typer.Option(defaults.DEFAULT_BEHIND, "--behind", help="Behind symbol"),
    clean: str = typer.Option(defaults.DEFAULT_CLEAN, "--clean", help="Clean symbol"),
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
) -> None:
    """Print branch, tracking, operation and file counts as one line.

    Prints nothing when not inside a git working tree.
    """
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=0)

    ctx = build_context()

    symbols = Symbols(
        prefix=prefix,
        suffix=suffix,
        sep=sep,
        local=local,
        ahead=ahead,
        behind=behind,
        staged=staged,
        conflict=conflict,
        modified=modified,
        untracked=untracked,
        stashed=stashed,
        clean=clean,
    )

    result = build_status_line(Path(path), symbols)
    if isinstance(result, Err):
        print_status_error(result.error, ctx.console)
        raise typer.Exit(code=status_error_exit_code(result.error))

    line = result.value
    if line is None:
        return

    # color=True: click strips ANSI escapes when stdout is a pipe, as it is under $(...)
    typer.echo(line, color=True)

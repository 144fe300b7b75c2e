"""Status line pipeline: probe → collect → parse → render.

Each stage returns a Result; the first Err aborts the pipeline so nothing
is rendered from partial data.
"""

from __future__ import annotations

from pathlib import Path

from gitstat.core.result import Err, Ok, Result
from gitstat.core.symbols import Symbols
from gitstat.git.errors import StatusError
from gitstat.git.probe import probe
from gitstat.git.status import collect_status, parse_status
from gitstat.render import render

__all__ = ["build_status_line"]


def build_status_line(path: Path, symbols: Symbols) -> Result[str | None, StatusError]:
    """Build the status line for the repository containing path.

    Returns:
        Ok(line) for a working tree
        Ok(None) when path is not inside a working tree
        Err(...) on the first failing stage
    """
    probed = probe(path)
    if isinstance(probed, Err):
        return probed
    found = probed.value
    if found is None:
        return Ok(None)

    collected = collect_status(found.paths.root)
    if isinstance(collected, Err):
        return collected

    parsed = parse_status(collected.value)
    if isinstance(parsed, Err):
        return parsed

    return Ok(render(parsed.value, found.operation, symbols))

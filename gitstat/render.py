"""Render a StatusSummary into the one-line prompt string.

Layout (default symbols):

    [main {origin/main} ↑·2↓·1|REBASE-i 2/5|● 1✚ 1…3]
    [feature L|✔]
    [:1a2b3c4|MERGING|✖ 2]

The renderer is a pure function of its inputs; printing is left to the CLI.
"""

from __future__ import annotations

from gitstat.core.symbols import Symbols
from gitstat.git.probe import NoOperation, OperationState, operation_progress
from gitstat.git.status import StatusSummary

__all__ = ["SHORT_COMMIT_LENGTH", "render"]

SHORT_COMMIT_LENGTH = 7


def render(summary: StatusSummary, state: OperationState, symbols: Symbols) -> str:
    """Build the status line for summary and state using symbols."""
    parts: list[str] = [symbols.prefix]

    parts.append(_branch_section(summary, symbols))
    parts.append(symbols.sep)

    if not isinstance(state, NoOperation):
        parts.append(state.label)
        progress = operation_progress(state)
        if progress is not None:
            parts.append(f" {progress.step}/{progress.total}")
        parts.append(symbols.sep)

    parts.append(_counts_section(summary, symbols))
    parts.append(symbols.suffix)

    return "".join(parts)


def _branch_section(summary: StatusSummary, symbols: Symbols) -> str:
    if summary.is_detached:
        return f":{summary.commit[:SHORT_COMMIT_LENGTH]}"

    section = summary.branch
    if summary.has_upstream:
        section += f" {{{summary.upstream}}}"
    else:
        section += f" {symbols.local}"

    if summary.has_divergence:
        section += " "
        if summary.ahead > 0:
            section += f"{symbols.ahead}{summary.ahead}"
        if summary.behind > 0:
            section += f"{symbols.behind}{summary.behind}"

    return section


def _counts_section(summary: StatusSummary, symbols: Symbols) -> str:
    if summary.is_clean:
        return symbols.clean

    # Fixed order: staged, conflict, modified, untracked, stashed
    groups = (
        (symbols.staged, summary.staged),
        (symbols.conflict, summary.conflict),
        (symbols.modified, summary.modified),
        (symbols.untracked, summary.untracked),
        (symbols.stashed, summary.stashed),
    )
    return "".join(f"{symbol}{count}" for symbol, count in groups if count > 0)

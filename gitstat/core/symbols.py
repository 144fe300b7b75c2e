"""Display symbols for the status line.

The defaults below are what the CLI options fall back to. A Symbols value is
built once per invocation and never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "Symbols",
    "DEFAULT_PREFIX",
    "DEFAULT_SUFFIX",
    "DEFAULT_SEP",
    "DEFAULT_LOCAL",
    "DEFAULT_AHEAD",
    "DEFAULT_BEHIND",
    "DEFAULT_STAGED",
    "DEFAULT_CONFLICT",
    "DEFAULT_MODIFIED",
    "DEFAULT_UNTRACKED",
    "DEFAULT_STASHED",
    "DEFAULT_CLEAN",
]

DEFAULT_PREFIX = "["
DEFAULT_SUFFIX = "]"
DEFAULT_SEP = "|"
DEFAULT_LOCAL = "L"

# Divergence from upstream
DEFAULT_AHEAD = "↑·"
DEFAULT_BEHIND = "↓·"

# File categories (trailing space separates glyph from count)
DEFAULT_STAGED = "● "
DEFAULT_CONFLICT = "✖ "
DEFAULT_MODIFIED = "✚ "
DEFAULT_UNTRACKED = "…"
DEFAULT_STASHED = "⚑ "
DEFAULT_CLEAN = "✔"


@dataclass(frozen=True, slots=True)
class Symbols:
    """Markers used when rendering the status line.

    Attributes:
        prefix: Emitted first
        suffix: Emitted last
        sep: Between the branch section, operation section and file counts
        local: Shown after the branch name when there is no upstream
        ahead: Precedes the count of commits ahead of upstream
        behind: Precedes the count of commits behind upstream
        staged: Precedes the staged file count
        conflict: Precedes the conflicted file count
        modified: Precedes the modified file count
        untracked: Precedes the untracked file count
        stashed: Precedes the stash count
        clean: Shown instead of the counts when there is nothing to report
    """

    prefix: str = DEFAULT_PREFIX
    suffix: str = DEFAULT_SUFFIX
    sep: str = DEFAULT_SEP
    local: str = DEFAULT_LOCAL
    ahead: str = DEFAULT_AHEAD
    behind: str = DEFAULT_BEHIND
    staged: str = DEFAULT_STAGED
    conflict: str = DEFAULT_CONFLICT
    modified: str = DEFAULT_MODIFIED
    untracked: str = DEFAULT_UNTRACKED
    stashed: str = DEFAULT_STASHED
    clean: str = DEFAULT_CLEAN

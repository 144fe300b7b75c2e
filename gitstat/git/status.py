"""Collect and parse `git status --porcelain=2 --branch --show-stash`.

Report grammar (one record per line, fields separated by single spaces):

    # branch.oid <commit> | (initial)
    # branch.head <branch> | (detached)
    # branch.upstream <upstream>
    # branch.ab +<ahead> -<behind>
    # stash <count>
    1 <XY> <sub> <mH> <mI> <mW> <hH> <hI> <path>
    2 <XY> <sub> <mH> <mI> <mW> <hH> <hI> <X><score> <path><tab><orig>
    ? <path>

Other record kinds ("u", "!") and unknown header keys are ignored. The
format is a contract with git: a record too short for its kind, or a
non-numeric count, is reported as an error rather than skipped.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from gitstat.core.result import Err, Ok, Result
from gitstat.git.errors import (
    GitCommandFailed,
    GitError,
    InvalidNumber,
    MalformedRecord,
    StatusParseError,
)
from gitstat.platform.process import run

__all__ = [
    "DETACHED",
    "CONFLICT_CODES",
    "StatusSummary",
    "collect_status",
    "parse_status",
]

DETACHED = "(detached)"

CONFLICT_CODES = frozenset({"DD", "AU", "UD", "UA", "DU", "AA", "UU"})

# Minimum field counts per record kind
_MIN_HEADER_KEY_FIELDS = 2
_MIN_HEADER_FIELDS = 3
_MIN_AHEAD_BEHIND_FIELDS = 4
_MIN_CHANGED_FIELDS = 2

# Header keys that carry a value; unknown keys are skipped without checks
_VALUED_HEADERS = frozenset(
    {"branch.oid", "branch.head", "branch.upstream", "branch.ab", "stash"}
)


@dataclass(frozen=True, slots=True)
class StatusSummary:
    """Aggregated status of a working tree.

    Attributes:
        commit: Full hash of HEAD ("(initial)" before the first commit)
        branch: Current branch name, or DETACHED
        upstream: Upstream branch (e.g. "origin/main"), empty if none
        ahead: Commits on the branch but not on upstream
        behind: Commits on upstream but not on the branch
        staged: Changed entries counted as staged
        conflict: Entries with an unmerged XY code
        modified: Entries modified in the worktree
        untracked: Untracked files
        stashed: Stash entries
    """

    commit: str = ""
    branch: str = ""
    upstream: str = ""
    ahead: int = 0
    behind: int = 0
    staged: int = 0
    conflict: int = 0
    modified: int = 0
    untracked: int = 0
    stashed: int = 0

    @property
    def is_detached(self) -> bool:
        return self.branch == DETACHED

    @property
    def has_upstream(self) -> bool:
        return self.upstream != ""

    @property
    def has_divergence(self) -> bool:
        """True if the branch is ahead of or behind its upstream."""
        return self.ahead > 0 or self.behind > 0

    @property
    def is_clean(self) -> bool:
        """True if there is nothing staged, conflicted, modified, untracked or stashed."""
        return (
            self.staged == 0
            and self.conflict == 0
            and self.modified == 0
            and self.untracked == 0
            and self.stashed == 0
        )


def collect_status(root: Path) -> Result[str, GitError]:
    """Run git status in root and return the raw porcelain v2 report."""
    result = run(
        [
            "git",
            "-C",
            str(root),
            "status",
            "--porcelain=2",
            "--branch",
            "--show-stash",
        ]
    )
    match result:
        case Err(e):
            return Err(
                GitCommandFailed(
                    command="status",
                    returncode=e.returncode,
                    message=e.stderr.strip() or "git status failed",
                )
            )
        case Ok(stdout):
            return Ok(stdout)


def parse_status(output: str) -> Result[StatusSummary, StatusParseError]:
    """Parse a porcelain v2 report into a StatusSummary."""
    commit = ""
    branch = ""
    upstream = ""
    ahead = 0
    behind = 0
    stashed = 0
    staged = 0
    conflict = 0
    modified = 0
    untracked = 0

    for line in output.split("\n"):
        fields = line.split(" ")
        match fields[0]:
            case "#":
                if len(fields) < _MIN_HEADER_KEY_FIELDS:
                    return Err(MalformedRecord(line, "header needs a key"))
                key = fields[1]
                if key in _VALUED_HEADERS and len(fields) < _MIN_HEADER_FIELDS:
                    return Err(MalformedRecord(line, f"{key} header needs a value"))
                match key:
                    case "branch.oid":
                        commit = fields[2]
                    case "branch.head":
                        branch = fields[2]
                    case "branch.upstream":
                        upstream = fields[2]
                    case "branch.ab":
                        if len(fields) < _MIN_AHEAD_BEHIND_FIELDS:
                            return Err(MalformedRecord(line, "branch.ab needs ahead and behind"))
                        match _parse_signed(line, fields[2]):
                            case Err(e):
                                return Err(e)
                            case Ok(value):
                                ahead = value
                        match _parse_signed(line, fields[3]):
                            case Err(e):
                                return Err(e)
                            case Ok(value):
                                behind = value
                    case "stash":
                        match _parse_int(line, fields[2]):
                            case Err(e):
                                return Err(e)
                            case Ok(value):
                                stashed = value
                    case _:
                        pass
            case "1" | "2":
                if len(fields) < _MIN_CHANGED_FIELDS or len(fields[1]) != 2:
                    return Err(MalformedRecord(line, "changed entry needs a two-character XY code"))
                xy = fields[1]
                if xy in CONFLICT_CODES:
                    conflict += 1
                elif xy[1] == "M":
                    modified += 1
                else:
                    staged += 1
            case "?":
                untracked += 1
            case _:
                pass

    return Ok(
        StatusSummary(
            commit=commit,
            branch=branch,
            upstream=upstream,
            ahead=ahead,
            behind=behind,
            staged=staged,
            conflict=conflict,
            modified=modified,
            untracked=untracked,
            stashed=stashed,
        )
    )


def _parse_signed(line: str, field: str) -> Result[int, InvalidNumber]:
    """Parse "+N" / "-N", dropping the sign character."""
    return _parse_int(line, field[1:]).map_err(lambda _: InvalidNumber(line, field))


def _parse_int(line: str, field: str) -> Result[int, InvalidNumber]:
    if not (field.isascii() and field.isdigit()):
        return Err(InvalidNumber(line, field))
    return Ok(int(field))

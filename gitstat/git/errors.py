from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

__all__ = [
    "GitCommandFailed",
    "MarkerReadFailed",
    "MalformedRecord",
    "InvalidNumber",
    "GitError",
    "ProbeError",
    "StatusParseError",
    "StatusError",
]


@dataclass(frozen=True, slots=True)
class GitCommandFailed:
    """A git invocation exited non-zero or could not be started.

    Attributes:
        command: The git subcommand that failed (e.g. "rev-parse")
        returncode: Process return code, -1 if git could not be started
        message: git's stderr, or the OS error
    """

    command: str
    returncode: int
    message: str


@dataclass(frozen=True, slots=True)
class MarkerReadFailed:
    """An operation marker file was missing, unreadable or not an integer."""

    path: Path
    reason: str


@dataclass(frozen=True, slots=True)
class MalformedRecord:
    """A status record had fewer fields than its kind requires."""

    line: str
    reason: str


@dataclass(frozen=True, slots=True)
class InvalidNumber:
    """A status header field that must be an integer was not."""

    line: str
    field: str


GitError = GitCommandFailed

ProbeError = GitCommandFailed | MarkerReadFailed

StatusParseError = MalformedRecord | InvalidNumber

StatusError = GitCommandFailed | MarkerReadFailed | MalformedRecord | InvalidNumber

"""Error presentation utilities.

Centralized error formatting and exit code mapping for the status pipeline.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gitstat.core.errors import ErrorCode
from gitstat.git.errors import (
    GitCommandFailed,
    InvalidNumber,
    MalformedRecord,
    MarkerReadFailed,
    StatusError,
)
from gitstat.output.console import Style

if TYPE_CHECKING:
    from gitstat.output.console import ConsoleProtocol

__all__ = ["print_status_error", "status_error_exit_code"]


def print_status_error(error: StatusError, console: ConsoleProtocol) -> None:
    """Print a pipeline error to console with appropriate formatting."""
    match error:
        case GitCommandFailed(command=command, returncode=-1, message=message):
            console.error(f"could not run git {command}: {message}")
            console.print("hint: is git installed and on PATH?", Style.DIM)
        case GitCommandFailed(command=command, returncode=rc, message=message):
            console.error(f"git {command} failed (exit {rc}): {message}")
        case MarkerReadFailed(path=path, reason=reason):
            console.error(f"cannot read {path}: {reason}")
        case MalformedRecord(line=line, reason=reason):
            console.error(f"malformed status record {line!r}: {reason}")
        case InvalidNumber(line=line, field=field):
            console.error(f"invalid number {field!r} in status record {line!r}")


def status_error_exit_code(error: StatusError) -> int:
    """Get exit code for a pipeline error."""
    match error:
        case GitCommandFailed():
            return int(ErrorCode.ENV_ERROR)
        case MarkerReadFailed():
            return int(ErrorCode.IO_ERROR)
        case MalformedRecord() | InvalidNumber():
            return int(ErrorCode.PARSE_ERROR)

"""Git access for gitstat.

- probe: repository detection and in-progress operation state
- status: porcelain v2 status collection and parsing

Usage:
    from gitstat.git import probe, collect_status, parse_status
"""

from gitstat.git.errors import (
    GitCommandFailed,
    GitError,
    InvalidNumber,
    MalformedRecord,
    MarkerReadFailed,
    ProbeError,
    StatusError,
    StatusParseError,
)
from gitstat.git.probe import (
    OperationState,
    ProbeResult,
    Progress,
    RepoPaths,
    detect_operation,
    find_repository,
    operation_label,
    operation_progress,
    probe,
)
from gitstat.git.status import (
    DETACHED,
    StatusSummary,
    collect_status,
    parse_status,
)

__all__ = [
    # Errors
    "GitCommandFailed",
    "GitError",
    "InvalidNumber",
    "MalformedRecord",
    "MarkerReadFailed",
    "ProbeError",
    "StatusError",
    "StatusParseError",
    # Probe
    "OperationState",
    "ProbeResult",
    "Progress",
    "RepoPaths",
    "detect_operation",
    "find_repository",
    "operation_label",
    "operation_progress",
    "probe",
    # Status
    "DETACHED",
    "StatusSummary",
    "collect_status",
    "parse_status",
]

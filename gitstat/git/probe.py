"""Repository detection and in-progress operation state.

The probe answers two questions for the status line:

1. Is the given path inside a git working tree? If git reports exit 128
   ("not a git repository") the answer is simply no, which is not an error.
2. Is a multi-step operation (rebase, am, merge, cherry-pick, revert,
   bisect) in progress? This is read from marker paths git leaves in its
   metadata directory.

The resolved root and git dir are returned to the caller rather than
changing the process working directory.

Usage:
    match probe(Path(".")):
        case Ok(None):
            pass  # not a repository
        case Ok(ProbeResult(paths=paths, operation=operation)):
            print(paths.root, operation_label(operation))
        case Err(e):
            print(f"error: {e}")
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar

from gitstat.core.result import Err, Ok, Result
from gitstat.git.errors import GitCommandFailed, GitError, MarkerReadFailed, ProbeError
from gitstat.platform.process import run

__all__ = [
    "NOT_A_REPOSITORY_EXIT",
    "Progress",
    "NoOperation",
    "RebaseApply",
    "RebaseMerge",
    "RebaseInteractive",
    "ApplyMail",
    "ApplyMailRebase",
    "Merging",
    "CherryPicking",
    "Reverting",
    "Bisecting",
    "OperationState",
    "RepoPaths",
    "ProbeResult",
    "find_repository",
    "detect_operation",
    "operation_label",
    "operation_progress",
    "probe",
]

# git exits with 128 for "fatal: not a git repository"
NOT_A_REPOSITORY_EXIT = 128


@dataclass(frozen=True, slots=True)
class Progress:
    """Position within a multi-step operation (e.g. patch 2 of 5)."""

    step: int
    total: int


@dataclass(frozen=True, slots=True)
class NoOperation:
    label: ClassVar[str] = ""


@dataclass(frozen=True, slots=True)
class RebaseApply:
    progress: Progress
    label: ClassVar[str] = "REBASE"


@dataclass(frozen=True, slots=True)
class RebaseMerge:
    progress: Progress
    label: ClassVar[str] = "REBASE-m"


@dataclass(frozen=True, slots=True)
class RebaseInteractive:
    progress: Progress
    label: ClassVar[str] = "REBASE-i"


@dataclass(frozen=True, slots=True)
class ApplyMail:
    progress: Progress
    label: ClassVar[str] = "AM"


@dataclass(frozen=True, slots=True)
class ApplyMailRebase:
    progress: Progress
    label: ClassVar[str] = "AM/REBASE"


@dataclass(frozen=True, slots=True)
class Merging:
    label: ClassVar[str] = "MERGING"


@dataclass(frozen=True, slots=True)
class CherryPicking:
    label: ClassVar[str] = "CHERRY-PICKING"


@dataclass(frozen=True, slots=True)
class Reverting:
    label: ClassVar[str] = "REVERTING"


@dataclass(frozen=True, slots=True)
class Bisecting:
    label: ClassVar[str] = "BISECTING"


OperationState = (
    NoOperation
    | RebaseApply
    | RebaseMerge
    | RebaseInteractive
    | ApplyMail
    | ApplyMailRebase
    | Merging
    | CherryPicking
    | Reverting
    | Bisecting
)


@dataclass(frozen=True, slots=True)
class RepoPaths:
    """Absolute locations resolved by git.

    Attributes:
        root: Top-level directory of the working tree
        git_dir: Metadata directory (".git", or the per-worktree dir for
            linked worktrees)
    """

    root: Path
    git_dir: Path


@dataclass(frozen=True, slots=True)
class ProbeResult:
    paths: RepoPaths
    operation: OperationState


def operation_label(state: OperationState) -> str:
    """Display label for an operation, empty when nothing is in progress."""
    return state.label


def operation_progress(state: OperationState) -> Progress | None:
    """Step/total for the operation, if it carries one with total > 0."""
    match state:
        case (
            RebaseApply(progress=progress)
            | RebaseMerge(progress=progress)
            | RebaseInteractive(progress=progress)
            | ApplyMail(progress=progress)
            | ApplyMailRebase(progress=progress)
        ):
            return progress if progress.total > 0 else None
        case _:
            return None


def find_repository(path: Path) -> Result[RepoPaths | None, GitError]:
    """Resolve the working tree root and git dir containing path.

    Returns:
        Ok(RepoPaths) when inside a working tree
        Ok(None) when git reports the path is not a repository
        Err(GitCommandFailed) for any other failure
    """
    result = run(
        [
            "git",
            "-C",
            str(path),
            "rev-parse",
            "--show-toplevel",
            "--absolute-git-dir",
        ]
    )
    match result:
        case Err(e):
            if e.returncode == NOT_A_REPOSITORY_EXIT:
                return Ok(None)
            return Err(
                GitCommandFailed(
                    command="rev-parse",
                    returncode=e.returncode,
                    message=e.stderr.strip() or "git rev-parse failed",
                )
            )
        case Ok(stdout):
            lines = stdout.splitlines()
            if len(lines) < 2:
                return Err(
                    GitCommandFailed(
                        command="rev-parse",
                        returncode=0,
                        message=f"unexpected output: {stdout.strip()!r}",
                    )
                )
            return Ok(RepoPaths(root=Path(lines[0]), git_dir=Path(lines[1])))


def detect_operation(git_dir: Path) -> Result[OperationState, MarkerReadFailed]:
    """Classify the in-progress operation from marker paths under git_dir.

    Markers are checked in priority order; the first present one wins.
    """
    rebase_merge = git_dir / "rebase-merge"
    if rebase_merge.exists():
        match _read_progress(rebase_merge / "msgnum", rebase_merge / "end"):
            case Err(e):
                return Err(e)
            case Ok(progress):
                if (rebase_merge / "interactive").exists():
                    return Ok(RebaseInteractive(progress))
                return Ok(RebaseMerge(progress))

    rebase_apply = git_dir / "rebase-apply"
    if rebase_apply.exists():
        match _read_progress(rebase_apply / "next", rebase_apply / "last"):
            case Err(e):
                return Err(e)
            case Ok(progress):
                if (rebase_apply / "rebasing").exists():
                    return Ok(RebaseApply(progress))
                if (rebase_apply / "applying").exists():
                    return Ok(ApplyMail(progress))
                return Ok(ApplyMailRebase(progress))

    if (git_dir / "MERGE_HEAD").exists():
        return Ok(Merging())
    if (git_dir / "CHERRY_PICK_HEAD").exists():
        return Ok(CherryPicking())
    if (git_dir / "REVERT_HEAD").exists():
        return Ok(Reverting())
    if (git_dir / "BISECT_LOG").exists():
        return Ok(Bisecting())

    return Ok(NoOperation())


def probe(path: Path) -> Result[ProbeResult | None, ProbeError]:
    """Locate the repository for path and read its operation state.

    Returns Ok(None) when path is not inside a working tree.
    """
    match find_repository(path):
        case Err(e):
            return Err(e)
        case Ok(None):
            return Ok(None)
        case Ok(paths):
            return detect_operation(paths.git_dir).map(
                lambda operation: ProbeResult(paths=paths, operation=operation)
            )


def _read_progress(step_path: Path, total_path: Path) -> Result[Progress, MarkerReadFailed]:
    return _read_int(step_path).flat_map(
        lambda step: _read_int(total_path).map(lambda total: Progress(step=step, total=total))
    )


def _read_int(path: Path) -> Result[int, MarkerReadFailed]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        return Err(MarkerReadFailed(path=path, reason=e.strerror or str(e)))

    try:
        return Ok(int(text.strip()))
    except ValueError:
        return Err(MarkerReadFailed(path=path, reason=f"not an integer: {text.strip()!r}"))

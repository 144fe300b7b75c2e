"""Tests for gitstat.output.errors module."""

from __future__ import annotations

from pathlib import Path

import pytest

from gitstat.core.errors import ErrorCode
from gitstat.git.errors import (
    GitCommandFailed,
    InvalidNumber,
    MalformedRecord,
    MarkerReadFailed,
    StatusError,
)
from gitstat.output.console import MockConsole
from gitstat.output.errors import print_status_error, status_error_exit_code


class TestPrintStatusError:
    def test_git_failure(self) -> None:
        console = MockConsole()
        print_status_error(GitCommandFailed("status", 129, "unknown option"), console)
        assert console.messages == ["error: git status failed (exit 129): unknown option"]

    def test_git_missing_adds_hint(self) -> None:
        console = MockConsole()
        print_status_error(GitCommandFailed("rev-parse", -1, "No such file"), console)
        assert console.messages[0] == "error: could not run git rev-parse: No such file"
        assert console.find("hint:")

    def test_marker_failure(self) -> None:
        console = MockConsole()
        path = Path(".git") / "rebase-merge" / "end"
        print_status_error(MarkerReadFailed(path, "not an integer: 'x'"), console)
        assert console.messages == [f"error: cannot read {path}: not an integer: 'x'"]

    def test_malformed_record(self) -> None:
        console = MockConsole()
        print_status_error(MalformedRecord("1", "too short"), console)
        assert console.messages == ["error: malformed status record '1': too short"]

    def test_invalid_number(self) -> None:
        console = MockConsole()
        print_status_error(InvalidNumber("# stash x", "x"), console)
        assert console.messages == ["error: invalid number 'x' in status record '# stash x'"]


class TestStatusErrorExitCode:
    @pytest.mark.parametrize(
        ("error", "code"),
        [
            (GitCommandFailed("status", 1, ""), ErrorCode.ENV_ERROR),
            (GitCommandFailed("rev-parse", -1, ""), ErrorCode.ENV_ERROR),
            (MarkerReadFailed(Path("x"), ""), ErrorCode.IO_ERROR),
            (MalformedRecord("", ""), ErrorCode.PARSE_ERROR),
            (InvalidNumber("", ""), ErrorCode.PARSE_ERROR),
        ],
    )
    def test_mapping(self, error: StatusError, code: ErrorCode) -> None:
        assert status_error_exit_code(error) == int(code)

    def test_never_success(self) -> None:
        assert status_error_exit_code(InvalidNumber("", "")) != 0

"""End-to-end checks against a real git binary."""

from __future__ import annotations

import os
import shutil
import subprocess
from pathlib import Path

import pytest

from gitstat.core.result import Ok
from gitstat.core.symbols import Symbols
from gitstat.services.status_line import build_status_line

pytestmark = pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")


def _git(repo: Path, *args: str) -> None:
    env = {
        **os.environ,
        "GIT_AUTHOR_NAME": "gitstat",
        "GIT_AUTHOR_EMAIL": "gitstat@example.invalid",
        "GIT_COMMITTER_NAME": "gitstat",
        "GIT_COMMITTER_EMAIL": "gitstat@example.invalid",
    }
    subprocess.run(
        ["git", "-c", "commit.gpgsign=false", "-C", str(repo), *args],
        check=True,
        capture_output=True,
        env=env,
    )


@pytest.fixture
def repo(tmp_path: Path) -> Path:
    root = tmp_path / "repo"
    root.mkdir()
    _git(root, "init", "--quiet")
    _git(root, "symbolic-ref", "HEAD", "refs/heads/main")
    return root


def test_outside_repository(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    nowhere = tmp_path / "nowhere"
    nowhere.mkdir()
    # Stop discovery from walking up into an enclosing checkout
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))

    assert build_status_line(nowhere, Symbols()) == Ok(None)


def test_fresh_repository_with_untracked_file(repo: Path) -> None:
    (repo / "new.txt").write_text("x", encoding="utf-8")

    assert build_status_line(repo, Symbols()) == Ok("[main L|…1]")


def test_staged_and_modified(repo: Path) -> None:
    (repo / "a.txt").write_text("a", encoding="utf-8")
    _git(repo, "add", "a.txt")
    _git(repo, "commit", "--quiet", "-m", "init")
    (repo / "a.txt").write_text("changed", encoding="utf-8")
    (repo / "b.txt").write_text("b", encoding="utf-8")
    _git(repo, "add", "b.txt")

    assert build_status_line(repo, Symbols()) == Ok("[main L|● 1✚ 1]")


def test_from_subdirectory(repo: Path) -> None:
    sub = repo / "src" / "pkg"
    sub.mkdir(parents=True)

    assert build_status_line(sub, Symbols()) == Ok("[main L|✔]")


def test_merge_in_progress(repo: Path) -> None:
    (repo / "a.txt").write_text("a", encoding="utf-8")
    _git(repo, "add", "a.txt")
    _git(repo, "commit", "--quiet", "-m", "init")
    git_dir = repo / ".git"
    head = (git_dir / "refs" / "heads" / "main").read_text(encoding="utf-8")
    (git_dir / "MERGE_HEAD").write_text(head, encoding="utf-8")

    assert build_status_line(repo, Symbols()) == Ok("[main L|MERGING|✔]")

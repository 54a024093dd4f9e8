"""Tests for vcs: staged diff retrieval from a real temporary git repository."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

import pytest

from docsweep import vcs
from docsweep.constants import EMPTY_TREE_SHA
from docsweep.diagnostics import DiagnosticCode, VcsError
from docsweep.vcs import diff_base, head_exists, staged_diff

GitRun = Callable[..., str]


def _stage(git_run: GitRun, repo: Path, name: str, content: bytes) -> None:
    (repo / name).write_bytes(content)
    git_run(repo, "add", name)


def _commit(git_run: GitRun, repo: Path) -> None:
    git_run(repo, "commit", "--quiet", "-m", "snapshot")


# ============================================================================
# DIFF BASE
# ============================================================================


@pytest.mark.git
class TestDiffBase:
    """HEAD detection and the empty-tree fallback."""

    def test_fresh_repository_has_no_head(
        self, tmp_git_repo: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Without commits the base is git's empty tree."""
        with caplog.at_level(logging.INFO, logger="docsweep.vcs"):
            assert not head_exists(tmp_git_repo)
            assert diff_base(tmp_git_repo) == EMPTY_TREE_SHA

        assert "empty tree" in caplog.text

    def test_committed_repository_diffs_against_head(
        self, git_run: GitRun, tmp_git_repo: Path
    ) -> None:
        """After the first commit the base is HEAD."""
        _stage(git_run, tmp_git_repo, "a.swift", b"let a = 1\n")
        _commit(git_run, tmp_git_repo)

        assert head_exists(tmp_git_repo)
        assert diff_base(tmp_git_repo) == "HEAD"


# ============================================================================
# STAGED DIFF
# ============================================================================


@pytest.mark.git
class TestStagedDiff:
    """git diff --cached output."""

    def test_initial_commit_diff(self, git_run: GitRun, tmp_git_repo: Path) -> None:
        """Staged files in a fresh repository show as additions."""
        _stage(git_run, tmp_git_repo, "a.swift", b"/// Doc.\npublic func a() {}\n")

        diff = staged_diff(cwd=tmp_git_repo)

        assert "+/// Doc." in diff
        assert "+public func a() {}" in diff

    def test_only_staged_changes_are_included(self, git_run: GitRun, tmp_git_repo: Path) -> None:
        """Unstaged edits do not appear."""
        _stage(git_run, tmp_git_repo, "a.swift", b"let a = 1\n")
        _commit(git_run, tmp_git_repo)
        _stage(git_run, tmp_git_repo, "a.swift", b"let a = 1\npublic func staged() {}\n")
        (tmp_git_repo / "a.swift").write_bytes(
            b"let a = 1\npublic func staged() {}\npublic func unstaged() {}\n"
        )

        diff = staged_diff(cwd=tmp_git_repo)

        assert "staged()" in diff
        assert "unstaged" not in diff

    def test_nothing_staged_is_empty(self, git_run: GitRun, tmp_git_repo: Path) -> None:
        """A clean index diffs to the empty string."""
        _stage(git_run, tmp_git_repo, "a.swift", b"let a = 1\n")
        _commit(git_run, tmp_git_repo)

        assert staged_diff(cwd=tmp_git_repo) == ""

    def test_explicit_base(self, git_run: GitRun, tmp_git_repo: Path) -> None:
        """against overrides the automatic base."""
        _stage(git_run, tmp_git_repo, "a.swift", b"public func old() {}\n")
        _commit(git_run, tmp_git_repo)

        diff = staged_diff(against=EMPTY_TREE_SHA, cwd=tmp_git_repo)

        assert "+public func old() {}" in diff

    def test_non_utf8_output_raises(self, git_run: GitRun, tmp_git_repo: Path) -> None:
        """Latin-1 text in the diff cannot be decoded."""
        _stage(git_run, tmp_git_repo, "legacy.txt", b"caf\xe9 au lait\n")

        with pytest.raises(VcsError) as exc_info:
            staged_diff(cwd=tmp_git_repo)

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.DIFF_DECODE_FAILED

    def test_bad_reference_raises_with_returncode(self, tmp_git_repo: Path) -> None:
        """A failing git command surfaces its status and stderr."""
        with pytest.raises(VcsError) as exc_info:
            staged_diff(against="no-such-ref", cwd=tmp_git_repo)

        error = exc_info.value
        assert error.returncode not in (None, 0)
        assert error.diagnostic is not None
        assert error.diagnostic.code == DiagnosticCode.GIT_COMMAND_FAILED
        assert error.diagnostic.command == ("git", "diff", "--cached", "no-such-ref", "--")


# ============================================================================
# MISSING GIT
# ============================================================================


class TestGitNotFound:
    """Behavior when the git executable cannot be launched."""

    def test_missing_executable_raises(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        """FileNotFoundError becomes VcsError with GIT_NOT_FOUND."""
        monkeypatch.setattr(vcs, "_GIT", "docsweep-no-such-git-executable")

        with pytest.raises(VcsError) as exc_info:
            head_exists(tmp_path)

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.GIT_NOT_FOUND
        assert exc_info.value.returncode is None

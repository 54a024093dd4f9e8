"""Staged diff retrieval from git.

Produces the text the tokenizer checks when docsweep runs as a pre-commit
hook: ``git diff --cached <base> --``, where the base is HEAD, or git's empty
tree when the repository has no commits yet.

Every failure surfaces as VcsError with a diagnostic naming the command.
"""

import logging
import subprocess
from pathlib import Path

from docsweep.constants import EMPTY_TREE_SHA, HEAD_REF
from docsweep.diagnostics import ErrorTemplate, VcsError

__all__ = ["diff_base", "head_exists", "staged_diff"]

logger = logging.getLogger(__name__)

_GIT: str = "git"


def _run_git(args: tuple[str, ...], cwd: Path | None) -> subprocess.CompletedProcess[bytes]:
    """Run git with args, raising VcsError if it cannot be launched."""
    command = (_GIT, *args)
    logger.debug("Running %s", " ".join(command))
    try:
        # check=False: callers inspect returncode themselves
        return subprocess.run(command, cwd=cwd, capture_output=True, check=False)
    except FileNotFoundError as e:
        raise VcsError(ErrorTemplate.git_not_found(command)) from e


def head_exists(cwd: Path | None = None) -> bool:
    """Check whether the repository has a HEAD commit."""
    completed = _run_git(("rev-parse", "--verify", HEAD_REF), cwd)
    return completed.returncode == 0


def diff_base(cwd: Path | None = None) -> str:
    """Reference to diff the index against: HEAD, or the empty tree."""
    if head_exists(cwd):
        return HEAD_REF
    logger.info("No HEAD commit, diffing against the empty tree")
    return EMPTY_TREE_SHA


def staged_diff(against: str | None = None, cwd: Path | None = None) -> str:
    """Return the staged changes as UTF-8 text.

    Args:
        against: Base reference (default: diff_base(cwd))
        cwd: Repository working directory (default: current directory)

    Returns:
        Output of ``git diff --cached <against> --``

    Raises:
        VcsError: If git is missing, exits non-zero, or prints non-UTF-8
    """
    base = against if against is not None else diff_base(cwd)
    args = ("diff", "--cached", base, "--")
    completed = _run_git(args, cwd)
    command = (_GIT, *args)

    if completed.returncode != 0:
        stderr = completed.stderr.decode("utf-8", errors="replace")
        logger.warning("git diff failed with status %d", completed.returncode)
        raise VcsError(
            ErrorTemplate.git_command_failed(command, completed.returncode, stderr),
            returncode=completed.returncode,
        )

    try:
        diff = completed.stdout.decode("utf-8")
    except UnicodeDecodeError as e:
        raise VcsError(ErrorTemplate.diff_decode_failed(command, str(e))) from e

    logger.debug("Staged diff against %s: %d characters", base, len(diff))
    return diff

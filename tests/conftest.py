"""Pytest configuration for docsweep test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 500 examples (thorough property testing)
- ci: GitHub Actions with 50 examples (fast CI feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- CI=true environment variable -> "ci" profile (GitHub Actions sets this)
- HYPOTHESIS_PROFILE env var -> explicit override
- Otherwise -> "dev" profile (local development)

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/

Fuzzing Test Separation:
Tests marked with @pytest.mark.fuzz are excluded from normal test runs.
Run them via: pytest -m fuzz

Git Tests:
Tests marked with @pytest.mark.git need a git executable and are skipped
when none is on PATH.
"""

import os
import shutil
import subprocess
from collections.abc import Callable
from pathlib import Path

import pytest
from hypothesis import HealthCheck, Phase, Verbosity, settings

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

# Development profile: thorough local testing (500 examples, silent)
settings.register_profile(
    "dev",
    max_examples=500,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    suppress_health_check=[HealthCheck.too_slow],
)

# CI profile: fast feedback for GitHub Actions (50 examples)
settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
    suppress_health_check=[HealthCheck.too_slow],
)

# Verbose profile: debug mode with progress visibility (100 examples)
settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


# =============================================================================
# AUTO-DETECT EXECUTION CONTEXT
# =============================================================================


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var (GitHub Actions auto-detection)
    3. Default to "dev" (local development)
    """
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit

    if os.environ.get("CI") == "true":
        return "ci"

    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# MARKERS AND TEST SEPARATION
# =============================================================================

GIT = shutil.which("git")


def pytest_configure(config: pytest.Config) -> None:
    """Register the 'fuzz' and 'git' markers."""
    config.addinivalue_line(
        "markers",
        "fuzz: Intensive property tests for fuzzing (excluded from normal test runs)",
    )
    config.addinivalue_line(
        "markers",
        "git: Tests that run the git executable (skipped when git is missing)",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests unless requested, and git tests without git.

    Behavior:
    - Normal test run (pytest tests/): Fuzz tests are SKIPPED
    - Explicit fuzz run (pytest -m fuzz): Fuzz tests run
    """
    marker_expr = str(config.getoption("-m", default=""))

    skip_fuzz = pytest.mark.skip(reason="Fuzzing test - run with: pytest -m fuzz")
    skip_git = pytest.mark.skip(reason="git executable not found on PATH")
    for item in items:
        if "fuzz" in item.keywords and "fuzz" not in marker_expr:
            item.add_marker(skip_fuzz)
        if "git" in item.keywords and GIT is None:
            item.add_marker(skip_git)


# =============================================================================
# FIXTURES
# =============================================================================


def _git(repo: Path, *args: str) -> str:
    """Run git in repo and return stdout; fails the test on non-zero exit."""
    completed = subprocess.run(
        ("git", *args), cwd=repo, capture_output=True, text=True, check=True
    )
    return completed.stdout


@pytest.fixture
def git_run() -> Callable[..., str]:
    """Helper running git in a repository: git_run(repo, *args) -> stdout."""
    return _git


@pytest.fixture
def tmp_git_repo(tmp_path: Path) -> Path:
    """Empty git repository with a local identity and no commits."""
    repo = tmp_path / "repo"
    repo.mkdir()
    _git(repo, "init", "--quiet")
    _git(repo, "config", "user.email", "tests@example.invalid")
    _git(repo, "config", "user.name", "docsweep tests")
    _git(repo, "config", "commit.gpgsign", "false")
    return repo

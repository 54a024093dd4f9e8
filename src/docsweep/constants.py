"""Shared constants for docsweep.

This module provides centralized configuration constants used across
the syntax, checks and vcs packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Input limits: DoS prevention via size constraints
- Depth limits: Nested comment protection
- Parser messages: Fixed diagnostics carried by Failure results
- Documentation policy: What counts as a doc comment
- Version control: Diff base sentinels

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Input limits
    "MAX_SOURCE_SIZE",
    # Depth limits
    "MAX_NESTING_DEPTH",
    # Parser messages
    "PREDICATE_FAILED",
    "NESTING_DEPTH_EXCEEDED",
    # Documentation policy
    "DOC_COMMENT_PREFIXES",
    # Version control
    "EMPTY_TREE_SHA",
    "HEAD_REF",
]

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum source size in characters (10 MB).
# Every consumed character allocates a cursor, so a staged diff larger than
# this is almost certainly a vendored blob rather than reviewable source.
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Default maximum nesting depth for balanced /* ... */ regions.
# None means unbounded. The balanced parser keeps its own stack, so deep
# nesting costs memory proportional to the input, never Python call depth.
MAX_NESTING_DEPTH: int | None = None

# ============================================================================
# PARSER MESSAGES
# ============================================================================

# Failure message for satisfy() and everything built on it.
PREDICATE_FAILED: str = "did not satisfy predicate"

# Failure message when balanced() hits its max_depth.
NESTING_DEPTH_EXCEEDED: str = "nesting depth exceeded"

# ============================================================================
# DOCUMENTATION POLICY
# ============================================================================

# Comment prefixes that document the declaration that follows them.
DOC_COMMENT_PREFIXES: tuple[str, ...] = ("///", "/**")

# ============================================================================
# VERSION CONTROL
# ============================================================================

# SHA1 of git's empty tree. Diff base for repositories without a HEAD commit.
EMPTY_TREE_SHA: str = "4b825dc642cb6eb9a060e54bf8d69288fbee4904"

HEAD_REF: str = "HEAD"

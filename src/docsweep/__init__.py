"""docsweep - doc comment coverage for staged source changes.

Tokenizes text (typically a staged git diff) into comments, string literals
and code runs with a small parser combinator engine, then reports every
``public func`` declaration that is not preceded by a ``///`` or ``/**``
doc comment.

Public API:
    tokenize - Split text into Comment / StringLiteral / Text tokens
    Tokenizer - Tokenizer with configurable size and nesting limits
    find_undocumented_functions - Names of undocumented public functions
    check_documentation - Full DocumentationReport
    staged_diff - Staged changes of the current git repository

Exceptions:
    DocsweepError - Base exception class
    TokenizeError - Token repetition failed outright
    GrammarError - Repetition over a parser that consumes nothing
    VcsError - git could not produce the staged diff

Submodules:
    docsweep.syntax.parser - Parser combinator engine
    docsweep.syntax.tokens - Token types
    docsweep.diagnostics - Diagnostic codes, templates and formatting
    docsweep.cli - Command-line entry point (pre-commit hook)
"""

from .checks import DocumentationReport, check_documentation, find_undocumented_functions
from .diagnostics import DocsweepError, GrammarError, TokenizeError, VcsError
from .syntax import Comment, StringLiteral, Text, Token, Tokenizer, tokenize
from .vcs import staged_diff

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("docsweep")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Comment",
    "DocsweepError",
    "DocumentationReport",
    "GrammarError",
    "StringLiteral",
    "Text",
    "Token",
    "TokenizeError",
    "Tokenizer",
    "VcsError",
    "__version__",
    "check_documentation",
    "find_undocumented_functions",
    "staged_diff",
    "tokenize",
]

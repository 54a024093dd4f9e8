"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        3000-3999: Syntax errors (tokenizer and grammar failures)
        5000-5999: Documentation findings (checker output)
        6000-6999: Version control errors (git collaborator)
    """

    # Syntax errors (3000-3999)
    TOKENIZE_FAILED = 3001
    REPETITION_NO_PROGRESS = 3002

    # Documentation findings (5000-5999)
    UNDOCUMENTED_FUNCTION = 5001

    # Version control errors (6000-6999)
    GIT_NOT_FOUND = 6001
    GIT_COMMAND_FAILED = 6002
    DIFF_DECODE_FAILED = 6003


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source code location for error reporting.

    Note:
        Python strings measure positions in characters (Unicode code points),
        not bytes. For multi-byte UTF-8 characters, character offset differs
        from byte offset.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, or line or
                column is less than 1 (both are 1-indexed).
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools (editors, CI annotations).

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Source location (None for non-syntax errors)
        hint: Suggestion for fixing the error
        function_name: Function the finding is about (documentation findings)
        command: Command line that failed (version control errors)
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    function_name: str | None = None
    command: tuple[str, ...] | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[UNDOCUMENTED_FUNCTION]: Public function 'parse' has no doc comment
              = function: parse
              = help: Add a /// or /** */ comment directly above the declaration

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)

"""Diagnostic formatting service.

Centralizes diagnostic output formatting with configurable options.
Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Rust compiler-style output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Centralizes formatting of Diagnostic objects into human-readable
    or machine-readable output.

    Attributes:
        output_format: Output style (rust, simple, json)
        color: Enable ANSI color codes (for terminal output)

    Example:
        >>> formatter = DiagnosticFormatter()
        >>> diagnostic = ErrorTemplate.undocumented_function("parse")
        >>> print(formatter.format(diagnostic))
        error[UNDOCUMENTED_FUNCTION]: Public function 'parse' has no doc comment
          = function: parse
          = help: Add a /// or /** */ comment directly above the declaration

        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(diagnostic))
        UNDOCUMENTED_FUNCTION: Public function 'parse' has no doc comment
    """

    output_format: OutputFormat = OutputFormat.RUST
    color: bool = False

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format multiple diagnostics.

        JSON output puts one object per line; the other formats separate
        diagnostics with a blank line.
        """
        separator = "\n" if self.output_format == OutputFormat.JSON else "\n\n"
        return separator.join(self.format(d) for d in diagnostics)

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in Rust compiler style.

        Example output:
            error[TOKENIZE_FAILED]: Tokenizer failed at line 3, column 1: ...
              --> line 3, column 1
              = help: The text fallback should accept any input
        """
        severity = "\033[1;31merror\033[0m" if self.color else "error"  # Bold red

        parts = [f"{severity}[{diagnostic.code.name}]: {diagnostic.message}"]

        if diagnostic.span:
            parts.append(f"  --> line {diagnostic.span.line}, column {diagnostic.span.column}")

        if diagnostic.function_name:
            parts.append(f"  = function: {diagnostic.function_name}")

        if diagnostic.command:
            parts.append(f"  = command: {' '.join(diagnostic.command)}")

        if diagnostic.hint:
            parts.append(f"  = help: {diagnostic.hint}")

        return "\n".join(parts)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in single-line format.

        Example output:
            UNDOCUMENTED_FUNCTION: Public function 'parse' has no doc comment
        """
        return f"{diagnostic.code.name}: {diagnostic.message}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic as JSON.

        Example output:
            {"code": "UNDOCUMENTED_FUNCTION", "code_value": 5001, "message": "..."}
        """
        data: dict[str, str | int | list[str] | None] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": diagnostic.message,
        }

        if diagnostic.span:
            data["line"] = diagnostic.span.line
            data["column"] = diagnostic.span.column
            data["start"] = diagnostic.span.start
            data["end"] = diagnostic.span.end

        if diagnostic.function_name:
            data["function_name"] = diagnostic.function_name

        if diagnostic.command:
            data["command"] = list(diagnostic.command)

        if diagnostic.hint:
            data["hint"] = diagnostic.hint

        return json.dumps(data, ensure_ascii=False)

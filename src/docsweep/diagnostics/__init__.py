"""Diagnostic system for docsweep errors and findings.

Provides structured diagnostics with codes, spans and hints.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import DocsweepError, GrammarError, TokenizeError, VcsError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "DocsweepError",
    "ErrorTemplate",
    "GrammarError",
    "OutputFormat",
    "SourceSpan",
    "TokenizeError",
    "VcsError",
]

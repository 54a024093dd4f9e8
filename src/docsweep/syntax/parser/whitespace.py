"""Whitespace handling parsers.

Whitespace here is space, tab, LF and CR. Line endings accept LF, CRLF and
CR-only and always yield "\\n".
"""

from docsweep.syntax.parser.core import Parser, pure
from docsweep.syntax.parser.primitives import char, literal, satisfy
from docsweep.syntax.parser.repetition import skip_many

__all__ = [
    "end_of_line",
    "is_space",
    "skip_spaces",
    "space",
]

_SPACE_CHARS: frozenset[str] = frozenset((" ", "\t", "\n", "\r"))


def is_space(c: str) -> bool:
    """Check for space, tab, LF or CR."""
    return c in _SPACE_CHARS


space: Parser[str] = satisfy(is_space, "space")
"""Parse one whitespace character."""

skip_spaces: Parser[None] = skip_many(space)
"""Skip zero or more whitespace characters. Never fails."""

end_of_line: Parser[str] = (
    char("\n")
    .then_discard_left(pure("\n"))
    .or_else(literal("\r\n").then_discard_left(pure("\n")))
    .or_else(char("\r").then_discard_left(pure("\n")))
)
"""Match LF, CRLF or CR; value normalized to LF.

CRLF is tried before CR so the LF half is never left behind.
"""

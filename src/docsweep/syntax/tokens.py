"""Token definitions.

The tokenizer classifies source text into three kinds of contiguous spans.
Includes type guards as static methods, so callers can narrow without
isinstance chains.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from typing import TypeIs

from docsweep.constants import DOC_COMMENT_PREFIXES
from docsweep.enums import TokenKind

__all__ = [
    "Comment",
    "StringLiteral",
    "Text",
    "Token",
]


@dataclass(frozen=True, slots=True)
class Comment:
    """Line or block comment.

    Attributes:
        text: Full comment including delimiters ("// x", "/* x */"). Line
            comments exclude their line terminator.
    """

    text: str

    @property
    def kind(self) -> TokenKind:
        return TokenKind.COMMENT

    @property
    def is_doc(self) -> bool:
        """True for documentation comments (/// or /** prefix)."""
        return self.text.startswith(DOC_COMMENT_PREFIXES)

    @staticmethod
    def guard(token: object) -> TypeIs["Comment"]:
        """Type guard for Comment."""
        return isinstance(token, Comment)


@dataclass(frozen=True, slots=True)
class StringLiteral:
    """Double-quoted string literal.

    Attributes:
        text: Content between the quotes. Escape pairs (\\\\ and \\") are
            kept in their two-character source form.
    """

    text: str

    @property
    def kind(self) -> TokenKind:
        return TokenKind.STRING

    @staticmethod
    def guard(token: object) -> TypeIs["StringLiteral"]:
        """Type guard for StringLiteral."""
        return isinstance(token, StringLiteral)


@dataclass(frozen=True, slots=True)
class Text:
    """Plain source text between comments and strings."""

    text: str

    @property
    def kind(self) -> TokenKind:
        return TokenKind.TEXT

    @staticmethod
    def guard(token: object) -> TypeIs["Text"]:
        """Type guard for Text."""
        return isinstance(token, Text)


type Token = Comment | StringLiteral | Text

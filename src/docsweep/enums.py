"""Enumerations for docsweep type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class TokenKind(StrEnum):
    """Kind of token produced by the tokenizer.

    StrEnum provides automatic string conversion: str(TokenKind.COMMENT) == "comment"
    """

    COMMENT = "comment"
    """Line or block comment, delimiters included: // note, /* note */"""

    STRING = "string"
    """String literal content without quotes: "hello" -> hello"""

    TEXT = "text"
    """Everything else: code between comments and strings"""


class NodeKind(StrEnum):
    """Kind of node in a balanced nested-structure trace.

    StrEnum provides automatic string conversion: str(NodeKind.OPEN) == "open"
    """

    OPEN = "open"
    """Opening delimiter: /*"""

    INNER = "inner"
    """Run of content between delimiters"""

    CLOSE = "close"
    """Closing delimiter: */"""


__all__ = [
    "NodeKind",
    "TokenKind",
]

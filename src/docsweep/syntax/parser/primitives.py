"""Primitive parsers.

Single-character parsers and the literal/look-ahead building blocks that the
tokenizer and the documentation checker are assembled from. All parsers here
operate on Unicode code points (Python ``str`` elements).
"""

from collections.abc import Callable

from docsweep.constants import PREDICATE_FAILED
from docsweep.syntax.cursor import Cursor
from docsweep.syntax.parser.core import Parser, attempt, pure
from docsweep.syntax.parser.result import Failure, Result, Success

__all__ = [
    "any_char",
    "char",
    "literal",
    "look_ahead",
    "satisfy",
]


def satisfy(predicate: Callable[[str], bool], name: str | None = None) -> Parser[str]:
    """Parse one character for which predicate holds.

    Fails with "did not satisfy predicate" at the input cursor when the
    predicate rejects the character or the input is exhausted.

    Args:
        predicate: Character test
        name: Optional parser label for repr

    Example:
        >>> digit = satisfy(str.isdigit)
        >>> digit.run("42").value
        '4'
        >>> digit.run("x").message
        'did not satisfy predicate'
    """

    def parse(cursor: Cursor) -> Result[str]:
        if not cursor.is_eof:
            head = cursor.current
            if predicate(head):
                return Success(cursor.advance(), head)
        return Failure(cursor, PREDICATE_FAILED)

    return Parser(parse, name or "satisfy")


def char(expected: str) -> Parser[str]:
    """Parse exactly the character expected."""
    return satisfy(lambda c: c == expected, f"char({expected!r})")


any_char: Parser[str] = satisfy(lambda _: True, "any_char")
"""Parse any single character (fails only at end of input)."""


def literal(expected: str) -> Parser[str]:
    """Parse the exact string expected, character by character.

    Returns expected and consumes exactly len(expected) characters. On a
    mismatch the Failure reports the input cursor, so no partial consumption
    is visible. The empty literal always succeeds without consuming.

    Example:
        >>> literal("/*").run("/* x */").cursor.pos
        2
        >>> literal("/*").run("//").cursor.pos
        0
    """
    parser: Parser[str] = pure(expected)
    for c in reversed(expected):
        parser = char(c).then_discard_left(parser)
    return attempt(Parser(parser.parse, f"literal({expected!r})"))


def look_ahead[T](parser: Parser[T]) -> Parser[T]:
    """Apply parser without consuming input.

    On success the value is kept and the cursor is rewound to the input;
    failures pass through unchanged.
    """

    def parse(cursor: Cursor) -> Result[T]:
        result = parser.parse(cursor)
        if isinstance(result, Failure):
            return result
        return Success(cursor, result.value)

    return Parser(parse, f"look_ahead({parser.name})" if parser.name else None)

"""Repetition combinators.

All repetition is a loop over an immutable cursor, so Python call depth stays
constant no matter how many elements are matched. A whole source file can be
consumed one character at a time by ``many_till(any_char, ...)``.

Progress Contract:
    The inner parser of many/many1/many_till/skip_many/skip_many1 must
    consume input whenever it succeeds. A parser that succeeds on empty input
    would repeat forever, so the combinators raise GrammarError
    (REPETITION_NO_PROGRESS) the moment they observe a zero-width success.
    This is a bug in the grammar, never a property of the input.
"""

from docsweep.diagnostics import ErrorTemplate, GrammarError
from docsweep.syntax.cursor import Cursor
from docsweep.syntax.parser.core import Parser, apply
from docsweep.syntax.parser.result import Failure, Result, Success

__all__ = [
    "many",
    "many1",
    "many_till",
    "skip_many",
    "skip_many1",
]


def _require_progress(before: Cursor, after: Cursor) -> None:
    """Raise GrammarError if a repeated parser did not advance."""
    if after.pos <= before.pos:
        raise GrammarError(ErrorTemplate.repetition_no_progress(before.pos))


def many[T](parser: Parser[T]) -> Parser[tuple[T, ...]]:
    """Parse zero or more occurrences of parser.

    Never fails. Returns the longest run of consecutive successes in the
    order encountered; the remaining input is where the first failure began.

    Example:
        >>> many(char("a")).run("aab").value
        ('a', 'a')
        >>> many(char("a")).run("b").cursor.pos
        0
    """

    def parse(cursor: Cursor) -> Result[tuple[T, ...]]:
        values: list[T] = []
        while True:
            result = parser.parse(cursor)
            if isinstance(result, Failure):
                return Success(cursor, tuple(values))
            _require_progress(cursor, result.cursor)
            values.append(result.value)
            cursor = result.cursor

    return Parser(parse)


def many1[T](parser: Parser[T]) -> Parser[tuple[T, ...]]:
    """Parse one or more occurrences of parser.

    The first match is prepended to the many() tail.
    """
    return apply(parser.map(lambda head: lambda tail: (head, *tail)), many(parser))


def many_till[T](parser: Parser[T], end: Parser[object]) -> Parser[tuple[T, ...]]:
    """Parse occurrences of parser until end succeeds.

    end is tried first at every position, so zero occurrences are fine.
    end's value is discarded but its consumption is kept (wrap it in
    look_ahead() to stop in front of the terminator). Fails with parser's
    failure if parser fails before end succeeds, including at end of input.

    Example:
        >>> many_till(any_char, literal("*/")).run("ab*/c").value
        ('a', 'b')
    """

    def parse(cursor: Cursor) -> Result[tuple[T, ...]]:
        values: list[T] = []
        while True:
            ended = end.parse(cursor)
            if isinstance(ended, Success):
                return Success(ended.cursor, tuple(values))
            result = parser.parse(cursor)
            if isinstance(result, Failure):
                return result
            _require_progress(cursor, result.cursor)
            values.append(result.value)
            cursor = result.cursor

    return Parser(parse)


def skip_many(parser: Parser[object]) -> Parser[None]:
    """Skip zero or more occurrences of parser. Never fails."""

    def parse(cursor: Cursor) -> Result[None]:
        while True:
            result = parser.parse(cursor)
            if isinstance(result, Failure):
                return Success(cursor, None)
            _require_progress(cursor, result.cursor)
            cursor = result.cursor

    return Parser(parse)


def skip_many1(parser: Parser[object]) -> Parser[None]:
    """Skip one or more occurrences of parser."""
    return parser.then_discard_left(skip_many(parser))

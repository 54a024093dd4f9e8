"""Parser value and combinator algebra.

A :class:`Parser` wraps a function ``Cursor -> Result[T]``. Building a parser
does no work; work happens only in :meth:`Parser.parse`. Parsers hold no
mutable state, so module-level parser constants can be shared freely.

Composition:
    map                 transform a success value
    bind                feed a success value into the next parser
    apply               run a parser of functions, then its argument
    or_else             alternation with full backtracking
    then_discard_left   run both, keep the right value
    then_discard_right  run both, keep the left value

Laziness:
    Wherever a combinator takes a second parser it also accepts a
    zero-argument callable returning one. The callable is only invoked when
    the second parser actually has to run, which lets grammars refer to
    parsers defined further down (or to themselves) without a fixed-point
    operator. :func:`lazy` wraps such a callable into a standalone Parser.

Backtracking:
    ``p.or_else(q)`` runs ``q`` against the cursor ``p`` was given, no matter
    how far ``p`` got before failing. Nested comment parsing relies on this.
"""

from collections.abc import Callable

from docsweep.syntax.cursor import Cursor
from docsweep.syntax.parser.result import Failure, Result, Success

__all__ = [
    "Parser",
    "ParserLike",
    "apply",
    "attempt",
    "fail",
    "lazy",
    "pure",
]


class Parser[T]:
    """Immutable, reusable parser value.

    Example:
        >>> digit = Parser(lambda c: Success(c.advance(), c.current)
        ...                if not c.is_eof and c.current.isdigit()
        ...                else Failure(c, "expected digit"))
        >>> digit.map(int).run("7x").value
        7
    """

    __slots__ = ("_parse", "name")

    def __init__(self, parse: Callable[[Cursor], Result[T]], name: str | None = None) -> None:
        """Wrap a parse function.

        Args:
            parse: Function from input cursor to Result
            name: Optional label shown in repr (debugging aid only)
        """
        self._parse = parse
        self.name = name

    def __repr__(self) -> str:
        return f"Parser({self.name})" if self.name else "Parser(<anonymous>)"

    def parse(self, cursor: Cursor) -> Result[T]:
        """Apply the parser to input at cursor."""
        return self._parse(cursor)

    def run(self, source: str) -> Result[T]:
        """Apply the parser to source from position 0."""
        return self._parse(Cursor(source, 0))

    def map[U](self, f: Callable[[T], U]) -> "Parser[U]":
        """Transform the success value with f; failures pass through unchanged."""

        def parse(cursor: Cursor) -> Result[U]:
            match self._parse(cursor):
                case Success(cursor=rest, value=value):
                    return Success(rest, f(value))
                case Failure() as failure:
                    return failure

        return Parser(parse, self.name)

    def bind[U](self, f: Callable[[T], "Parser[U]"]) -> "Parser[U]":
        """Run self, then the parser f builds from its value, on the remainder.

        Short-circuits on failure: f is never called.
        """

        def parse(cursor: Cursor) -> Result[U]:
            match self._parse(cursor):
                case Success(cursor=rest, value=value):
                    return f(value).parse(rest)
                case Failure() as failure:
                    return failure

        return Parser(parse)

    def or_else(self, other: "ParserLike[T]") -> "Parser[T]":
        """Alternation: run other on the ORIGINAL input if self fails.

        If self succeeds, other is never evaluated (callables stay uncalled).
        """

        def parse(cursor: Cursor) -> Result[T]:
            result = self._parse(cursor)
            if isinstance(result, Failure):
                return _force(other).parse(cursor)
            return result

        return Parser(parse)

    def then_discard_left[U](self, other: "ParserLike[U]") -> "Parser[U]":
        """Run self, then other; keep only other's value."""

        def parse(cursor: Cursor) -> Result[U]:
            left = self._parse(cursor)
            if isinstance(left, Failure):
                return left
            return _force(other).parse(left.cursor)

        return Parser(parse)

    def then_discard_right(self, other: "ParserLike[object]") -> "Parser[T]":
        """Run self, then other; keep only self's value."""

        def parse(cursor: Cursor) -> Result[T]:
            left = self._parse(cursor)
            if isinstance(left, Failure):
                return left
            right = _force(other).parse(left.cursor)
            if isinstance(right, Failure):
                return right
            return Success(right.cursor, left.value)

        return Parser(parse)


type ParserLike[T] = Parser[T] | Callable[[], Parser[T]]


def _force[T](parser: ParserLike[T]) -> Parser[T]:
    """Resolve a possibly-deferred parser argument."""
    return parser if isinstance(parser, Parser) else parser()


def pure[T](value: T) -> Parser[T]:
    """Always succeed with value, consuming nothing."""
    return Parser(lambda cursor: Success(cursor, value), f"pure({value!r})")


def fail(message: str) -> Parser[object]:
    """Always fail with message, consuming nothing."""
    return Parser(lambda cursor: Failure(cursor, message), f"fail({message!r})")


def apply[A, B](
    function_parser: Parser[Callable[[A], B]], argument_parser: ParserLike[A]
) -> Parser[B]:
    """Applicative sequencing: run function_parser, then argument_parser on the rest.

    Example:
        >>> pair = apply(any_char.map(lambda a: lambda b: a + b), any_char)
        >>> pair.run("xyz").value
        'xy'
    """
    return function_parser.bind(lambda f: _force(argument_parser).map(f))


def lazy[T](thunk: Callable[[], Parser[T]]) -> Parser[T]:
    """Defer building a parser until it is applied.

    Used for self-referential or forward-referenced grammar rules. The thunk
    runs on every application; it should only look up an existing parser.
    """
    return Parser(lambda cursor: thunk().parse(cursor))


def attempt[T](parser: Parser[T]) -> Parser[T]:
    """Run parser; on failure, report the input cursor instead of where it stopped.

    Hides partial consumption from callers that inspect Failure.cursor.
    Alternation already retries from the original input, so this only
    matters for diagnostics.
    """

    def parse(cursor: Cursor) -> Result[T]:
        result = parser.parse(cursor)
        if isinstance(result, Failure):
            return Failure(cursor, result.message)
        return result

    return Parser(parse, parser.name)

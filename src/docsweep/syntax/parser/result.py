"""Parser result model.

Every parser application returns exactly one of:

- ``Success(cursor, value)`` - parsed ``value``, remaining input at ``cursor``
- ``Failure(cursor, message)`` - diagnostic ``message``, stopped at ``cursor``

Failures are plain values. Nothing in the combinator engine raises on bad
input; alternation recovers from a Failure by retrying from its own input.
"""

from dataclasses import dataclass

from docsweep.syntax.cursor import Cursor

__all__ = ["Failure", "Result", "Success"]


@dataclass(frozen=True, slots=True)
class Success[T]:
    """Successful parse.

    Attributes:
        cursor: Remaining input (suffix of the input given to the parser)
        value: Parsed value

    Example:
        >>> result = Success(Cursor("hello", 1), "h")
        >>> result.value
        'h'
        >>> result.cursor.remaining
        'ello'
    """

    cursor: Cursor
    value: T


@dataclass(frozen=True, slots=True)
class Failure:
    """Failed parse.

    Attributes:
        cursor: Input position where the failing parser stopped
        message: Fixed diagnostic, e.g. "did not satisfy predicate"
    """

    cursor: Cursor
    message: str

    def format_error(self) -> str:
        """Format failure with line:column.

        Example:
            >>> Failure(Cursor("a\\nbc", 3), "did not satisfy predicate").format_error()
            '2:2: did not satisfy predicate'
        """
        line, col = self.cursor.compute_line_col()
        return f"{line}:{col}: {self.message}"


type Result[T] = Success[T] | Failure

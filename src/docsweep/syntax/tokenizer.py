"""Comment / string / text tokenizer.

Grammar (ordered choice, left to right):

    token   := comment | string | text
    comment := "//" many_till(any_char, end_of_line)
             | balanced(any_char, "/*", "*/")
    string  := '"' many_till("\\\\" | '\\"' | any_char, '"')
    text    := many_till(any_char, look_ahead(comment | string))
    tokens  := many(skip_spaces token)

Whatever input the token repetition leaves behind (typically a text run that
reaches end of input without meeting a comment or string) becomes one final
Text token, so concatenating the token texts loses only inter-token
whitespace and comment/string delimiters, never code.

Security:
    Includes configurable input size limit to prevent DoS via extremely
    large staged diffs, and an optional nesting limit for /* */ regions.
"""

import logging

from docsweep.constants import MAX_NESTING_DEPTH, MAX_SOURCE_SIZE
from docsweep.diagnostics import ErrorTemplate, TokenizeError
from docsweep.syntax.cursor import Cursor
from docsweep.syntax.parser import (
    Failure,
    Parser,
    any_char,
    apply,
    balanced,
    end_of_line,
    literal,
    look_ahead,
    many,
    many_till,
    render_nodes,
    skip_spaces,
)
from docsweep.syntax.tokens import Comment, StringLiteral, Text, Token

__all__ = [
    "Tokenizer",
    "comment",
    "multi_line_comment",
    "single_line_comment",
    "string_literal",
    "text",
    "tokenize",
    "tokens",
]

logger = logging.getLogger(__name__)


single_line_comment: Parser[Token] = apply(
    literal("//").map(lambda marker: lambda body: Comment(marker + "".join(body))),
    many_till(any_char, end_of_line),
)
"""// comment up to (not including) the line terminator, which is consumed."""


def multi_line_comment(max_depth: int | None = MAX_NESTING_DEPTH) -> Parser[Token]:
    """Nested /* */ comment, flattened back into its exact source text."""
    return balanced(any_char, literal("/*"), literal("*/"), max_depth=max_depth).map(
        lambda nodes: Comment(render_nodes(nodes))
    )


_quote = literal('"')

string_literal: Parser[Token] = _quote.then_discard_left(
    many_till(literal("\\\\").or_else(literal('\\"')).or_else(any_char), _quote)
).map(lambda parts: StringLiteral("".join(parts)))
"""Double-quoted string; escape pairs are matched as units and kept verbatim."""


def _build_grammar(
    max_depth: int | None,
) -> tuple[Parser[Token], Parser[Token], Parser[tuple[Token, ...]]]:
    """Assemble comment, text and token-sequence parsers for a nesting limit."""
    comment_parser = single_line_comment.or_else(multi_line_comment(max_depth))
    text_parser: Parser[Token] = many_till(
        any_char, look_ahead(comment_parser.or_else(string_literal))
    ).map(lambda chars: Text("".join(chars)))
    token = comment_parser.or_else(string_literal).or_else(text_parser)
    return comment_parser, text_parser, many(skip_spaces.then_discard_left(token))


comment, text, tokens = _build_grammar(MAX_NESTING_DEPTH)


class Tokenizer:
    """Tokenizer with size and nesting limits.

    Attributes:
        max_source_size: Maximum allowed source size in characters (default: 10 MB)
        max_nesting_depth: Maximum /* */ nesting depth, None for unbounded
    """

    __slots__ = ("_grammar", "_max_nesting_depth", "_max_source_size")

    def __init__(
        self,
        *,
        max_source_size: int | None = None,
        max_nesting_depth: int | None = None,
    ) -> None:
        """Initialize tokenizer with optional size and nesting depth limits.

        Args:
            max_source_size: Maximum source size in characters (default: 10 MB).
                            Set to 0 to disable size limit (not recommended).
            max_nesting_depth: Maximum nesting of /* */ comments. Deeper
                              regions are not comments and fall back to text.

        Raises:
            ValueError: If max_nesting_depth is less than 1
        """
        if max_nesting_depth is not None and max_nesting_depth < 1:
            msg = f"max_nesting_depth must be >= 1, got {max_nesting_depth}"
            raise ValueError(msg)
        self._max_source_size = (
            max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
        )
        self._max_nesting_depth = (
            max_nesting_depth if max_nesting_depth is not None else MAX_NESTING_DEPTH
        )
        if self._max_nesting_depth == MAX_NESTING_DEPTH:
            self._grammar = tokens
        else:
            self._grammar = _build_grammar(self._max_nesting_depth)[2]

    @property
    def max_source_size(self) -> int:
        """Maximum allowed source size in characters."""
        return self._max_source_size

    @property
    def max_nesting_depth(self) -> int | None:
        """Maximum /* */ nesting depth (None means unbounded)."""
        return self._max_nesting_depth

    def tokenize(self, source: str) -> tuple[Token, ...]:
        """Split source into Comment, StringLiteral and Text tokens.

        Args:
            source: Text to tokenize (typically a staged diff)

        Returns:
            Tokens in source order

        Raises:
            ValueError: If source exceeds max_source_size (DoS prevention)
            TokenizeError: If the token repetition fails outright

        Example:
            >>> Tokenizer().tokenize('x = "hi" // note\\n')
            (Text(text='x = '), StringLiteral(text='hi'), Comment(text='// note'))
        """
        if self._max_source_size > 0 and len(source) > self._max_source_size:
            msg = (
                f"Source size ({len(source):,} characters) exceeds maximum "
                f"({self._max_source_size:,} characters). "
                "Configure max_source_size in Tokenizer constructor to increase limit."
            )
            raise ValueError(msg)

        result = self._grammar.parse(Cursor(source, 0))
        if isinstance(result, Failure):
            span = result.cursor.span_to(result.cursor)
            logger.error("Tokenizer failed: %s", result.format_error())
            raise TokenizeError(ErrorTemplate.tokenize_failed(result.message, span))

        found = result.value
        if not result.cursor.is_eof:
            found = (*found, Text(result.cursor.remaining))

        logger.debug("Tokenized %d characters into %d tokens", len(source), len(found))
        return found


def tokenize(source: str) -> tuple[Token, ...]:
    """Tokenize source with default limits.

    Convenience function for Tokenizer().tokenize().

    Example:
        >>> from docsweep.syntax import tokenize
        >>> tokenize("/* a /* b */ c */")
        (Comment(text='/* a /* b */ c */'),)
    """
    return Tokenizer().tokenize(source)

"""Public function documentation check.

Walks the token stream looking for ``public func <name>`` declarations in
Text tokens and reports those not preceded by a doc comment (a Comment
token starting with ``///`` or ``/**``).

Attribution Policy:
    A doc comment documents only the FIRST function declared in the Text
    token that follows it. Later declarations in the same Text token count
    as undocumented even though nothing but code separates them from the
    comment. The first token of the stream has no predecessor and is never
    considered documented.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from docsweep.syntax.parser import (
    Failure,
    Parser,
    any_char,
    literal,
    many,
    many_till,
    satisfy,
    skip_spaces,
    space,
)
from docsweep.syntax.tokens import Comment, Text, Token

__all__ = [
    "DocumentationReport",
    "check_documentation",
    "find_undocumented_functions",
    "is_doc_comment",
    "public_function",
    "public_function_names",
]

logger = logging.getLogger(__name__)

# TODO: operator declarations ("public func <&> ...") yield the operator
# followed by the generic clause instead of a clean name.
public_function: Parser[str] = (
    skip_spaces.then_discard_left(literal("public"))
    .then_discard_left(space)
    .then_discard_left(skip_spaces)
    .then_discard_left(literal("func"))
    .then_discard_left(space)
    .then_discard_left(skip_spaces)
    .then_discard_left(many_till(any_char, satisfy(lambda c: c in "<(")))
    .map("".join)
)
"""Matches ``public func NAME`` up to and including the first ``<`` or ``(``."""

_names_or_skips: Parser[tuple[str | None, ...]] = many(
    public_function.or_else(any_char.map(lambda _: None))
)


def public_function_names(text: str) -> list[str]:
    """All public function names declared in text, in order.

    Example:
        >>> public_function_names("public func foo() {} public func bar<T>(x: T) {}")
        ['foo', 'bar']
    """
    result = _names_or_skips.run(text)
    if isinstance(result, Failure):
        # many() never fails
        return []
    return [name for name in result.value if name is not None]


def is_doc_comment(token: Token | None) -> bool:
    """Check whether token is a documentation comment (/// or /**)."""
    return Comment.guard(token) and token.is_doc


@dataclass(frozen=True, slots=True)
class DocumentationReport:
    """Outcome of a documentation check.

    Attributes:
        documented: Number of functions credited to a preceding doc comment
        undocumented: Undocumented function names in source order (may repeat)
    """

    documented: int
    undocumented: tuple[str, ...]

    @property
    def passed(self) -> bool:
        """True when every public function found is documented."""
        return not self.undocumented


def check_documentation(tokens: Sequence[Token]) -> DocumentationReport:
    """Check public functions in a token stream for preceding doc comments.

    Args:
        tokens: Tokenizer output, in source order

    Returns:
        DocumentationReport with counts and undocumented names
    """
    documented = 0
    undocumented: list[str] = []
    previous: Token | None = None

    for token in tokens:
        if Text.guard(token):
            names = public_function_names(token.text)
            if names and is_doc_comment(previous):
                documented += 1
                undocumented.extend(names[1:])
            else:
                undocumented.extend(names)
        previous = token

    logger.debug(
        "Checked %d tokens: %d documented, %d undocumented",
        len(tokens),
        documented,
        len(undocumented),
    )
    return DocumentationReport(documented=documented, undocumented=tuple(undocumented))


def find_undocumented_functions(tokens: Sequence[Token]) -> list[str]:
    """Names of public functions not preceded by a doc comment.

    Example:
        >>> find_undocumented_functions([
        ...     Comment("/// doc"),
        ...     Text("public func foo() {} public func bar() {}"),
        ... ])
        ['bar']
    """
    return list(check_documentation(tokens).undocumented)

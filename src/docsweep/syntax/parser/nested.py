"""Balanced nested-structure parsing.

Grammar:
    balanced := Open(open) (balanced | InnerRun)* Close(close)
    InnerRun := Inner(many_till(inner, look_ahead(open) | look_ahead(close)))

The result is a FLAT tuple of Open / Inner / Close nodes, a parenthesis
matching trace. Nesting depth is recovered by counting, no tree is built:

    "/* a /* b */ c */"
    -> Open("/*") Inner(" a ") Open("/*") Inner(" b ") Close("*/")
       Inner(" c ") Close("*/")

Invariants:
    - count(Open) == count(Close)
    - render_nodes(nodes) == the consumed substring (for character parsers)

Termination:
    At every step close is tried first, then open, then an inner run. An
    inner run only starts where neither delimiter matches, so it consumes at
    least one element or fails. Each open consumes its delimiter. The
    recursion of the grammar is carried by an explicit depth counter, so
    thousands of nesting levels cost list memory, not Python stack frames.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from docsweep.constants import NESTING_DEPTH_EXCEEDED
from docsweep.enums import NodeKind
from docsweep.syntax.cursor import Cursor
from docsweep.syntax.parser.core import Parser
from docsweep.syntax.parser.primitives import look_ahead
from docsweep.syntax.parser.repetition import _require_progress, many_till
from docsweep.syntax.parser.result import Failure, Result, Success

__all__ = [
    "Close",
    "Inner",
    "Node",
    "Open",
    "balanced",
    "between",
    "nesting_depth",
    "render_nodes",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Open[O]:
    """Opening delimiter, as returned by the open parser."""

    marker: O

    @property
    def kind(self) -> NodeKind:
        return NodeKind.OPEN


@dataclass(frozen=True, slots=True)
class Inner[I]:
    """Run of inner-parser values between two delimiters."""

    content: tuple[I, ...]

    @property
    def kind(self) -> NodeKind:
        return NodeKind.INNER


@dataclass(frozen=True, slots=True)
class Close[C]:
    """Closing delimiter, as returned by the close parser."""

    marker: C

    @property
    def kind(self) -> NodeKind:
        return NodeKind.CLOSE


type Node[O, I, C] = Open[O] | Inner[I] | Close[C]


def balanced[O, I, C](
    inner: Parser[I],
    open_: Parser[O],
    close: Parser[C],
    *,
    max_depth: int | None = None,
) -> Parser[tuple[Node[O, I, C], ...]]:
    """Parse open, then nested regions and inner runs, then the matching close.

    Args:
        inner: Parser for content elements (e.g. any_char)
        open_: Opening delimiter parser (must consume input)
        close: Closing delimiter parser
        max_depth: Fail with "nesting depth exceeded" beyond this many
            simultaneously open regions. None means unbounded.

    Returns:
        Parser yielding the flat node trace. Fails if the input does not
        start with open_, if inner fails before a delimiter is found, or if
        the region is never closed.

    Raises:
        ValueError: If max_depth is less than 1

    Example:
        >>> nodes = balanced(any_char, literal("("), literal(")")).run("(a(b))").value
        >>> render_nodes(nodes)
        '(a(b))'
    """
    if max_depth is not None and max_depth < 1:
        msg = f"max_depth must be >= 1, got {max_depth}"
        raise ValueError(msg)

    inner_run = many_till(inner, look_ahead(open_).or_else(look_ahead(close)))

    def parse(cursor: Cursor) -> Result[tuple[Node[O, I, C], ...]]:
        opened = open_.parse(cursor)
        if isinstance(opened, Failure):
            return opened
        _require_progress(cursor, opened.cursor)

        nodes: list[Node[O, I, C]] = [Open(opened.value)]
        depth = 1
        position = opened.cursor

        while depth:
            closed = close.parse(position)
            if isinstance(closed, Success):
                nodes.append(Close(closed.value))
                depth -= 1
                position = closed.cursor
                continue

            opened = open_.parse(position)
            if isinstance(opened, Success):
                if max_depth is not None and depth >= max_depth:
                    logger.debug(
                        "Nesting depth %d exceeded at position %d", max_depth, position.pos
                    )
                    return Failure(position, NESTING_DEPTH_EXCEEDED)
                _require_progress(position, opened.cursor)
                nodes.append(Open(opened.value))
                depth += 1
                position = opened.cursor
                continue

            run = inner_run.parse(position)
            if isinstance(run, Failure):
                return run
            _require_progress(position, run.cursor)
            nodes.append(Inner(run.value))
            position = run.cursor

        return Success(position, tuple(nodes))

    return Parser(parse, "balanced")


def between[T](parser: Parser[T], open_: Parser[object], close: Parser[object]) -> Parser[T]:
    """Parse open_, then parser, then close; keep parser's value."""
    return open_.then_discard_left(parser).then_discard_right(close)


def nesting_depth(nodes: tuple[Node[object, object, object], ...]) -> int:
    """Maximum number of simultaneously open regions in a node trace."""
    depth = deepest = 0
    for node in nodes:
        match node:
            case Open():
                depth += 1
                deepest = max(deepest, depth)
            case Close():
                depth -= 1
            case Inner():
                pass
    return deepest


def render_nodes(
    nodes: tuple[Node[object, object, object], ...],
    render_inner: Callable[[tuple[object, ...]], str] | None = None,
) -> str:
    """Concatenate a node trace back into text.

    Open and Close contribute str(marker); Inner contributes
    render_inner(content), by default the concatenation of its elements.
    """
    parts: list[str] = []
    for node in nodes:
        match node:
            case Open(marker=marker) | Close(marker=marker):
                parts.append(str(marker))
            case Inner(content=content):
                if render_inner is None:
                    parts.append("".join(str(element) for element in content))
                else:
                    parts.append(render_inner(content))
    return "".join(parts)

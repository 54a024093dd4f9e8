"""Parser combinator engine.

Module Organization:
- result.py: Success / Failure result model
- core.py: Parser value, pure/fail/apply/lazy/attempt, alternation and sequencing
- primitives.py: satisfy, char, any_char, literal, look_ahead
- repetition.py: many, many1, many_till, skip_many, skip_many1
- whitespace.py: space, skip_spaces, end_of_line
- nested.py: balanced open/close regions as flat Open/Inner/Close traces
"""

from docsweep.syntax.parser.core import Parser, ParserLike, apply, attempt, fail, lazy, pure
from docsweep.syntax.parser.nested import (
    Close,
    Inner,
    Node,
    Open,
    balanced,
    between,
    nesting_depth,
    render_nodes,
)
from docsweep.syntax.parser.primitives import any_char, char, literal, look_ahead, satisfy
from docsweep.syntax.parser.repetition import many, many1, many_till, skip_many, skip_many1
from docsweep.syntax.parser.result import Failure, Result, Success
from docsweep.syntax.parser.whitespace import end_of_line, is_space, skip_spaces, space

__all__ = [
    "Close",
    "Failure",
    "Inner",
    "Node",
    "Open",
    "Parser",
    "ParserLike",
    "Result",
    "Success",
    "any_char",
    "apply",
    "attempt",
    "balanced",
    "between",
    "char",
    "end_of_line",
    "fail",
    "is_space",
    "lazy",
    "literal",
    "look_ahead",
    "many",
    "many1",
    "many_till",
    "nesting_depth",
    "pure",
    "render_nodes",
    "satisfy",
    "skip_many",
    "skip_many1",
    "skip_spaces",
    "space",
]

"""Source tokenizing package.

Provides the immutable cursor, the parser combinator engine, token
definitions and the comment / string / text tokenizer built on them.

Python 3.13+.
"""

from .cursor import Cursor
from .parser import Failure, Parser, Result, Success
from .tokenizer import Tokenizer, tokenize
from .tokens import Comment, StringLiteral, Text, Token

__all__ = [
    "Comment",
    "Cursor",
    "Failure",
    "Parser",
    "Result",
    "StringLiteral",
    "Success",
    "Text",
    "Token",
    "Tokenizer",
    "tokenize",
]

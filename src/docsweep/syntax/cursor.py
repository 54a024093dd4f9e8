"""Immutable cursor infrastructure for combinator parsing.

A Cursor is the "input" every parser receives and the "remaining input"
every parser result carries. Remaining input is always the suffix
``source[pos:]``; nothing is ever copied.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor, the original stays valid for
      backtracking
    - Line:column computed on-demand (O(n) only for errors)

Pattern Reference:
    - Haskell Parsec
    - Rust nom parser combinator library
"""

from dataclasses import dataclass

from docsweep.diagnostics import SourceSpan

__all__ = ["Cursor"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Example:
        >>> cursor = Cursor("hello", 0)
        >>> cursor.current
        'h'
        >>> new_cursor = cursor.advance()
        >>> new_cursor.current
        'e'
        >>> cursor.current  # Original unchanged (immutability)
        'h'
        >>> Cursor("hi", 2).is_eof
        True
    """

    source: str
    pos: int = 0

    @property
    def is_eof(self) -> bool:
        """Check if at end of input."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            msg = f"Unexpected EOF at position {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    @property
    def remaining(self) -> str:
        """Unconsumed input (suffix of source starting at pos)."""
        return self.source[self.pos :]

    def peek(self, offset: int = 0) -> str | None:
        """Peek at character with offset without advancing.

        Returns:
            Character at position + offset, or None if beyond EOF
        """
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions (clamped at EOF).

        Example:
            >>> cursor = Cursor("hello", 0)
            >>> cursor.advance(2).pos
            2
            >>> cursor.pos
            0
        """
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos (exclusive)."""
        return self.source[self.pos : end_pos]

    def compute_line_col(self) -> tuple[int, int]:
        """Compute line and column for current position.

        Returns:
            (line, column) tuple (1-indexed, like text editors)

        Performance:
            O(n) where n = current position. Only call for error reporting.

        Example:
            >>> cursor = Cursor("line1\\nline2", 8)
            >>> cursor.compute_line_col()
            (2, 3)
        """
        line = self.source.count("\n", 0, self.pos) + 1
        last_newline = self.source.rfind("\n", 0, self.pos)
        col = self.pos - last_newline if last_newline >= 0 else self.pos + 1
        return (line, col)

    def span_to(self, end: "Cursor") -> SourceSpan:
        """Build a SourceSpan from this cursor up to end (exclusive)."""
        line, col = self.compute_line_col()
        return SourceSpan(start=self.pos, end=max(end.pos, self.pos), line=line, column=col)

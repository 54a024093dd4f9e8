"""docsweep exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.
Parse failures inside the combinator engine are values, never exceptions;
these types cover the boundaries where a value cannot be returned.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class DocsweepError(Exception):
    """Base exception for all docsweep errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize DocsweepError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class TokenizeError(DocsweepError):
    """The top-level token repetition failed outright.

    The text fallback accepts any input, so this signals a broken grammar
    rather than malformed source. Raised instead of returning an empty token
    sequence, which would read as "nothing to report".
    """


class GrammarError(DocsweepError):
    """A parser was combined in a way that violates a combinator contract.

    Example:
        many(skip_spaces)  <- inner parser succeeds without consuming input
    """


class VcsError(DocsweepError):
    """The version control collaborator could not produce diff text.

    Attributes:
        returncode: Exit status of the failed command (None if it never ran)
    """

    def __init__(self, message: str | Diagnostic, *, returncode: int | None = None) -> None:
        """Initialize VcsError.

        Args:
            message: Error message string OR Diagnostic object
            returncode: Exit status of the failed command
        """
        super().__init__(message)
        self.returncode = returncode

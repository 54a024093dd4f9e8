"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps raise sites short and gives tests one place to match messages.
    """

    # =========================================================================
    # SYNTAX ERRORS (3000-3999)
    # =========================================================================

    @staticmethod
    def tokenize_failed(reason: str, span: SourceSpan) -> Diagnostic:
        """Top-level token repetition failed.

        Args:
            reason: Failure message carried by the parser result
            span: Location where the failing parser stopped

        Returns:
            Diagnostic for TOKENIZE_FAILED
        """
        msg = f"Tokenizer failed at line {span.line}, column {span.column}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.TOKENIZE_FAILED,
            message=msg,
            span=span,
            hint="The text fallback should accept any input; check custom grammar changes",
        )

    @staticmethod
    def repetition_no_progress(position: int) -> Diagnostic:
        """Repetition combinator's inner parser succeeded without consuming input.

        Args:
            position: Cursor position where the inner parser stalled

        Returns:
            Diagnostic for REPETITION_NO_PROGRESS
        """
        msg = f"Repeated parser succeeded without consuming input at position {position}"
        return Diagnostic(
            code=DiagnosticCode.REPETITION_NO_PROGRESS,
            message=msg,
            span=None,
            hint="Parsers passed to many()/skip_many() must consume input on success",
        )

    # =========================================================================
    # DOCUMENTATION FINDINGS (5000-5999)
    # =========================================================================

    @staticmethod
    def undocumented_function(function_name: str) -> Diagnostic:
        """Public function without a preceding doc comment.

        Args:
            function_name: Name as written after the func keyword

        Returns:
            Diagnostic for UNDOCUMENTED_FUNCTION
        """
        msg = f"Public function '{function_name}' has no doc comment"
        return Diagnostic(
            code=DiagnosticCode.UNDOCUMENTED_FUNCTION,
            message=msg,
            span=None,
            hint="Add a /// or /** */ comment directly above the declaration",
            function_name=function_name,
        )

    # =========================================================================
    # VERSION CONTROL ERRORS (6000-6999)
    # =========================================================================

    @staticmethod
    def git_not_found(command: tuple[str, ...]) -> Diagnostic:
        """git executable could not be launched.

        Args:
            command: Command line that was attempted

        Returns:
            Diagnostic for GIT_NOT_FOUND
        """
        msg = f"Could not run '{command[0]}'"
        return Diagnostic(
            code=DiagnosticCode.GIT_NOT_FOUND,
            message=msg,
            span=None,
            hint="Install git or add it to PATH, or pass --stdin / --file",
            command=command,
        )

    @staticmethod
    def git_command_failed(
        command: tuple[str, ...], returncode: int, stderr: str
    ) -> Diagnostic:
        """git exited with a non-zero status.

        Args:
            command: Command line that failed
            returncode: Exit status
            stderr: Captured standard error (may be empty)

        Returns:
            Diagnostic for GIT_COMMAND_FAILED
        """
        msg = f"'{' '.join(command)}' exited with status {returncode}"
        detail = stderr.strip()
        if detail:
            msg += f": {detail}"
        return Diagnostic(
            code=DiagnosticCode.GIT_COMMAND_FAILED,
            message=msg,
            span=None,
            hint="Run the hook from inside a git work tree",
            command=command,
        )

    @staticmethod
    def diff_decode_failed(command: tuple[str, ...], reason: str) -> Diagnostic:
        """git output was not valid UTF-8.

        Args:
            command: Command line whose output failed to decode
            reason: Decoder error message

        Returns:
            Diagnostic for DIFF_DECODE_FAILED
        """
        msg = f"Output of '{' '.join(command)}' is not valid UTF-8: {reason}"
        return Diagnostic(
            code=DiagnosticCode.DIFF_DECODE_FAILED,
            message=msg,
            span=None,
            hint="Binary files in the staged diff must be excluded via .gitattributes",
            command=command,
        )

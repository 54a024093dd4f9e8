"""docsweep command-line entry point.

Git pre-commit hook for ensuring a minimal amount of documentation quality:
every public function added in the staged diff must be preceded by a doc
comment.

Exit Codes:
    0: All public functions documented
    1: Undocumented public functions found
    2: Input could not be obtained or tokenized

Examples:
  # As a pre-commit hook (checks the staged diff):
  docsweep

  # Check a file or piped text instead:
  docsweep --file Sources/Core/parser.swift
  git diff HEAD~1 | docsweep --stdin --format json
"""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from docsweep.checks import check_documentation
from docsweep.diagnostics import DiagnosticFormatter, DocsweepError, ErrorTemplate, OutputFormat
from docsweep.syntax import Tokenizer
from docsweep.vcs import staged_diff

__all__ = ["main"]

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_UNDOCUMENTED = 1
EXIT_ERROR = 2


def _positive_int(value: str) -> int:
    """argparse type for limits that must be at least 1."""
    try:
        number = int(value)
    except ValueError:
        msg = f"invalid int value: '{value}'"
        raise argparse.ArgumentTypeError(msg) from None
    if number < 1:
        msg = f"must be >= 1, got {number}"
        raise argparse.ArgumentTypeError(msg)
    return number


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="docsweep",
        description="Flag public functions without a preceding doc comment.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="Without --stdin or --file, the staged git diff is checked.",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--stdin",
        action="store_true",
        help="Read the text to check from standard input",
    )
    source.add_argument(
        "--file",
        type=Path,
        help="Read the text to check from a UTF-8 file",
    )
    parser.add_argument(
        "--format",
        choices=[f.value for f in OutputFormat],
        default=OutputFormat.RUST.value,
        help="Diagnostic output style (default: rust)",
    )
    parser.add_argument(
        "--max-nesting-depth",
        type=_positive_int,
        default=None,
        help="Maximum /* */ comment nesting depth (default: unbounded)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log debug output to stderr",
    )
    return parser.parse_args(argv)


def _read_input(args: argparse.Namespace) -> str:
    """Obtain the text to check according to the source options."""
    if args.stdin:
        return sys.stdin.read()
    if args.file is not None:
        return args.file.read_text(encoding="utf-8")
    return staged_diff()


def _formatter(args: argparse.Namespace, stream: TextIO) -> DiagnosticFormatter:
    """Formatter for one output stream, colored when the stream is a terminal."""
    return DiagnosticFormatter(output_format=OutputFormat(args.format), color=stream.isatty())


def main(argv: Sequence[str] | None = None) -> int:
    """Run the documentation check and report undocumented functions."""
    args = _parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr, force=True)

    try:
        text = _read_input(args)
        tokens = Tokenizer(max_nesting_depth=args.max_nesting_depth).tokenize(text)
    except DocsweepError as e:
        formatter = _formatter(args, sys.stderr)
        print(formatter.format(e.diagnostic) if e.diagnostic else str(e), file=sys.stderr)
        return EXIT_ERROR
    except (OSError, UnicodeDecodeError, ValueError) as e:
        print(f"docsweep: {e}", file=sys.stderr)
        return EXIT_ERROR

    report = check_documentation(tokens)
    if report.passed:
        logger.debug("%d documented public function(s), none undocumented", report.documented)
        return EXIT_OK

    diagnostics = [ErrorTemplate.undocumented_function(name) for name in report.undocumented]
    formatter = _formatter(args, sys.stdout)
    print(formatter.format_all(diagnostics))
    if formatter.output_format != OutputFormat.JSON:
        print(
            f"\nThe following functions are undocumented: {', '.join(report.undocumented)}"
        )
    return EXIT_UNDOCUMENTED


if __name__ == "__main__":
    sys.exit(main())

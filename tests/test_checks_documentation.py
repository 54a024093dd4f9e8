"""Tests for checks.documentation: public function doc comment coverage."""

from __future__ import annotations

import logging

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from docsweep.checks import (
    DocumentationReport,
    check_documentation,
    find_undocumented_functions,
    is_doc_comment,
    public_function_names,
)
from docsweep.syntax import tokenize
from docsweep.syntax.tokens import Comment, StringLiteral, Text

# ============================================================================
# NAME EXTRACTION
# ============================================================================


class TestPublicFunctionNames:
    """public func declaration scanning."""

    def test_two_declarations_in_order(self) -> None:
        """Names are collected in source order."""
        text = "public func foo() {} public func bar() {}"

        assert public_function_names(text) == ["foo", "bar"]

    def test_generic_clause_ends_name(self) -> None:
        """A '<' ends the name just like '('."""
        assert public_function_names("public func map<U>(f: F) -> U") == ["map"]

    def test_flexible_whitespace(self) -> None:
        """Any run of spaces, tabs or newlines separates the keywords."""
        assert public_function_names("public \t func\n  run() {}") == ["run"]

    @pytest.mark.parametrize(
        "text",
        [
            "func foo() {}",
            "private func foo() {}",
            "publicfunc foo() {}",
            "public var foo = 1",
            "public func foo",
        ],
    )
    def test_non_matches(self, text: str) -> None:
        """Non-public, malformed or unterminated declarations yield nothing."""
        assert public_function_names(text) == []

    def test_diff_prefix_does_not_hide_declaration(self) -> None:
        """Diff markers in front of a declaration are skipped."""
        assert public_function_names("+    public func added() {}") == ["added"]

    def test_duplicates_kept(self) -> None:
        """The same name declared twice is reported twice."""
        text = "public func a() {}\npublic func a(x: Int) {}"

        assert public_function_names(text) == ["a", "a"]


# ============================================================================
# DOC COMMENT PREDICATE
# ============================================================================


class TestIsDocComment:
    """Doc comment recognition."""

    @pytest.mark.parametrize("text", ["/// doc", "/** doc */", "////"])
    def test_doc_comments(self, text: str) -> None:
        """/// and /** prefixes are doc comments."""
        assert is_doc_comment(Comment(text))

    @pytest.mark.parametrize("text", ["// note", "/* note */", "/*/ odd */"])
    def test_plain_comments(self, text: str) -> None:
        """Other comments are not."""
        assert not is_doc_comment(Comment(text))

    def test_non_comment_tokens(self) -> None:
        """Text, strings and a missing predecessor are never doc comments."""
        assert not is_doc_comment(Text("/// looks like one"))
        assert not is_doc_comment(StringLiteral("/// quoted"))
        assert not is_doc_comment(None)


# ============================================================================
# COVERAGE CHECK
# ============================================================================


class TestFindUndocumentedFunctions:
    """Attribution of doc comments to declarations."""

    def test_doc_comment_documents_first_name_only(self) -> None:
        """Only the first name after a doc comment is documented."""
        tokens = [
            Comment("/// doc"),
            Text("public func foo() {} public func bar() {}"),
        ]

        assert find_undocumented_functions(tokens) == ["bar"]

    def test_first_token_has_no_predecessor(self) -> None:
        """Declarations in the first token are undocumented."""
        assert find_undocumented_functions([Text("public func baz() {}")]) == ["baz"]

    def test_plain_comment_does_not_document(self) -> None:
        """A non-doc comment does not count."""
        tokens = [Comment("// note"), Text("public func foo() {}")]

        assert find_undocumented_functions(tokens) == ["foo"]

    def test_string_between_comment_and_code_breaks_attribution(self) -> None:
        """Only the immediately preceding token is considered."""
        tokens = [Comment("/// doc"), StringLiteral("s"), Text("public func foo() {}")]

        assert find_undocumented_functions(tokens) == ["foo"]

    def test_empty_stream(self) -> None:
        """No tokens, nothing undocumented."""
        assert find_undocumented_functions([]) == []

    def test_results_in_stream_order(self) -> None:
        """Undocumented names from several Text tokens keep source order."""
        tokens = [
            Text("public func a() {}"),
            Comment("/// doc"),
            Text("public func b() {} public func c() {}"),
            Comment("// plain"),
            Text("public func d() {}"),
        ]

        assert find_undocumented_functions(tokens) == ["a", "c", "d"]


class TestCheckDocumentation:
    """DocumentationReport counters."""

    def test_report_counts(self) -> None:
        """documented counts credited names; undocumented lists the rest."""
        tokens = [Comment("/** doc */"), Text("public func a() {} public func b() {}")]
        report = check_documentation(tokens)

        assert report == DocumentationReport(documented=1, undocumented=("b",))
        assert not report.passed

    def test_doc_comment_before_text_without_functions(self) -> None:
        """A doc comment followed by plain code credits nothing."""
        report = check_documentation([Comment("/// doc"), Text("let x = 1")])

        assert report.documented == 0
        assert report.passed

    def test_logs_summary_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        """The check logs its counts at DEBUG."""
        with caplog.at_level(logging.DEBUG, logger="docsweep.checks.documentation"):
            check_documentation([Text("public func a() {}")])

        assert "1 undocumented" in caplog.text


# ============================================================================
# END TO END
# ============================================================================


class TestTokenizeAndCheck:
    """Tokenizer output fed to the checker."""

    def test_documented_declaration_in_source(self) -> None:
        """A doc comment directly above a declaration documents it."""
        source = "/// Parses input.\npublic func parse() {}\n"

        assert find_undocumented_functions(tokenize(source)) == []

    def test_second_declaration_in_same_run_is_undocumented(self) -> None:
        """Two declarations under one doc comment: the second is reported."""
        source = "/// Parses.\npublic func parse() {}\npublic func other() {}\n"

        assert find_undocumented_functions(tokenize(source)) == ["other"]

    def test_staged_diff_text(self) -> None:
        """Diff markers around comments and code do not affect attribution."""
        diff = (
            "diff --git a/Sources/A.swift b/Sources/A.swift\n"
            "+/// Documented.\n"
            "+public func documented() {}\n"
            "+// Not a doc comment.\n"
            "+public func undocumented() {}\n"
        )

        assert find_undocumented_functions(tokenize(diff)) == ["undocumented"]

    def test_declaration_inside_comment_is_ignored(self) -> None:
        """Commented-out declarations are not code."""
        source = "/* public func hidden() {} */ let x = 1"

        assert find_undocumented_functions(tokenize(source)) == []

    def test_declaration_inside_string_is_ignored(self) -> None:
        """Declarations in string literals are not code."""
        source = 'let s = "public func quoted() {}"'

        assert find_undocumented_functions(tokenize(source)) == []

    @given(names=st.lists(st.text(alphabet="abcxyz", min_size=1, max_size=8), max_size=5))
    def test_undocumented_source_reports_every_name(self, names: list[str]) -> None:
        """PROPERTY: without comments, every declared name is reported in order."""
        source = "\n".join(f"public func {name}() {{}}" for name in names)

        event(f"declarations={len(names)}")
        assert find_undocumented_functions(tokenize(source)) == names

"""Checks that consume the token stream.

Exports:
    check_documentation: Full report (documented count, undocumented names)
    find_undocumented_functions: Undocumented public function names
    public_function_names: Public function names declared in a text run
    is_doc_comment: Doc comment predicate
"""

from .documentation import (
    DocumentationReport,
    check_documentation,
    find_undocumented_functions,
    is_doc_comment,
    public_function_names,
)

__all__ = [
    "DocumentationReport",
    "check_documentation",
    "find_undocumented_functions",
    "is_doc_comment",
    "public_function_names",
]

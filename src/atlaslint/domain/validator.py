"""Validation entry point: content in, line-ordered issues out.

Pass order is fixed (hierarchy, blank lines, extra fields, document
numbers, nesting, UUIDs). Issues on the same line keep that order
because the final sort is stable.
"""

from __future__ import annotations

from collections.abc import Callable

from atlaslint.domain.fields import validate_extra_fields
from atlaslint.domain.models import Document, ValidationIssue
from atlaslint.domain.numbering import validate_document_numbers
from atlaslint.domain.structure import validate_blank_lines, validate_hierarchy, validate_nesting
from atlaslint.domain.titles import extract_documents, split_lines
from atlaslint.domain.uuids import validate_uuids

RulePass = Callable[[list[str], list[Document]], list[ValidationIssue]]

RULE_PASSES: tuple[tuple[str, RulePass], ...] = (
    ("hierarchy", lambda lines, docs: validate_hierarchy(docs)),
    ("blank_lines", validate_blank_lines),
    ("extra_fields", validate_extra_fields),
    ("document_numbers", lambda lines, docs: validate_document_numbers(docs)),
    ("nesting", lambda lines, docs: validate_nesting(docs)),
    ("uuids", lambda lines, docs: validate_uuids(docs)),
)


def sort_issues(issues: list[ValidationIssue]) -> list[ValidationIssue]:
    """Stable ascending sort by line number."""
    return sorted(issues, key=lambda issue: issue.line)


def validate(content: str) -> list[ValidationIssue]:
    """Validate Atlas Markdown *content* and return issues ordered by line."""
    lines = split_lines(content)
    docs, issues = extract_documents(lines)
    for _name, rule in RULE_PASSES:
        issues.extend(rule(lines, docs))
    return sort_issues(issues)

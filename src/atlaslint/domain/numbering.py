"""Document-number patterns per document type.

At most one issue is produced per document: the first rule the number
violates wins.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from atlaslint.domain.models import Document, ValidationIssue
from atlaslint.domain.types import DocumentType, IssueCategory, Severity

_T = DocumentType

# Digits are ASCII only. Zero (NR-0) and zero-padded numbers are accepted.
NEEDED_RESEARCH_PATTERN = re.compile(r"^NR-\d+$", re.ASCII)
ROOT_PREFIX = "A."

# ".0." anywhere except directly after a leading "A" (A.0 is Scope inheritance)
_INHERITED_SEGMENT = re.compile(r"(?<!^A)\.0\.")
_NO_INHERITED_SEGMENT_TYPES = frozenset(
    {_T.CORE, _T.TYPE_SPECIFICATION, _T.ACTIVE_DATA_CONTROLLER}
)


@dataclass(frozen=True)
class SuffixRule:
    """A required trailing pattern for a supporting document type."""

    pattern: re.Pattern[str]
    template: str
    example: str


def _suffix(pattern: str, template: str, example: str) -> SuffixRule:
    return SuffixRule(re.compile(pattern, re.ASCII), template, example)


SUFFIX_RULES: dict[DocumentType, SuffixRule] = {
    _T.ANNOTATION: _suffix(r"\.0\.3\.\d+$", "{Target}.0.3.{N}", "A.1.12.1.2.0.3.1"),
    _T.ACTION_TENET: _suffix(r"\.0\.4\.\d+$", "{Target}.0.4.{N}", "A.1.4.5.0.4.1"),
    _T.SCENARIO: _suffix(r"\.1\.\d+$", "{Tenet}.1.{N}", "A.1.4.5.0.4.1.1.1"),
    _T.SCENARIO_VARIATION: _suffix(r"\.var\d+$", "{Scenario}.var{N}", "A.1.4.5.0.4.1.1.1.var1"),
    _T.ACTIVE_DATA: _suffix(r"\.0\.6\.\d+$", "{Controller}.0.6.{N}", "A.1.1.3.1.0.6.1"),
}


def _issue(doc: Document, message: str, action: str, **context: str) -> ValidationIssue:
    return ValidationIssue(
        line=doc.line,
        severity=Severity.ERROR,
        category=IssueCategory.NUMBERING,
        message=message,
        action=action,
        **context,
    )


def validate_document_number(doc: Document) -> ValidationIssue | None:
    """Check *doc*'s number against its type's pattern."""
    doc_no = doc.doc_no
    doc_type = doc.document_type

    if doc_type is _T.NEEDED_RESEARCH:
        if NEEDED_RESEARCH_PATTERN.match(doc_no):
            return None
        return _issue(
            doc,
            f"Invalid Needed Research document number '{doc_no}'",
            "Use format NR-{N} for Needed Research documents",
            expected="NR-{N} where N is a positive integer",
            example="NR-1, NR-5, NR-10",
        )

    if not doc_no.startswith(ROOT_PREFIX):
        return _issue(
            doc,
            f"Document number '{doc_no}' must start with 'A.'",
            "Ensure document number starts with A.",
            example="A.1, A.1.1, A.1.1.1",
        )

    if doc_type in _NO_INHERITED_SEGMENT_TYPES and _INHERITED_SEGMENT.search(doc_no):
        return _issue(
            doc,
            f"Document number '{doc_no}' invalid for document type '{doc.type}'",
            "Remove the '.0' segment or change document type to appropriate supporting document",
            reason=(
                f"{doc.type} documents cannot contain '.0.' in their document numbers "
                "(except inherited A.0)"
            ),
            example="A.1.1.1, A.1.1.2.1, A.1.1.2.1.1, A.0.1.1.1",
        )

    rule = SUFFIX_RULES.get(doc_type) if doc_type is not None else None
    if rule is not None and not rule.pattern.search(doc_no):
        return _issue(
            doc,
            f"Invalid {doc.type} document number '{doc_no}'",
            f"Use pattern {rule.template} for {doc.type} documents",
            expected=rule.template,
            example=rule.example,
        )

    return None


def validate_document_numbers(docs: list[Document]) -> list[ValidationIssue]:
    """Run :func:`validate_document_number` over *docs* in file order."""
    issues: list[ValidationIssue] = []
    for doc in docs:
        issue = validate_document_number(doc)
        if issue is not None:
            issues.append(issue)
    return issues

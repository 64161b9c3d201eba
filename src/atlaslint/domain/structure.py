"""Structural passes: heading hierarchy, blank line after titles, nesting."""

from __future__ import annotations

from atlaslint.domain.catalog import allowed_children
from atlaslint.domain.models import Document, ValidationIssue
from atlaslint.domain.types import DocumentType, IssueCategory, Severity


def validate_hierarchy(docs: list[Document]) -> list[ValidationIssue]:
    """Flag consecutive documents whose heading level jumps by more than one.

    Going deeper by one, staying level, or going shallower by any amount
    is valid.
    """
    issues: list[ValidationIssue] = []

    for prev, curr in zip(docs, docs[1:]):
        if curr.level - prev.level <= 1:
            continue
        wanted = prev.level + 1
        issues.append(
            ValidationIssue(
                line=curr.line,
                severity=Severity.ERROR,
                category=IssueCategory.HIERARCHY,
                message=(
                    f"Heading hierarchy error - skipped from level {prev.level} "
                    f"to level {curr.level}"
                ),
                found=(
                    f"Previous: {prev.markers} {prev.doc_no} (level {prev.level})\n"
                    f"Current:  {curr.markers} {curr.doc_no} (level {curr.level})"
                ),
                expected=(
                    f"Insert a level {wanted} heading ({'#' * wanted}) "
                    "between these documents"
                ),
                action=f"Add missing level {wanted} heading",
            )
        )

    return issues


def validate_blank_lines(lines: list[str], docs: list[Document]) -> list[ValidationIssue]:
    """Every title must be followed by a blank line (end of file is fine)."""
    issues: list[ValidationIssue] = []

    for doc in docs:
        # doc.line is 1-based, so it is also the index of the following line
        if doc.line < len(lines) and lines[doc.line].strip():
            issues.append(
                ValidationIssue(
                    line=doc.line + 1,
                    severity=Severity.ERROR,
                    category=IssueCategory.BLANK_LINE,
                    message="Missing blank line after title",
                    action="Add a blank line after the title line",
                )
            )

    return issues


def validate_nesting(docs: list[Document]) -> list[ValidationIssue]:
    """Check each document's structural parent may contain its type.

    The parent is the nearest preceding document with a strictly lower
    heading level. Documents without a parent are skipped and Needed
    Research may nest anywhere.
    """
    issues: list[ValidationIssue] = []
    ancestors: list[Document] = []

    for child in docs:
        while ancestors and ancestors[-1].level >= child.level:
            ancestors.pop()
        parent = ancestors[-1] if ancestors else None
        ancestors.append(child)

        if parent is None or child.document_type is DocumentType.NEEDED_RESEARCH:
            continue

        permitted = allowed_children(parent.document_type)
        if child.type in permitted:
            continue

        permitted_text = ", ".join(t.value for t in permitted) or "no children"
        issues.append(
            ValidationIssue(
                line=child.line,
                severity=Severity.ERROR,
                category=IssueCategory.NESTING,
                message=(
                    f"Invalid nesting: '{child.type}' cannot be nested under '{parent.type}'"
                ),
                found=(
                    f"Parent: {parent.describe()} (line {parent.line})\n"
                    f"Child:  {child.describe()} (line {child.line})"
                ),
                expected=f"{parent.type} can only contain: {permitted_text}",
                action="Move this document or change its type",
            )
        )

    return issues

"""Extra-field validation for types with a registered field list.

A document's body span is every line strictly between its title and the
next document's title (or end of file). Inside it, a line consisting only
of ``**Label**:`` marks the start of an extra field.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from atlaslint.domain.catalog import extra_fields_for
from atlaslint.domain.models import Document, ValidationIssue
from atlaslint.domain.types import IssueCategory, Severity

FIELD_LABEL_PATTERN = re.compile(r"^\*\*(.+?)\*\*:\s*$")


@dataclass(frozen=True)
class FieldMarker:
    """A field label found in a document body. ``index`` is 0-based."""

    name: str
    index: int


def body_spans(lines: list[str], docs: list[Document]) -> list[tuple[int, int]]:
    """Return ``(start, end)`` 0-based half-open body ranges, one per document."""
    spans: list[tuple[int, int]] = []
    for i, doc in enumerate(docs):
        end = docs[i + 1].line - 1 if i + 1 < len(docs) else len(lines)
        spans.append((doc.line, end))
    return spans


def find_field_markers(lines: list[str], start: int, end: int) -> list[FieldMarker]:
    """Collect field labels within ``lines[start:end]`` in file order."""
    markers: list[FieldMarker] = []
    for idx in range(start, end):
        match = FIELD_LABEL_PATTERN.match(lines[idx])
        if match:
            markers.append(FieldMarker(name=match.group(1), index=idx))
    return markers


def validate_extra_fields(lines: list[str], docs: list[Document]) -> list[ValidationIssue]:
    """Check presence, membership, order, and spacing of extra fields."""
    issues: list[ValidationIssue] = []

    for doc, (start, end) in zip(docs, body_spans(lines, docs)):
        required = extra_fields_for(doc.document_type)
        if required is None:
            continue

        markers = find_field_markers(lines, start, end)
        valid_text = ", ".join(required)

        for marker in markers:
            if marker.name not in required:
                issues.append(
                    ValidationIssue(
                        line=marker.index + 1,
                        severity=Severity.ERROR,
                        category=IssueCategory.EXTRA_FIELD,
                        message=(
                            f"Unexpected extra field '{marker.name}' "
                            f"for document type '{doc.type}'"
                        ),
                        expected=f"Valid fields: {valid_text}",
                        action="Remove this field or check if document type is correct",
                    )
                )

            following = marker.index + 1
            if following < end and lines[following].strip():
                label = f"**{marker.name}**:"
                issues.append(
                    ValidationIssue(
                        line=following + 1,
                        severity=Severity.ERROR,
                        category=IssueCategory.EXTRA_FIELD,
                        message=f"Extra field '{marker.name}' missing blank line after label",
                        found=f"{label}\n{lines[following]}",
                        expected=f"{label}\n\n{lines[following]}",
                        action="Add a blank line after the label line",
                    )
                )

        found = [m.name for m in markers]
        expected_order = [f for f in required if f in found]
        actual_order = [f for f in found if f in required]
        if expected_order != actual_order:
            issues.append(
                ValidationIssue(
                    line=doc.line,
                    severity=Severity.ERROR,
                    category=IssueCategory.EXTRA_FIELD,
                    message=f"Extra fields in wrong order for '{doc.type}'",
                    found=f"Found: {', '.join(actual_order)}",
                    expected=f"Expected: {valid_text}",
                    action="Reorder extra fields to match the required order",
                )
            )

        for name in required:
            if name not in found:
                issues.append(
                    ValidationIssue(
                        line=doc.line,
                        severity=Severity.ERROR,
                        category=IssueCategory.EXTRA_FIELD,
                        message=(
                            f"Missing required extra field '{name}' "
                            f"for document type '{doc.type}'"
                        ),
                        expected=f"All fields: {valid_text}",
                        action=f"Add the missing '{name}' field",
                    )
                )

    return issues

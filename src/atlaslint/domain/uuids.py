"""Identifier format, emptiness, and uniqueness checks."""

from __future__ import annotations

import re

from atlaslint.domain.models import Document, ValidationIssue
from atlaslint.domain.types import IssueCategory, Severity

# Any 8-4-4-4-12 hex grouping. Version and variant nibbles are not checked.
UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$",
    re.IGNORECASE,
)
UUID_EXAMPLE = "8650a584-01f8-45d6-882b-c14eab9879c4"
UUID_GENERATOR_URL = "https://www.uuidgenerator.net/"


def is_valid_uuid(value: str) -> bool:
    return UUID_PATTERN.match(value) is not None


def validate_uuids(docs: list[Document]) -> list[ValidationIssue]:
    """Warn on empty identifiers, reject malformed ones, and flag duplicates.

    The first document to use an identifier owns it; every later use is
    reported as a duplicate of that first occurrence. Identifiers are
    compared case-insensitively.
    """
    issues: list[ValidationIssue] = []
    seen: dict[str, Document] = {}

    for doc in docs:
        uuid = doc.uuid.strip()

        if not uuid:
            issues.append(
                ValidationIssue(
                    line=doc.line,
                    severity=Severity.WARNING,
                    category=IssueCategory.UUID,
                    message="UUID is empty",
                    action=f"Generate a new UUID for this document at {UUID_GENERATOR_URL}",
                )
            )
            continue

        if not is_valid_uuid(uuid):
            issues.append(
                ValidationIssue(
                    line=doc.line,
                    severity=Severity.ERROR,
                    category=IssueCategory.UUID,
                    message=f"UUID '{uuid}' is not a valid UUID format",
                    expected=(
                        "8 hex digits - 4 hex digits - 4 hex digits - "
                        "4 hex digits - 12 hex digits"
                    ),
                    example=UUID_EXAMPLE,
                    action=f"Generate a new UUID at {UUID_GENERATOR_URL}",
                )
            )
            continue

        key = uuid.lower()
        first = seen.get(key)
        if first is None:
            seen[key] = doc
            continue

        issues.append(
            ValidationIssue(
                line=doc.line,
                severity=Severity.ERROR,
                category=IssueCategory.UUID,
                message=f"Duplicate UUID found: {uuid}",
                found=(
                    f"First occurrence: line {first.line} ({first.describe()})\n"
                    f"Duplicate at: line {doc.line} ({doc.describe()})"
                ),
                action=f"Generate a new unique UUID for line {doc.line}",
            )
        )

    return issues

"""Title-line parsing and document extraction.

Title grammar::

    {#...} {DocNo} - {Name} [{Type}]  <!-- UUID: {uuid} -->

Exactly two spaces separate the closing bracket from the comment. The
UUID segment may be empty.
"""

from __future__ import annotations

import logging
import re

from atlaslint.domain.models import Document, ValidationIssue
from atlaslint.domain.types import DocumentType, IssueCategory, Severity

logger = logging.getLogger(__name__)

TITLE_TEMPLATE = "# {DocNo} - {Name} [{Type}]  <!-- UUID: {uuid} -->"

TITLE_PATTERN = re.compile(
    r"^(#+)\s+(\S+)\s+-\s+(.+?)\s+\[(.+?)\]\s{2}<!--\s*UUID:\s*([a-f0-9-]*)\s*-->$",
    re.IGNORECASE,
)
_TITLE_LIKE = re.compile(r"^#+\s+.+\[.+\]")
_HEADING_START = re.compile(r"^#+\s")


def split_lines(content: str) -> list[str]:
    """Split *content* on ``\\n`` or ``\\r\\n``. Empty content yields ``[""]``."""
    return re.split(r"\r?\n", content)


def is_candidate(line: str) -> bool:
    """Cheap pre-filter: a heading line carrying brackets and a UUID token."""
    return bool(_HEADING_START.match(line)) and "[" in line and "UUID" in line


def parse_title_line(
    line: str, line_no: int
) -> tuple[Document | None, ValidationIssue | None]:
    """Parse one candidate heading line.

    Returns ``(doc, issue)``. A grammar mismatch yields ``(None, issue)``.
    An unrecognized type yields both the document and a type issue, so the
    identifier passes still see it.
    """
    match = TITLE_PATTERN.match(line)
    if match is None:
        if _TITLE_LIKE.match(line):
            issue = ValidationIssue(
                line=line_no,
                severity=Severity.ERROR,
                category=IssueCategory.FORMAT,
                message="Invalid title format",
                found=line,
                expected=TITLE_TEMPLATE,
                action="Ensure exactly 2 spaces before <!-- and proper formatting",
            )
        else:
            issue = ValidationIssue(
                line=line_no,
                severity=Severity.ERROR,
                category=IssueCategory.FORMAT,
                message="Invalid title format",
                action=f"Use format: {TITLE_TEMPLATE}",
            )
        return None, issue

    hashes, doc_no, name, doc_type, uuid = match.groups()
    doc = Document(
        line=line_no,
        level=len(hashes),
        doc_no=doc_no,
        name=name,
        type=doc_type,
        uuid=uuid,
        raw_line=line,
    )

    if doc.document_type is None:
        valid = ", ".join(t.value for t in DocumentType)
        return doc, ValidationIssue(
            line=line_no,
            severity=Severity.ERROR,
            category=IssueCategory.TYPE,
            message=f"Invalid document type '{doc_type}'",
            found=doc_type,
            expected=f"One of: {valid}",
            action="Use a valid document type",
        )

    return doc, None


def extract_documents(lines: list[str]) -> tuple[list[Document], list[ValidationIssue]]:
    """Scan *lines* for title lines.

    Returns the parsed documents in file order and any parse-time issues.
    Lines failing :func:`is_candidate` are ignored entirely.
    """
    docs: list[Document] = []
    issues: list[ValidationIssue] = []

    for idx, line in enumerate(lines):
        if not is_candidate(line):
            continue
        doc, issue = parse_title_line(line, idx + 1)
        if issue is not None:
            issues.append(issue)
        if doc is not None:
            docs.append(doc)

    logger.debug("Extracted %d documents (%d parse issues)", len(docs), len(issues))
    return docs, issues

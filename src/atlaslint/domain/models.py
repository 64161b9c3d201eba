"""Document and ValidationIssue records.

A :class:`Document` is one recognized title line. A :class:`ValidationIssue`
is one reported problem, always addressed to a 1-based source line and
always carrying a remediation ``action``.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel

from atlaslint.domain.types import DocumentType, IssueCategory, Severity


@dataclass(frozen=True)
class Document:
    """One Atlas title line parsed into its parts.

    ``type`` keeps the label exactly as written so that documents with an
    unrecognized type still flow through the identifier checks.
    """

    line: int
    level: int
    doc_no: str
    name: str
    type: str
    uuid: str
    raw_line: str

    @property
    def document_type(self) -> DocumentType | None:
        return DocumentType.lookup(self.type)

    @property
    def markers(self) -> str:
        return "#" * self.level

    def describe(self) -> str:
        """``{doc_no} - {name} [{type}]`` — used in issue diagnostics."""
        return f"{self.doc_no} - {self.name} [{self.type}]"


class ValidationIssue(BaseModel):
    """A single line-addressed validation finding."""

    model_config = {"frozen": True}

    line: int
    severity: Severity
    category: IssueCategory
    message: str
    action: str
    found: str | None = None
    expected: str | None = None
    reason: str | None = None
    example: str | None = None

    @property
    def is_error(self) -> bool:
        return self.severity == Severity.ERROR

"""Document-type labels, severities, and issue categories.

The twelve Atlas document types form a closed set. Their labels are the
exact strings written between brackets on a title line.
"""

from __future__ import annotations

from enum import StrEnum


class DocumentType(StrEnum):
    """Atlas document types, in canonical order."""

    SCOPE = "Scope"
    ARTICLE = "Article"
    SECTION = "Section"
    CORE = "Core"
    TYPE_SPECIFICATION = "Type Specification"
    ACTIVE_DATA_CONTROLLER = "Active Data Controller"
    ANNOTATION = "Annotation"
    ACTION_TENET = "Action Tenet"
    SCENARIO = "Scenario"
    SCENARIO_VARIATION = "Scenario Variation"
    ACTIVE_DATA = "Active Data"
    NEEDED_RESEARCH = "Needed Research"

    @classmethod
    def lookup(cls, label: str) -> DocumentType | None:
        """Return the member for *label*, or None if it is not a known type."""
        try:
            return cls(label)
        except ValueError:
            return None


class Severity(StrEnum):
    """Issue severity. Only errors fail a validation run."""

    ERROR = "error"
    WARNING = "warning"


class IssueCategory(StrEnum):
    """Which rule family produced an issue."""

    FORMAT = "format"
    TYPE = "type"
    HIERARCHY = "hierarchy"
    BLANK_LINE = "blank_line"
    EXTRA_FIELD = "extra_field"
    NUMBERING = "numbering"
    NESTING = "nesting"
    UUID = "uuid"

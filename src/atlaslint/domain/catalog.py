"""Static per-type tables: required extra fields and permitted children.

Both tables are derived from Atlas authoring convention and are not
configurable. Field order within a tuple is significant.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from atlaslint.domain.types import DocumentType

_T = DocumentType

_SCENARIO_FIELDS = ("Description", "Finding", "Additional Guidance")

EXTRA_FIELDS: Mapping[DocumentType, tuple[str, ...]] = MappingProxyType(
    {
        _T.TYPE_SPECIFICATION: (
            "Components",
            "Doc Identifier Rules",
            "Additional Logic",
            "Type Category",
            "Type Name",
            "Type Overview",
        ),
        _T.SCENARIO: _SCENARIO_FIELDS,
        _T.SCENARIO_VARIATION: _SCENARIO_FIELDS,
        _T.NEEDED_RESEARCH: ("Content",),
    }
)

ALLOWED_NESTING: Mapping[DocumentType, tuple[DocumentType, ...]] = MappingProxyType(
    {
        _T.SCOPE: (_T.ARTICLE, _T.NEEDED_RESEARCH),
        _T.ARTICLE: (_T.SECTION, _T.ANNOTATION, _T.NEEDED_RESEARCH),
        _T.SECTION: (
            _T.SECTION,
            _T.CORE,
            _T.TYPE_SPECIFICATION,
            _T.ACTIVE_DATA_CONTROLLER,
            _T.ANNOTATION,
            _T.ACTION_TENET,
            _T.NEEDED_RESEARCH,
        ),
        _T.CORE: (
            _T.CORE,
            _T.TYPE_SPECIFICATION,
            _T.ACTIVE_DATA_CONTROLLER,
            _T.ANNOTATION,
            _T.ACTION_TENET,
            _T.NEEDED_RESEARCH,
        ),
        _T.TYPE_SPECIFICATION: (_T.ANNOTATION, _T.ACTION_TENET, _T.NEEDED_RESEARCH),
        _T.ACTIVE_DATA_CONTROLLER: (
            _T.ACTIVE_DATA,
            _T.ANNOTATION,
            _T.ACTION_TENET,
            _T.NEEDED_RESEARCH,
        ),
        _T.ANNOTATION: (_T.NEEDED_RESEARCH,),
        _T.ACTION_TENET: (_T.SCENARIO, _T.NEEDED_RESEARCH),
        _T.SCENARIO: (_T.SCENARIO_VARIATION, _T.NEEDED_RESEARCH),
        _T.SCENARIO_VARIATION: (_T.NEEDED_RESEARCH,),
        _T.ACTIVE_DATA: (_T.NEEDED_RESEARCH,),
        _T.NEEDED_RESEARCH: (),
    }
)


def extra_fields_for(doc_type: DocumentType | None) -> tuple[str, ...] | None:
    """Return the ordered field list for *doc_type*, or None if it has none."""
    if doc_type is None:
        return None
    return EXTRA_FIELDS.get(doc_type)


def allowed_children(doc_type: DocumentType | None) -> tuple[DocumentType, ...]:
    """Return the permitted child types. Unknown types permit nothing."""
    if doc_type is None:
        return ()
    return ALLOWED_NESTING.get(doc_type, ())

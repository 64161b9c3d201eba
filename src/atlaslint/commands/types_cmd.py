"""Command: list the Atlas document-type catalog."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from atlaslint.commands._base import AtlasCommand

if TYPE_CHECKING:
    from atlaslint.commands._context import AppContext


@click.command(
    "types",
    cls=AtlasCommand,
    examples="""\
  atlaslint types
  atlaslint --json types""",
)
@click.pass_obj
def types_cmd(app: AppContext) -> None:
    """List document types, their extra fields, and allowed children."""
    from atlaslint.domain.catalog import allowed_children, extra_fields_for
    from atlaslint.domain.types import DocumentType
    from atlaslint.services.result import ServiceResult

    items = [
        {
            "name": doc_type.value,
            "extra_fields": list(extra_fields_for(doc_type) or ()),
            "children": [child.value for child in allowed_children(doc_type)],
        }
        for doc_type in DocumentType
    ]
    app.emit(ServiceResult(ok=True, op="types", data={"types": items, "count": len(items)}))

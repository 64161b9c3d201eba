"""Command: validate an Atlas Markdown file."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from atlaslint.commands._base import AtlasCommand

if TYPE_CHECKING:
    from atlaslint.commands._context import AppContext


@click.command(
    cls=AtlasCommand,
    examples="""\
  atlaslint check atlas.md
  atlaslint check atlas.md --errors-only
  atlaslint --json check atlas.md
  atlaslint -q check atlas.md
  GITHUB_ACTIONS=true atlaslint check atlas.md""",
)
@click.argument(
    "file",
    required=False,
    type=click.Path(path_type=Path),
)
@click.option(
    "--min-severity",
    type=click.Choice(["warning", "error"]),
    default="warning",
    help="Hide issues below this severity.",
)
@click.option("--errors-only", is_flag=True, help="Shortcut for --min-severity error.")
@click.option(
    "--annotations/--no-annotations",
    default=None,
    help="Emit GitHub Actions annotations (default: when GITHUB_ACTIONS=true).",
)
@click.pass_obj
def check(
    app: AppContext,
    file: Path | None,
    min_severity: str,
    errors_only: bool,
    annotations: bool | None,
) -> None:
    """Validate FILE and exit 1 if it contains errors."""
    from atlaslint.output.annotations import format_annotations
    from atlaslint.services.check import CheckService
    from atlaslint.services.result import ServiceError, ServiceResult

    if file is None:
        app.emit(
            ServiceResult(
                ok=False,
                op="check",
                error=ServiceError(
                    code="MISSING_ARGUMENT",
                    message="Usage: atlaslint check <path-to-atlas.md>",
                ),
            )
        )
        return

    result = CheckService().check_file(file)
    threshold = "error" if errors_only else min_severity
    app.emit(result, min_severity=threshold)

    emit_annotations = app.settings.github_actions if annotations is None else annotations
    if emit_annotations and not app.settings.json_output:
        target = app.settings.annotation_path or result.data["path"]
        for line in format_annotations(result.data["issues"], target):
            click.echo(line)

    if not result.data["passed"]:
        raise SystemExit(1)

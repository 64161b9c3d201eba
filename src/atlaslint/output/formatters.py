"""Rich/JSON output helpers.

The CLI renders ServiceResult for humans (Rich output, colors) or
machines (--json). The formatter layer adapts ServiceResult to the
requested output mode.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from atlaslint.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from atlaslint.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Presentation flags resolved once per CLI invocation."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    no_color: bool = False
    min_severity: str = "warning"


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    JSON mode dumps the full result (all issues, regardless of
    ``min_severity``). Quiet mode prints a one-line verdict.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2, exclude_none=True)
    if settings.quiet:
        return render_quiet(result)
    return render_result(
        result,
        verbose=settings.verbose,
        no_color=settings.no_color,
        min_severity=settings.min_severity,
    )

"""Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from atlaslint.output.console import create_console, get_output, style_for_severity

if TYPE_CHECKING:
    from rich.console import Console

    from atlaslint.services.result import ServiceResult

_SEVERITY_RANK = {"warning": 0, "error": 1}
_DETAIL_KEYS = ("found", "expected", "reason", "example")


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    no_color: bool = False,
    min_severity: str = "warning",
) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console(no_color=no_color)

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose, min_severity=min_severity)
    else:
        _render_error(result, console)

    if verbose:
        _render_meta(console, result)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    if result.op == "check":
        status = "PASSED" if result.data.get("passed") else "FAILED"
        errors = result.data.get("error_count", 0)
        warnings = result.data.get("warning_count", 0)
        return f"{status}: {errors} errors, {warnings} warnings"
    return f"OK: {result.op}"


def visible_issues(issues: list[dict[str, Any]], min_severity: str) -> list[dict[str, Any]]:
    """Drop issues ranked below *min_severity*."""
    floor = _SEVERITY_RANK.get(min_severity, 0)
    return [i for i in issues if _SEVERITY_RANK.get(str(i.get("severity")), 0) >= floor]


# ── Helpers ───────────────────────────────────────────────────────────


def _rule(console: Console, char: str = "─") -> None:
    console.print(Text(char * 45, style="atlas.rule"))


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the telemetry span tree (verbose only)."""
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for key, value in result.meta.items():
        if key == "telemetry":
            _render_telemetry_tree(console, value, indent=4)
        else:
            console.print(f"    {key}: {value}")


def _render_telemetry_tree(console: Console, span_data: dict[str, Any], indent: int = 4) -> None:
    prefix = " " * indent
    name = span_data.get("name", "?")
    duration = span_data.get("duration_ms", 0.0)
    style = "yellow" if duration > 100 else "dim"
    line = f"{prefix}[{style}]{duration:>8.2f}ms[/{style}]  {name}"
    counts = span_data.get("counts")
    if counts:
        line += "  (" + ", ".join(f"{k}={v}" for k, v in counts.items()) + ")"
    console.print(line)
    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


def _render_error(result: ServiceResult, console: Console) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    line = Text("ERROR", style="atlas.error")
    line.append(f"  {result.op}", style="atlas.op")
    line.append(f" — {msg}")
    console.print(line)


def _render_generic(
    result: ServiceResult, console: Console, *, verbose: bool = False, min_severity: str = ""
) -> None:
    console.print(Text("OK", style="atlas.ok"), Text(f"  {result.op}", style="atlas.op"))
    for key, value in result.data.items():
        line = Text(f"  {key}: ", style="atlas.key")
        line.append(str(value))
        console.print(line)


# ── Check renderer ────────────────────────────────────────────────────


def render_issue(console: Console, issue: dict[str, Any]) -> None:
    """Render one issue as a block: header, message, details, action."""
    severity = str(issue.get("severity", "warning"))
    style = style_for_severity(severity)

    _rule(console)
    header = Text()
    header.append(severity.upper(), style=style)
    header.append(" at line ")
    header.append(str(issue.get("line", "?")), style="atlas.line")
    console.print(header)
    _rule(console)
    console.print(f"  {issue.get('message', '')}", markup=False)

    for key in _DETAIL_KEYS:
        text = issue.get(key)
        if not text:
            continue
        console.print()
        console.print(Text(f"  {key.capitalize()}:", style="atlas.label"))
        for part in str(text).split("\n"):
            console.print(f"    {part}", markup=False)

    console.print()
    action = Text("  Action: ", style="atlas.label")
    action.append(str(issue.get("action", "")), style="atlas.action")
    console.print(action)


def _render_summary(console: Console, errors: int, warnings: int) -> None:
    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column("key", style="atlas.key")
    table.add_column("value", justify="right")
    table.add_row("Errors", Text(str(errors), style="atlas.error" if errors else ""))
    table.add_row("Warnings", Text(str(warnings), style="atlas.warning" if warnings else ""))

    _rule(console, "═")
    console.print(Text("  VALIDATION SUMMARY", style="atlas.label"))
    _rule(console, "═")
    console.print(table)
    _rule(console)
    if errors:
        console.print(Text("  Status: ") + Text("FAILED", style="atlas.error"))
    else:
        console.print(Text("  Status: ") + Text("PASSED (warnings only)", style="atlas.ok"))
    _rule(console, "═")


def _render_check(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    min_severity: str = "warning",
) -> None:
    """Render every visible issue, then the error/warning summary."""
    issues = result.data.get("issues", [])
    path = result.data.get("path")
    if verbose and path:
        console.print(Text(f"  file: {path}", style="atlas.path"))

    if not issues:
        _rule(console, "═")
        console.print(Text("  ") + Text("Validation passed - no issues found", style="atlas.ok"))
        _rule(console, "═")
        return

    shown = visible_issues(issues, min_severity)
    for index, issue in enumerate(shown):
        if index:
            console.print()
        render_issue(console, issue)

    console.print()
    _render_summary(
        console,
        int(result.data.get("error_count", 0)),
        int(result.data.get("warning_count", 0)),
    )


def _render_types(
    result: ServiceResult, console: Console, *, verbose: bool = False, min_severity: str = ""
) -> None:
    """Render the document-type catalog as a table."""
    table = Table(show_header=True, show_lines=verbose, pad_edge=False, expand=False)
    table.add_column("Type", style="atlas.label", no_wrap=True)
    table.add_column("Extra fields")
    table.add_column("Allowed children")
    for item in result.data.get("types", []):
        table.add_row(
            item["name"],
            ", ".join(item["extra_fields"]) or "-",
            ", ".join(item["children"]) or "no children",
        )
    console.print(table)


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "check": _render_check,
    "types": _render_types,
}

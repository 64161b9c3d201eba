"""Rich Console factory and theme for atlaslint output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

ATLAS_THEME = Theme(
    {
        "atlas.ok": "bold green",
        "atlas.error": "bold red",
        "atlas.warning": "bold yellow",
        "atlas.op": "bold cyan",
        "atlas.key": "dim",
        "atlas.line": "bold blue",
        "atlas.path": "dim",
        "atlas.label": "bold",
        "atlas.action": "cyan",
        "atlas.rule": "dim",
    }
)

_SEVERITY_STYLES: dict[str, str] = {
    "error": "atlas.error",
    "warning": "atlas.warning",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Soft wrapping keeps long source lines intact in issue blocks.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=ATLAS_THEME,
        no_color=no_color,
        highlight=False,
        soft_wrap=True,
        width=width or 100,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_severity(severity: str) -> str:
    return _SEVERITY_STYLES.get(severity, "")

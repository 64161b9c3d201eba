"""GitHub Actions workflow-command annotations.

Each issue becomes one ``::error`` or ``::warning`` command anchored to a
single line, so the runner shows it inline on the changed file.
"""

from __future__ import annotations

from typing import Any

_DETAIL_LABELS = (
    ("found", "Found"),
    ("expected", "Expected"),
    ("reason", "Reason"),
    ("example", "Example"),
)


def escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def escape_property(value: str) -> str:
    return escape_data(value).replace(":", "%3A").replace(",", "%2C")


def annotation_message(issue: dict[str, Any]) -> str:
    """Join the present diagnostic fields with `` | ``; Action is always last."""
    details = [f"{label}: {issue[key]}" for key, label in _DETAIL_LABELS if issue.get(key)]
    details.append(f"Action: {issue.get('action', '')}")
    return " | ".join(details)


def format_annotation(issue: dict[str, Any], file_path: str) -> str:
    """Build the workflow command for one serialized issue."""
    command = "error" if issue.get("severity") == "error" else "warning"
    line = str(issue.get("line", 1))
    props = {
        "file": file_path,
        "line": line,
        "endLine": line,
        "title": str(issue.get("message", "")),
    }
    prop_text = ",".join(f"{key}={escape_property(value)}" for key, value in props.items())
    return f"::{command} {prop_text}::{escape_data(annotation_message(issue))}"


def format_annotations(issues: list[dict[str, Any]], file_path: str) -> list[str]:
    return [format_annotation(issue, file_path) for issue in issues]

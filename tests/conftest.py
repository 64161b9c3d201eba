"""Shared pytest fixtures for atlaslint tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner

UUIDS = [
    "8650a584-01f8-45d6-882b-c14eab9879c4",
    "1f3c2d4e-5a6b-4c7d-8e9f-0a1b2c3d4e5f",
    "2a3b4c5d-6e7f-4081-9a2b-3c4d5e6f7a8b",
    "3b4c5d6e-7f80-4192-ab3c-4d5e6f7a8b9c",
    "4c5d6e7f-8091-42a3-bc4d-5e6f7a8b9cad",
    "5d6e7f80-91a2-43b4-cd5e-6f7a8b9cadbe",
    "6e7f8091-a2b3-44c5-de6f-7a8b9cadbecf",
    "7f8091a2-b3c4-45d6-ef70-8b9cadbecfd0",
]

VALID_ATLAS = f"""\
# A.1 - Scope One [Scope]  <!-- UUID: {UUIDS[0]} -->

Scope body.

## A.1.1 - Article One [Article]  <!-- UUID: {UUIDS[1]} -->

### A.1.1.1 - Section One [Section]  <!-- UUID: {UUIDS[2]} -->

#### A.1.1.1.1 - Core One [Core]  <!-- UUID: {UUIDS[3]} -->

##### A.1.1.1.1.0.4.1 - Tenet One [Action Tenet]  <!-- UUID: {UUIDS[4]} -->

###### A.1.1.1.1.0.4.1.1.1 - Scenario One [Scenario]  <!-- UUID: {UUIDS[5]} -->

**Description**:

Something happens.

**Finding**:

It is fine.

**Additional Guidance**:

None.

## NR-1 - Open Question [Needed Research]  <!-- UUID: {UUIDS[6]} -->

**Content**:

To be researched.
"""


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def valid_atlas() -> str:
    """A small Atlas file that passes every rule."""
    return VALID_ATLAS


@pytest.fixture
def uuids() -> list[str]:
    """Distinct, well-formed identifiers for building title lines."""
    return list(UUIDS)


@pytest.fixture
def title() -> Callable[..., str]:
    """Build a well-formed title line.

    ``title(2, "A.1", "Intro", "Section", uuid)`` →
    ``## A.1 - Intro [Section]  <!-- UUID: ... -->``
    """

    def _title(level: int, doc_no: str, name: str, doc_type: str, uuid: str = UUIDS[0]) -> str:
        return f"{'#' * level} {doc_no} - {name} [{doc_type}]  <!-- UUID: {uuid} -->"

    return _title


@pytest.fixture
def write_atlas(tmp_path: Path) -> Callable[[str], Path]:
    """Write content to ``atlas.md`` under a temp dir and return its path."""

    def _write(content: str, name: str = "atlas.md") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def _clean_ci_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the host CI environment from leaking into settings."""
    for name in ("GITHUB_ACTIONS", "GITHUB_ACTION_FILE_PATH"):
        monkeypatch.delenv(name, raising=False)

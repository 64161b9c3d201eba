"""Tests for AtlasSettings — CLI flags and environment variables."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from atlaslint.config.settings import AtlasSettings


class TestDefaults:
    def test_defaults(self) -> None:
        s = AtlasSettings.from_cli()
        assert s.json_output is False
        assert s.verbose is False
        assert s.github_actions is False
        assert s.annotation_path is None

    def test_frozen(self) -> None:
        s = AtlasSettings.from_cli()
        with pytest.raises(ValidationError):
            s.quiet = True  # type: ignore[misc]


class TestEnvironment:
    def test_github_actions_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GITHUB_ACTIONS", "true")
        assert AtlasSettings.from_cli().github_actions is True

    def test_github_actions_false_string(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GITHUB_ACTIONS", "false")
        assert AtlasSettings.from_cli().github_actions is False

    def test_github_actions_empty_does_not_fail(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GITHUB_ACTIONS", "")
        assert AtlasSettings.from_cli().github_actions is False

    @pytest.mark.parametrize("value", ["1", "TRUE", "yes", " true"])
    def test_github_actions_only_literal_true(
        self, monkeypatch: pytest.MonkeyPatch, value: str
    ) -> None:
        monkeypatch.setenv("GITHUB_ACTIONS", value)
        assert AtlasSettings.from_cli().github_actions is False

    def test_annotation_path_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GITHUB_ACTION_FILE_PATH", "docs/atlas.md")
        assert AtlasSettings.from_cli().annotation_path == "docs/atlas.md"

    def test_prefixed_flag_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ATLASLINT_QUIET", "1")
        assert AtlasSettings.from_cli().quiet is True


class TestCliPriority:
    def test_flag_overrides_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ATLASLINT_VERBOSE", "false")
        assert AtlasSettings.from_cli(verbose=True).verbose is True

    def test_unset_flag_defers_to_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ATLASLINT_JSON_OUTPUT", "true")
        assert AtlasSettings.from_cli(json_output=False).json_output is True

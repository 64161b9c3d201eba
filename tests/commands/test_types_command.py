"""Tests for the types CLI command."""

import json

from click.testing import CliRunner

from atlaslint.cli import cli


class TestTypesCommand:
    def test_lists_all_types(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "types"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["data"]["count"] == 12
        by_name = {t["name"]: t for t in data["data"]["types"]}
        assert by_name["Needed Research"]["extra_fields"] == ["Content"]
        assert by_name["Needed Research"]["children"] == []
        assert by_name["Scope"]["children"] == ["Article", "Needed Research"]

    def test_human_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["types"])
        assert result.exit_code == 0
        assert "Type Specification" in result.output

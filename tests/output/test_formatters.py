"""Tests for the format_result dispatcher and OutputSettings."""

import json

from atlaslint.output.formatters import OutputSettings, format_result
from atlaslint.services.check import CheckService


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.min_severity == "warning"


class TestFormatResult:
    def test_json_mode_includes_all_issues(self) -> None:
        result = CheckService().check_content("# A.1 - Root [Scope]  <!-- UUID:  -->\ntext\n")
        output = format_result(result, settings=OutputSettings(json_output=True, min_severity="error"))
        data = json.loads(output)
        assert data["ok"] is True
        assert data["data"]["count"] == 2
        assert "error" not in data

    def test_quiet_mode(self, valid_atlas: str) -> None:
        result = CheckService().check_content(valid_atlas)
        assert format_result(result, settings=OutputSettings(quiet=True)) == (
            "PASSED: 0 errors, 0 warnings"
        )

    def test_default_is_rich(self, valid_atlas: str) -> None:
        output = format_result(CheckService().check_content(valid_atlas))
        assert "Validation passed" in output

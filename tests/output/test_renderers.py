"""Tests for Rich renderers."""

from __future__ import annotations

from atlaslint.output.renderers import render_quiet, render_result, visible_issues
from atlaslint.services.check import CheckService
from atlaslint.services.result import ServiceError, ServiceResult

BROKEN = "# A.1 - Root [Scope]  <!-- UUID:  -->\ntext\n"


def _render(result: ServiceResult, **kwargs: object) -> str:
    return render_result(result, no_color=True, **kwargs)  # type: ignore[arg-type]


class TestRenderCheck:
    def test_clean_file(self, valid_atlas: str) -> None:
        output = _render(CheckService().check_content(valid_atlas))
        assert "Validation passed - no issues found" in output

    def test_issue_blocks_and_summary(self) -> None:
        output = _render(CheckService().check_content(BROKEN))
        assert "WARNING at line 1" in output
        assert "ERROR at line 2" in output
        assert "Missing blank line after title" in output
        assert "Action: Add a blank line after the title line" in output
        assert "VALIDATION SUMMARY" in output
        assert "Status: FAILED" in output

    def test_details_rendered_line_by_line(self, title) -> None:  # type: ignore[no-untyped-def]
        content = "\n\n".join([title(1, "A.1", "Root", "Scope"), title(3, "A.1.1.1", "S", "Section", "")])
        output = _render(CheckService().check_content(content))
        assert "Found:" in output
        assert "    Previous: # A.1 (level 1)" in output
        assert "Expected:" in output

    def test_brackets_are_not_markup(self, title) -> None:  # type: ignore[no-untyped-def]
        content = "\n\n".join([title(1, "A.1", "Root", "Scope"), title(2, "A.1.0.3.1", "N", "Annotation")])
        output = _render(CheckService().check_content(content))
        assert "A.1 - Root [Scope] (line 1)" in output

    def test_warnings_only_passes(self) -> None:
        output = _render(CheckService().check_content("# A.1 - Root [Scope]  <!-- UUID:  -->\n"))
        assert "Status: PASSED (warnings only)" in output

    def test_min_severity_hides_warnings_not_counts(self) -> None:
        output = _render(CheckService().check_content(BROKEN), min_severity="error")
        assert "WARNING at line 1" not in output
        assert "ERROR at line 2" in output
        assert "Warnings" in output


class TestRenderOther:
    def test_error_result(self) -> None:
        result = ServiceResult(
            ok=False, op="check", error=ServiceError(code="FILE_NOT_FOUND", message="File not found: x")
        )
        assert "File not found: x" in _render(result)

    def test_generic_op(self) -> None:
        output = _render(ServiceResult(ok=True, op="other", data={"k": "v"}))
        assert "OK" in output
        assert "k: v" in output

    def test_types_table(self) -> None:
        result = ServiceResult(
            ok=True,
            op="types",
            data={"types": [{"name": "Scope", "extra_fields": [], "children": ["Article"]}]},
        )
        output = _render(result)
        assert "Scope" in output
        assert "Article" in output

    def test_verbose_prints_pass_timing(self) -> None:
        telemetry = {
            "name": "CheckService.check_content",
            "duration_ms": 1.5,
            "children": [
                {"name": "extract", "duration_ms": 0.4, "counts": {"documents": 7}},
                {"name": "uuids", "duration_ms": 0.1, "counts": {"issues": 0}},
            ],
        }
        result = ServiceResult(ok=True, op="other", meta={"telemetry": telemetry})
        output = _render(result, verbose=True)
        assert "CheckService.check_content" in output
        assert "extract  (documents=7)" in output
        assert "uuids  (issues=0)" in output
        assert "extract" not in _render(result)


class TestQuietAndFilter:
    def test_quiet_check(self) -> None:
        assert render_quiet(CheckService().check_content(BROKEN)) == "FAILED: 1 errors, 1 warnings"

    def test_quiet_error(self) -> None:
        result = ServiceResult(ok=False, op="check", error=ServiceError(code="X", message="bad"))
        assert render_quiet(result) == "ERROR: check — bad"

    def test_visible_issues(self) -> None:
        issues = [{"severity": "warning"}, {"severity": "error"}]
        assert visible_issues(issues, "warning") == issues
        assert visible_issues(issues, "error") == [{"severity": "error"}]

"""CheckService — validate an Atlas Markdown file.

File reading lives here so the engine in :mod:`atlaslint.domain` stays
free of I/O. Each rule pass runs inside its own telemetry span so
``--verbose`` reports per-pass timing.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import structlog

from atlaslint.domain.models import ValidationIssue
from atlaslint.domain.titles import extract_documents, split_lines
from atlaslint.domain.validator import RULE_PASSES, sort_issues
from atlaslint.services.result import ServiceError, ServiceResult
from atlaslint.services.telemetry import trace_span, traced

log = structlog.get_logger(__name__)


def summarize(issues: list[ValidationIssue]) -> dict[str, Any]:
    """Serialize *issues* with error/warning counts and the pass verdict."""
    error_count = sum(1 for issue in issues if issue.is_error)
    return {
        "issues": [issue.model_dump(mode="json", exclude_none=True) for issue in issues],
        "count": len(issues),
        "error_count": error_count,
        "warning_count": len(issues) - error_count,
        "passed": error_count == 0,
    }


class CheckService:
    """Runs the validation engine over file or in-memory content."""

    @traced
    def check_file(self, path: Path) -> ServiceResult:
        """Read *path* and validate it."""
        resolved = path.resolve()
        if not resolved.is_file():
            return ServiceResult(
                ok=False,
                op="check",
                error=ServiceError(
                    code="FILE_NOT_FOUND",
                    message=f"File not found: {resolved}",
                    detail={"path": str(resolved)},
                ),
            )

        try:
            content = resolved.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            log.warning("check.read_failed", path=str(resolved), error=str(exc))
            return ServiceResult(
                ok=False,
                op="check",
                error=ServiceError(
                    code="READ_ERROR",
                    message=f"Cannot read {resolved}: {exc}",
                    detail={"path": str(resolved)},
                ),
            )

        return self._run(content, path=str(resolved))

    @traced
    def check_content(self, content: str) -> ServiceResult:
        """Validate *content* without touching the filesystem."""
        return self._run(content, path=None)

    def run_passes(self, content: str) -> list[ValidationIssue]:
        """Same result as :func:`atlaslint.validate`, with one span per pass."""
        with trace_span("extract") as span:
            lines = split_lines(content)
            docs, issues = extract_documents(lines)
            if span is not None:
                span.record(documents=len(docs))

        for name, rule in RULE_PASSES:
            with trace_span(name) as span:
                found = rule(lines, docs)
                if span is not None:
                    span.record(issues=len(found))
            issues.extend(found)

        return sort_issues(issues)

    def _run(self, content: str, *, path: str | None) -> ServiceResult:
        try:
            issues = self.run_passes(content)
        except Exception as exc:
            log.exception("check.failed", path=path)
            return ServiceResult(
                ok=False,
                op="check",
                error=ServiceError(
                    code="VALIDATION_FAILED",
                    message=f"Fatal error during validation: {exc}",
                    detail={"path": path} if path else {},
                ),
            )

        data = summarize(issues)
        if path is not None:
            data["path"] = path
        log.debug(
            "check.complete",
            path=path,
            errors=data["error_count"],
            warnings=data["warning_count"],
        )
        return ServiceResult(ok=True, op="check", data=data)

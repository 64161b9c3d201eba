"""Tests for ServiceResult and ServiceError."""

import json

import pytest
from pydantic import ValidationError

from atlaslint.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="check", data={"count": 0})
        assert result.ok is True
        assert result.op == "check"
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_error_construction(self) -> None:
        result = ServiceResult(
            ok=False, op="check", error=ServiceError(code="FILE_NOT_FOUND", message="gone")
        )
        assert result.error is not None
        assert result.error.code == "FILE_NOT_FOUND"
        assert result.error.detail == {}

    def test_json_serialization(self) -> None:
        result = ServiceResult(ok=True, op="check", data={"passed": True}, meta={"x": 1})
        parsed = json.loads(result.model_dump_json())
        assert parsed["data"]["passed"] is True
        assert parsed["meta"]["x"] == 1

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="check")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]

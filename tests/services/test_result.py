"""Tests for ServiceResult and ServiceError."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from ernkit.domain.ern import Ern
from ernkit.domain.errors import ErnError
from ernkit.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="parse", data={"ern": "ern:d:c:a:r"})
        assert result.ok is True
        assert result.data == {"ern": "ern:d:c:a:r"}
        assert result.warnings == []
        assert result.error is None

    def test_error_construction(self) -> None:
        error = ServiceError(code="INVALID_FORMAT", message="bad")
        result = ServiceResult(ok=False, op="parse", error=error)
        assert result.error is not None
        assert result.error.code == "INVALID_FORMAT"
        assert result.error.detail == {}

    def test_json_serialization(self) -> None:
        result = ServiceResult(ok=True, op="sort", data={"count": 2})
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["count"] == 2

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="test")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]


class TestErnShapedResults:
    def test_of_ern_carries_canonical_string(self) -> None:
        ern = Ern.parse("ern:d:c:a:root/x")
        result = ServiceResult.of_ern("parse", ern, warnings=["w"])
        assert result.ok is True
        assert result.ern == "ern:d:c:a:root/x"
        assert result.data["parts"] == ["x"]
        assert result.warnings == ["w"]

    def test_ern_absent_for_non_ern_payloads(self) -> None:
        assert ServiceResult(ok=True, op="sort", data={"erns": [], "count": 0}).ern is None

    def test_failure_from_ern_error(self) -> None:
        with pytest.raises(ErnError) as excinfo:
            Ern.parse("ern:d:c:a:root/bad:part")
        result = ServiceResult.failure("parse", ServiceError.from_ern_error(excinfo.value))
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "INVALID_FORMAT"
        assert result.error.detail == {"component": "Part", "value": "bad:part"}

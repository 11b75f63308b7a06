"""Tests for configuration models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from ernkit.config.models import DefaultsConfig, OutputConfig


class TestDefaultsConfig:
    def test_code_defaults(self) -> None:
        cfg = DefaultsConfig()
        assert cfg.domain == "acton"
        assert cfg.category == "reactive"
        assert cfg.account == "acton-internal"
        assert cfg.root == "root"

    @pytest.mark.parametrize("field", ["domain", "category", "account", "root"])
    def test_rejects_empty(self, field: str) -> None:
        with pytest.raises(ValidationError, match="cannot be empty"):
            DefaultsConfig(**{field: ""})

    def test_rejects_delimiters(self) -> None:
        with pytest.raises(ValidationError):
            DefaultsConfig(domain="a:b")

    def test_frozen(self) -> None:
        cfg = DefaultsConfig()
        with pytest.raises(ValidationError):
            cfg.domain = "other"  # type: ignore[misc]


class TestOutputConfig:
    def test_defaults(self) -> None:
        cfg = OutputConfig()
        assert cfg.color is True
        assert cfg.width == 120

    def test_output_width_bound(self) -> None:
        with pytest.raises(ValidationError):
            OutputConfig(width=5)

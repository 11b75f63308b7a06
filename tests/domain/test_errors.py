"""Tests for the error hierarchy."""

from __future__ import annotations

from ernkit.domain.errors import EmptyValueError, ErnError, ErnErrorKind, InvalidFormatError


class TestErrors:
    def test_empty_value(self) -> None:
        err = EmptyValueError("Category")
        assert isinstance(err, ErnError)
        assert isinstance(err, ValueError)
        assert err.kind == "empty_value"
        assert err.component == "Category"
        assert str(err) == "Category cannot be empty"

    def test_invalid_format(self) -> None:
        err = InvalidFormatError("Part", "a:b", "must not contain ':'")
        assert err.kind is ErnErrorKind.INVALID_FORMAT
        assert err.value == "a:b"
        assert err.reason == "must not contain ':'"
        assert "a:b" in str(err)

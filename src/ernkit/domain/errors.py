"""Validation errors raised by identifier construction and parsing.

Every error is local and fail-fast: the first invalid component aborts
the whole construction or parse, so no partially valid Ern is ever
observable.
"""

from __future__ import annotations

from enum import StrEnum


class ErnErrorKind(StrEnum):
    """Classification of identifier validation failures."""

    EMPTY_VALUE = "empty_value"
    INVALID_FORMAT = "invalid_format"


class ErnError(ValueError):
    """Base class for all identifier validation failures.

    Attributes:
        kind: Which rule was violated.
        component: Name of the component being validated (``"Part"``,
            ``"Domain"``, ``"Ern"`` for whole-string grammar failures).
        value: The rejected input.
    """

    kind: ErnErrorKind

    def __init__(self, message: str, *, component: str, value: str) -> None:
        super().__init__(message)
        self.component = component
        self.value = value


class EmptyValueError(ErnError):
    """A component was given an empty string."""

    kind = ErnErrorKind.EMPTY_VALUE

    def __init__(self, component: str) -> None:
        super().__init__(f"{component} cannot be empty", component=component, value="")


class InvalidFormatError(ErnError):
    """A component contains a reserved delimiter, or a string violates the grammar."""

    kind = ErnErrorKind.INVALID_FORMAT

    def __init__(self, component: str, value: str, reason: str) -> None:
        super().__init__(f"Invalid {component} {value!r}: {reason}", component=component, value=value)
        self.reason = reason

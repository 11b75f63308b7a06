"""Segment types — validated string wrappers for each grammar field.

A segment is a single delimiter-free component of an ERN. ``Domain``,
``Category`` and ``Account`` are positional fields with documented
defaults so identifiers can be built from partial information. ``Part``
is one level of the hierarchical path.

INVARIANT: Segments are immutable. Construction is validation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Self

from ernkit.domain.errors import EmptyValueError, InvalidFormatError

ERN_PREFIX = "ern:"
FIELD_DELIMITER = ":"
PATH_DELIMITER = "/"

RESERVED_DELIMITERS: tuple[str, ...] = (FIELD_DELIMITER, PATH_DELIMITER)

DEFAULT_DOMAIN = "acton"
DEFAULT_CATEGORY = "reactive"
DEFAULT_ACCOUNT = "acton-internal"


def validate_segment(value: str, component: str) -> str:
    """Return *value* unchanged if it is a legal segment for *component*.

    Raises:
        EmptyValueError: If *value* is empty.
        InvalidFormatError: If *value* contains ``:`` or ``/``.
    """
    if not value:
        raise EmptyValueError(component)
    for delimiter in RESERVED_DELIMITERS:
        if delimiter in value:
            raise InvalidFormatError(component, value, f"must not contain {delimiter!r}")
    return value


@dataclass(frozen=True, order=True)
class Segment:
    """Base for single-valued grammar segments."""

    value: str

    component: ClassVar[str] = "Segment"

    def __post_init__(self) -> None:
        validate_segment(self.value, self.component)

    @classmethod
    def parse(cls, text: str) -> Self:
        """Parse *text* into a segment. Equivalent to calling the constructor."""
        return cls(text)

    def as_str(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


class Domain(Segment):
    """Namespace or environment the resource lives in (tenant, system name)."""

    component = "Domain"

    @classmethod
    def default(cls) -> Domain:
        return cls(DEFAULT_DOMAIN)


class Category(Segment):
    """Classification of the resource type."""

    component = "Category"

    @classmethod
    def default(cls) -> Category:
        return cls(DEFAULT_CATEGORY)


class Account(Segment):
    """Owning account of the resource."""

    component = "Account"

    @classmethod
    def default(cls) -> Account:
        return cls(DEFAULT_ACCOUNT)


class Part(Segment):
    """One level of an ERN's hierarchical path."""

    component = "Part"

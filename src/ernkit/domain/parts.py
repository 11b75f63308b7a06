"""Parts — the ordered hierarchical path suffix of an ERN.

Order is significant: it encodes a path from the root to the leaf.
An empty sequence is valid and denotes a root-level identifier.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import overload

from ernkit.domain.segments import PATH_DELIMITER, Part


@dataclass(frozen=True)
class Parts:
    """Immutable ordered sequence of :class:`Part`.

    Plain strings are accepted as elements and validated through ``Part``.
    A bare ``str`` is rejected as the sequence itself, since iterating it
    would silently split a value into single characters.
    """

    items: tuple[Part, ...] = field(default=())

    def __init__(self, items: Iterable[Part | str] = ()) -> None:
        object.__setattr__(self, "items", tuple(_coerce(item) for item in _require_sequence(items)))

    @classmethod
    def parse(cls, text: str) -> Parts:
        """Split a ``/``-joined path into validated parts.

        A single invalid element aborts the whole parse.
        """
        return cls(text.split(PATH_DELIMITER))

    @classmethod
    def from_strings(cls, values: Iterable[str]) -> Parts:
        """Validate every value, failing on the first invalid one.

        Raises:
            TypeError: If *values* is a single string rather than a collection.
        """
        return cls(values)

    def append(self, part: Part) -> Parts:
        return Parts((*self.items, part))

    def concat(self, other: Parts) -> Parts:
        return Parts((*self.items, *other.items))

    def starts_with(self, prefix: Parts) -> bool:
        """True if *prefix* matches the leading elements of this sequence."""
        n = len(prefix.items)
        return n <= len(self.items) and self.items[:n] == prefix.items

    def without_last(self) -> Parts:
        return Parts(self.items[:-1])

    def as_strings(self) -> list[str]:
        return [part.value for part in self.items]

    def __add__(self, other: Parts) -> Parts:
        if not isinstance(other, Parts):
            return NotImplemented
        return self.concat(other)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Part]:
        return iter(self.items)

    @overload
    def __getitem__(self, index: int) -> Part: ...

    @overload
    def __getitem__(self, index: slice) -> Parts: ...

    def __getitem__(self, index: int | slice) -> Part | Parts:
        if isinstance(index, slice):
            return Parts(self.items[index])
        return self.items[index]

    def __bool__(self) -> bool:
        return bool(self.items)

    def __str__(self) -> str:
        return PATH_DELIMITER.join(part.value for part in self.items)


def _require_sequence(items: Iterable[Part | str]) -> Iterable[Part | str]:
    if isinstance(items, str):
        msg = f"Parts expects a collection of path segments, not a single string: {items!r}"
        raise TypeError(msg)
    return items


def _coerce(item: Part | str) -> Part:
    if isinstance(item, Part):
        return item
    if isinstance(item, str):
        return Part(item)
    msg = f"Parts elements must be Part or str, got {type(item).__name__}"
    raise TypeError(msg)

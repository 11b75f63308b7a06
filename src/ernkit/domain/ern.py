"""Ern — the Entity Resource Name aggregate.

Canonical form::

    ern:<domain>:<category>:<account>:<root>[/<part>/<part>...]

Equality and hashing are structural over all five fields. Ordering is
defined solely by the root, so ERNs sort by creation time regardless of
their other fields.

INVARIANT: An Ern is immutable. Every "modification" returns a new Ern.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from typing import Any

from ernkit.domain.parts import Parts
from ernkit.domain.root import Root, RootIdGenerator
from ernkit.domain.segments import (
    ERN_PREFIX,
    FIELD_DELIMITER,
    PATH_DELIMITER,
    Account,
    Category,
    Domain,
    Part,
)


@dataclass(frozen=True)
class Ern:
    """An Entity Resource Name.

    Constructing an ``Ern`` directly always succeeds: every argument has
    already been validated by its own type. Omitted fields take their
    type defaults, and an omitted root is generated at call time.
    """

    domain: Domain = field(default_factory=Domain.default)
    category: Category = field(default_factory=Category.default)
    account: Account = field(default_factory=Account.default)
    root: Root = field(default_factory=Root.default)
    parts: Parts = field(default_factory=Parts)

    # --- Construction ---

    @classmethod
    def default(cls) -> Ern:
        return cls()

    @classmethod
    def parse(cls, text: str) -> Ern:
        """Decode a canonical ERN string. See :class:`ErnParser`."""
        from ernkit.domain.parser import parse_ern

        return parse_ern(text)

    @classmethod
    def with_root(cls, base: str, *, generator: RootIdGenerator | None = None) -> Ern:
        """Default ERN with a root generated from *base*."""
        return cls(root=Root.new(base, generator=generator))

    @classmethod
    def with_domain(cls, domain: str) -> Ern:
        return cls(domain=Domain(domain))

    @classmethod
    def with_category(cls, category: str) -> Ern:
        return cls(category=Category(category))

    @classmethod
    def with_account(cls, account: str) -> Ern:
        return cls(account=Account(account))

    # --- Derivation ---

    def with_new_root(self, base: str, *, generator: RootIdGenerator | None = None) -> Ern:
        """Same lineage and path, freshly generated root."""
        return replace(self, root=Root.new(base, generator=generator))

    def add_part(self, part: str) -> Ern:
        return replace(self, parts=self.parts.append(Part(part)))

    def with_parts(self, parts: Iterable[str]) -> Ern:
        """Replace the whole path. Fails without effect if any element is invalid."""
        return replace(self, parts=Parts.from_strings(parts))

    def combine(self, child: Ern) -> Ern:
        """Append *child*'s path to this ERN.

        Asymmetric: the result keeps this ERN's domain, category, account
        and root. The child's identity fields are discarded.
        """
        return replace(self, parts=self.parts.concat(child.parts))

    def __add__(self, other: Ern) -> Ern:
        if not isinstance(other, Ern):
            return NotImplemented
        return self.combine(other)

    # --- Structural queries ---

    def is_child_of(self, other: Ern) -> bool:
        """True if *other* is an ancestor: same identity, strictly shorter prefix path."""
        return (
            self.domain == other.domain
            and self.category == other.category
            and self.account == other.account
            and self.root == other.root
            and len(other.parts) < len(self.parts)
            and self.parts.starts_with(other.parts)
        )

    def parent(self) -> Ern | None:
        """Strip the last part; None for a root-level identifier."""
        if not self.parts:
            return None
        return replace(self, parts=self.parts.without_last())

    # --- Ordering (by root only) ---

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Ern):
            return NotImplemented
        return self.root.sort_key < other.root.sort_key

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Ern):
            return NotImplemented
        return self.root.sort_key <= other.root.sort_key

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Ern):
            return NotImplemented
        return self.root.sort_key > other.root.sort_key

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Ern):
            return NotImplemented
        return self.root.sort_key >= other.root.sort_key

    # --- Serialization ---

    def __str__(self) -> str:
        text = FIELD_DELIMITER.join(
            (
                f"{ERN_PREFIX}{self.domain}",
                str(self.category),
                str(self.account),
                str(self.root),
            )
        )
        if self.parts:
            text = f"{text}{PATH_DELIMITER}{self.parts}"
        return text

    def to_dict(self) -> dict[str, Any]:
        """Plain-data view for JSON output."""
        created_at = self.root.created_at
        return {
            "ern": str(self),
            "domain": self.domain.value,
            "category": self.category.value,
            "account": self.account.value,
            "root": self.root.name,
            "root_base": self.root.base,
            "root_suffix": self.root.suffix,
            "created_at": created_at.isoformat() if created_at else None,
            "parts": self.parts.as_strings(),
        }

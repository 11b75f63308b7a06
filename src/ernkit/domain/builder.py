"""ErnBuilder — fluent, validating construction of an :class:`Ern`.

Each step validates its component immediately and raises on the first
invalid value, so no Ern escapes ``build()`` with an invalid component.
Fields never supplied fall back to defaults; an unsupplied root is
generated when ``build()`` runs.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

from ernkit.domain.ern import Ern
from ernkit.domain.parts import Parts
from ernkit.domain.root import DEFAULT_ROOT_BASE, Root, RootIdGenerator
from ernkit.domain.segments import Account, Category, Domain, Part


class ComponentDefaults(Protocol):
    """Anything carrying default values for the positional fields."""

    domain: str
    category: str
    account: str
    root: str


class ErnBuilder:
    """Step-oriented builder.

    Usage::

        ern = (
            ErnBuilder()
            .domain("billing")
            .category("invoices")
            .account("acme")
            .root("invoice")
            .part("2024")
            .build()
        )

    Args:
        defaults: Optional source of default domain/category/account/root
            base, e.g. the ``[defaults]`` config section.
        generator: Root generator; the process default when omitted.
    """

    def __init__(
        self,
        *,
        defaults: ComponentDefaults | None = None,
        generator: RootIdGenerator | None = None,
    ) -> None:
        self._generator = generator
        if defaults is None:
            self._domain = Domain.default()
            self._category = Category.default()
            self._account = Account.default()
            self._root_base = DEFAULT_ROOT_BASE
        else:
            self._domain = Domain(defaults.domain)
            self._category = Category(defaults.category)
            self._account = Account(defaults.account)
            self._root_base = defaults.root
        self._root: Root | None = None
        self._parts = Parts()

    def domain(self, value: str) -> ErnBuilder:
        self._domain = Domain(value)
        return self

    def category(self, value: str) -> ErnBuilder:
        self._category = Category(value)
        return self

    def account(self, value: str) -> ErnBuilder:
        self._account = Account(value)
        return self

    def root(self, base: str) -> ErnBuilder:
        """Generate the root now from *base*."""
        self._root = Root.new(base, generator=self._generator)
        return self

    def root_name(self, name: str) -> ErnBuilder:
        """Adopt an existing, already-suffixed root name verbatim."""
        self._root = Root.parse(name)
        return self

    def part(self, value: str) -> ErnBuilder:
        self._parts = self._parts.append(Part(value))
        return self

    def parts(self, values: Iterable[str]) -> ErnBuilder:
        """Replace the path. Nothing changes if any element is invalid."""
        self._parts = Parts.from_strings(values)
        return self

    def build(self) -> Ern:
        root = self._root or Root.new(self._root_base, generator=self._generator)
        return Ern(
            domain=self._domain,
            category=self._category,
            account=self._account,
            root=root,
            parts=self._parts,
        )

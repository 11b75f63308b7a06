"""ErnService — create, parse, and compose ERNs for interface layers.

Wraps the domain API so the CLI (and any future interface) receives a
:class:`ServiceResult` instead of handling :class:`ErnError` itself.
Every debug event carries ``op`` and, where one exists, the ``ern`` it
concerns as ``extra`` fields; :mod:`ernkit.config.logging` promotes them
to structured keys.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from ernkit.config.models import DefaultsConfig
from ernkit.domain.builder import ErnBuilder
from ernkit.domain.errors import ErnError
from ernkit.domain.parser import parse_ern
from ernkit.domain.root import RootIdGenerator
from ernkit.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


def _rejected(op: str, exc: ErnError) -> ServiceResult:
    error = ServiceError.from_ern_error(exc)
    logger.debug(
        "%s rejected: %s",
        op,
        exc,
        extra={"op": op, "code": error.code, "component": exc.component, "value": exc.value},
    )
    return ServiceResult.failure(op, error)


class ErnService:
    """ERN operations with configurable component defaults.

    Args:
        defaults: Values for omitted domain/category/account/root base.
        generator: Root generator; the process default when omitted.
    """

    def __init__(
        self,
        defaults: DefaultsConfig | None = None,
        generator: RootIdGenerator | None = None,
    ) -> None:
        self._defaults = defaults or DefaultsConfig()
        self._generator = generator

    def _builder(self) -> ErnBuilder:
        return ErnBuilder(defaults=self._defaults, generator=self._generator)

    def create(
        self,
        *,
        domain: str | None = None,
        category: str | None = None,
        account: str | None = None,
        root: str | None = None,
        parts: Iterable[str] = (),
    ) -> ServiceResult:
        """Build a new ERN with a freshly generated root."""
        op = "create"
        builder = self._builder()
        try:
            if domain is not None:
                builder.domain(domain)
            if category is not None:
                builder.category(category)
            if account is not None:
                builder.account(account)
            if root is not None:
                builder.root(root)
            builder.parts(parts)
            ern = builder.build()
        except ErnError as exc:
            return _rejected(op, exc)
        logger.debug("Created %s", ern, extra={"op": op, "ern": ern})
        return ServiceResult.of_ern(op, ern)

    def parse(self, text: str) -> ServiceResult:
        op = "parse"
        try:
            ern = parse_ern(text)
        except ErnError as exc:
            return _rejected(op, exc)
        warnings: list[str] = []
        if ern.root.suffix is None:
            warnings.append(f"Root {ern.root.name!r} has no generated suffix; ordering falls back to name")
        logger.debug("Parsed %s", ern, extra={"op": op, "ern": ern})
        return ServiceResult.of_ern(op, ern, warnings=warnings)

    def add_parts(self, text: str, parts: Sequence[str]) -> ServiceResult:
        """Append *parts* to the path of the ERN in *text*."""
        op = "add_parts"
        try:
            ern = parse_ern(text)
            for part in parts:
                ern = ern.add_part(part)
        except ErnError as exc:
            return _rejected(op, exc)
        return ServiceResult.of_ern(op, ern)

    def parent(self, text: str) -> ServiceResult:
        op = "parent"
        try:
            ern = parse_ern(text)
        except ErnError as exc:
            return _rejected(op, exc)
        parent = ern.parent()
        if parent is None:
            logger.debug("No parent for %s", ern, extra={"op": op, "ern": ern})
            return ServiceResult.failure(
                op,
                ServiceError(
                    code="NO_PARENT",
                    message=f"{ern} is a root-level identifier",
                    detail={"ern": str(ern)},
                ),
            )
        return ServiceResult.of_ern(op, parent)

    def combine(self, parent_text: str, child_text: str) -> ServiceResult:
        """Compose *parent* + *child*: parent identity, concatenated path."""
        op = "combine"
        try:
            parent = parse_ern(parent_text)
            child = parse_ern(child_text)
        except ErnError as exc:
            return _rejected(op, exc)
        combined = parent + child
        logger.debug("Combined into %s", combined, extra={"op": op, "ern": combined, "parent": parent})
        return ServiceResult.of_ern(op, combined)

    def is_child(self, child_text: str, parent_text: str) -> ServiceResult:
        op = "is_child"
        try:
            child = parse_ern(child_text)
            parent = parse_ern(parent_text)
        except ErnError as exc:
            return _rejected(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "child": str(child),
                "parent": str(parent),
                "is_child": child.is_child_of(parent),
            },
        )

    def sort(self, texts: Iterable[str]) -> ServiceResult:
        """Order ERNs by root creation time."""
        op = "sort"
        try:
            erns = [parse_ern(text) for text in texts]
        except ErnError as exc:
            return _rejected(op, exc)
        ordered = sorted(erns)
        logger.debug("Sorted %d ERNs", len(ordered), extra={"op": op, "count": len(ordered)})
        return ServiceResult(
            ok=True,
            op=op,
            data={"erns": [str(ern) for ern in ordered], "count": len(ordered)},
        )

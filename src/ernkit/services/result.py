"""ServiceResult and ServiceError — the service-layer return contract.

INVARIANT: All ErnService methods return ServiceResult; identifier
validation errors never escape the service layer as exceptions.

Most operations yield one ERN; its :meth:`Ern.to_dict` form is the
payload and :attr:`ServiceResult.ern` exposes the canonical string.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from ernkit.domain.ern import Ern
    from ernkit.domain.errors import ErnError


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult.

    ``code`` is the upper-cased :class:`ErnErrorKind` for validation
    failures (``EMPTY_VALUE``, ``INVALID_FORMAT``) or an operation-specific
    code such as ``NO_PARENT``.
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_ern_error(cls, exc: ErnError) -> ServiceError:
        return cls(
            code=exc.kind.upper(),
            message=str(exc),
            detail={"component": exc.component, "value": exc.value},
        )


class ServiceResult(BaseModel):
    """Universal return type for service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"parse"``).
        data: Operation payload on success; ``Ern.to_dict()`` for ops that
            produce an ERN.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def of_ern(cls, op: str, ern: Ern, *, warnings: Iterable[str] = ()) -> ServiceResult:
        """Successful result carrying a single ERN."""
        return cls(ok=True, op=op, data=ern.to_dict(), warnings=list(warnings))

    @classmethod
    def failure(cls, op: str, error: ServiceError) -> ServiceResult:
        return cls(ok=False, op=op, error=error)

    @property
    def ern(self) -> str | None:
        """Canonical string of the ERN in the payload, if there is one."""
        value = self.data.get("ern")
        return value if isinstance(value, str) else None

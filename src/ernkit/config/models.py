"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, ernkit.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from ernkit.domain.root import DEFAULT_ROOT_BASE
from ernkit.domain.segments import (
    DEFAULT_ACCOUNT,
    DEFAULT_CATEGORY,
    DEFAULT_DOMAIN,
    validate_segment,
)


class DefaultsConfig(BaseModel):
    """[defaults] section — component values used when none is supplied."""

    model_config = {"frozen": True}

    domain: str = DEFAULT_DOMAIN
    category: str = DEFAULT_CATEGORY
    account: str = DEFAULT_ACCOUNT
    root: str = DEFAULT_ROOT_BASE

    @field_validator("domain", "category", "account", "root")
    @classmethod
    def _check_segment(cls, value: str, info: ValidationInfo) -> str:
        # ErnError subclasses ValueError, which pydantic reports as a validation error.
        return validate_segment(value, info.field_name.capitalize())


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    color: bool = True
    width: int = Field(default=120, gt=20)


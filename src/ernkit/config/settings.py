"""ErnSettings — CLI flags, env vars, and ``ernkit.toml`` in one object.

Priority chain (highest to lowest):
  1. Init kwargs   — CLI flags passed by Click
  2. Env vars      — ``ERNKIT_*`` prefix, ``__`` for nested sections
  3. TOML file     — ``ernkit.toml``
  4. Code defaults — baked into the section models

The TOML file is chosen once per invocation by :func:`resolve_config_path`
(``--config``, then ``ERNKIT_CONFIG``, then a walk-up from the working
directory, the way git finds ``.git/``). The chosen path travels as the
``config_path`` init kwarg, which is where
:meth:`ErnSettings.settings_customise_sources` picks it up.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field, ValidationError
from pydantic_settings import (
    BaseSettings,
    InitSettingsSource,
    PydanticBaseSettingsSource,
    TomlConfigSettingsSource,
)

from ernkit.config.models import DefaultsConfig, OutputConfig

CONFIG_FILENAME = "ernkit.toml"
CONFIG_ENV_VAR = "ERNKIT_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest ``ernkit.toml`` at or above *start* (default: cwd)."""
    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def resolve_config_path(explicit: str | None = None, start: Path | None = None) -> Path | None:
    """Pick the config file for one invocation.

    A named file (*explicit*, else ``ERNKIT_CONFIG``) must exist. Without
    one, the walk-up result is used and may be None.

    Raises:
        click.ClickException: If a named file does not exist.
    """
    named = explicit or os.environ.get(CONFIG_ENV_VAR)
    if not named:
        return find_config(start)
    path = Path(named)
    if not path.is_file():
        msg = f"Config file not found: {path}"
        raise click.ClickException(msg)
    return path


def _describe_invalid(exc: ValidationError, source: Path | None) -> str:
    where = f" in {source}" if source else ""
    problems = "; ".join(
        f"{'.'.join(str(loc) for loc in error['loc'])}: {error['msg']}" for error in exc.errors()
    )
    return f"Invalid configuration{where}: {problems}"


class ErnSettings(BaseSettings):
    """Settings for the ernctl CLI and the service layer.

    Attributes:
        config_path: The TOML file that was loaded, or None.
        defaults: Component values used when an ERN is built without them.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "ERNKIT_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    defaults: DefaultsConfig = Field(default_factory=DefaultsConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Init kwargs, then env vars, then the TOML file named by ``config_path``."""
        sources: list[PydanticBaseSettingsSource] = [init_settings, env_settings]
        if isinstance(init_settings, InitSettingsSource):
            toml_path = init_settings.init_kwargs.get("config_path")
            if toml_path is not None:
                sources.append(TomlConfigSettingsSource(settings_cls, toml_file=toml_path))
        return tuple(sources)

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> ErnSettings:
        """Construct settings for one ernctl invocation.

        Raises:
            click.ClickException: If the config file is missing, is not valid
                TOML, or holds values that fail validation (for example a
                ``[defaults]`` segment containing ``:``).
        """
        toml_path = resolve_config_path(config_path, start)
        try:
            return cls(config_path=toml_path, **cli_flags)
        except tomllib.TOMLDecodeError as exc:
            msg = f"Invalid TOML in {toml_path}: {exc}"
            raise click.ClickException(msg) from exc
        except ValidationError as exc:
            raise click.ClickException(_describe_invalid(exc, toml_path)) from exc

"""ernctl — the command-line face of ernkit.

The root group turns global flags into :class:`ErnSettings` (flags beat
``ERNKIT_*`` env vars, which beat ``ernkit.toml``) and hands every
subcommand an :class:`AppContext` holding the configured ErnService.
"""

from __future__ import annotations

from typing import Any

import click

from ernkit import __version__
from ernkit.commands import register_commands
from ernkit.commands._context import AppContext
from ernkit.config.settings import ErnSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="ernctl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Bare ERN strings only.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("--no-color", is_flag=True, help="Plain human output, overriding [output] color.")
@click.option("-c", "--config", "config_path", default=None, help="Use this ernkit.toml.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    no_color: bool,
    config_path: str | None,
) -> None:
    """ernctl — create, parse, and compose Entity Resource Names.

    \b
    ern:<domain>:<category>:<account>:<root>[/<part>...]
    """
    overrides: dict[str, Any] = {}
    if no_color:
        overrides["output"] = {"color": False}
    settings = ErnSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        **overrides,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)

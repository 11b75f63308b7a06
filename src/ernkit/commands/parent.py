"""Command: strip the last part of an ERN's path."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from ernkit.commands._base import ErnCommand

if TYPE_CHECKING:
    from ernkit.commands._context import AppContext


@click.command(
    cls=ErnCommand,
    examples=(
        "ernctl parent ern:acton:reactive:acton-internal:root/team/member-1",
    ),
)
@click.argument("text")
@click.pass_obj
def parent(app: AppContext, text: str) -> None:
    """Show the parent of TEXT. Fails for a root-level ERN."""
    app.emit(app.service.parent(text))

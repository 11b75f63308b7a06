"""Command: order ERNs by root creation time."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from ernkit.commands._base import ErnCommand

if TYPE_CHECKING:
    from ernkit.commands._context import AppContext


@click.command(
    cls=ErnCommand,
    examples=(
        "ernctl sort ERN1 ERN2 ERN3",
        "ernctl -q sort $(cat erns.txt)",
    ),
)
@click.argument("texts", nargs=-1, required=True)
@click.pass_obj
def sort(app: AppContext, texts: tuple[str, ...]) -> None:
    """Print TEXTS oldest root first."""
    app.emit(app.service.sort(texts))

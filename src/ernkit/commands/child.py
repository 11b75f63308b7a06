"""Command: extend an ERN's path with additional parts."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from ernkit.commands._base import ErnCommand

if TYPE_CHECKING:
    from ernkit.commands._context import AppContext


@click.command(
    cls=ErnCommand,
    examples=(
        "ernctl child ern:acton:reactive:acton-internal:root team",
        "ernctl child ern:acton:reactive:acton-internal:root/team member-1 inbox",
    ),
)
@click.argument("text")
@click.argument("parts", nargs=-1, required=True)
@click.pass_obj
def child(app: AppContext, text: str, parts: tuple[str, ...]) -> None:
    """Append PARTS to the path of TEXT."""
    app.emit(app.service.add_parts(text, parts))

"""Command: compose a parent ERN with a child's path."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from ernkit.commands._base import ErnCommand

if TYPE_CHECKING:
    from ernkit.commands._context import AppContext


@click.command(
    cls=ErnCommand,
    examples=(
        "ernctl join ern:hr:people:acme:org/department-a ern:hr:people:acme:other/team-1",
    ),
)
@click.argument("parent_text", metavar="PARENT")
@click.argument("child_text", metavar="CHILD")
@click.pass_obj
def join(app: AppContext, parent_text: str, child_text: str) -> None:
    """Append CHILD's path to PARENT, keeping PARENT's identity."""
    app.emit(app.service.combine(parent_text, child_text))

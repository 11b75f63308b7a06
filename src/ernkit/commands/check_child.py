"""Command: test whether one ERN is a descendant of another."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from ernkit.commands._base import ErnCommand

if TYPE_CHECKING:
    from ernkit.commands._context import AppContext


@click.command(
    "check-child",
    cls=ErnCommand,
    examples=(
        "ernctl check-child ern:d:c:a:root/a/b ern:d:c:a:root/a",
        "ernctl -q check-child ern:d:c:a:root/a ern:d:c:a:root/a/b",
    ),
)
@click.argument("child_text", metavar="CHILD")
@click.argument("parent_text", metavar="PARENT")
@click.pass_obj
def check_child(app: AppContext, child_text: str, parent_text: str) -> None:
    """Report whether CHILD lies strictly below PARENT."""
    app.emit(app.service.is_child(child_text, parent_text))

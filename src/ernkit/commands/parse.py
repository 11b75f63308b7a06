"""Command: parse and validate an ERN string."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from ernkit.commands._base import ErnCommand

if TYPE_CHECKING:
    from ernkit.commands._context import AppContext


@click.command(
    cls=ErnCommand,
    examples=(
        "ernctl parse ern:custom:service:account123:root/resource/subresource",
        "ernctl --json parse ern:acton:reactive:acton-internal:root_01J9Z3Q8N2C4V6X8Z0B2D4F6H8",
    ),
)
@click.argument("text")
@click.pass_obj
def parse(app: AppContext, text: str) -> None:
    """Parse TEXT and show its components."""
    app.emit(app.service.parse(text))

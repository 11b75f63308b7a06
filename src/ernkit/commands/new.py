"""Command: create a new ERN with a freshly generated root."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from ernkit.commands._base import ErnCommand

if TYPE_CHECKING:
    from ernkit.commands._context import AppContext


@click.command(
    cls=ErnCommand,
    examples=(
        "ernctl new",
        "ernctl new --root invoice",
        "ernctl new -d billing -c invoices -a acme --root invoice -p 2024 -p q1",
        "ernctl -q new --root session",
    ),
)
@click.option("-d", "--domain", default=None, help="Domain (default from config).")
@click.option("-c", "--category", default=None, help="Category (default from config).")
@click.option("-a", "--account", default=None, help="Account (default from config).")
@click.option("-r", "--root", default=None, help="Root base name; a unique suffix is appended.")
@click.option("-p", "--part", "parts", multiple=True, help="Path part (repeatable, in order).")
@click.pass_obj
def new(
    app: AppContext,
    domain: str | None,
    category: str | None,
    account: str | None,
    root: str | None,
    parts: tuple[str, ...],
) -> None:
    """Create a new ERN."""
    app.emit(
        app.service.create(
            domain=domain,
            category=category,
            account=account,
            root=root,
            parts=parts,
        )
    )

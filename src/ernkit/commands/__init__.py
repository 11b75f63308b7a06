"""Subcommand modules for ernctl.

Provides register_commands() which uses deferred imports to keep
``ernctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from ernkit.commands.check_child import check_child
    from ernkit.commands.child import child
    from ernkit.commands.join import join
    from ernkit.commands.new import new
    from ernkit.commands.parent import parent
    from ernkit.commands.parse import parse
    from ernkit.commands.sort import sort

    cli.add_command(new)
    cli.add_command(parse)
    cli.add_command(child)
    cli.add_command(parent)
    cli.add_command(join)
    cli.add_command(check_child)
    cli.add_command(sort)

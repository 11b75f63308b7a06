"""Rich Console factory and theme for ernctl output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.

Markup and emoji substitution are off: ERNs routinely contain ``:name:``
and ``[...]`` sequences that must print verbatim.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

ERN_THEME = Theme(
    {
        "ern.ok": "bold green",
        "ern.error": "bold red",
        "ern.warning": "bold yellow",
        "ern.op": "bold cyan",
        "ern.key": "dim",
        "ern.value": "bold blue",
        "ern.root": "magenta",
        "ern.part": "green",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=ERN_THEME,
        no_color=no_color,
        highlight=False,
        markup=False,
        emoji=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()

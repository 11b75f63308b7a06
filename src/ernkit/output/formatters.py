"""Output-mode dispatch for ServiceResult.

The CLI renders ServiceResult for humans (Rich), for scripts (--quiet,
bare ERN strings), or for machines (--json).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ernkit.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from ernkit.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """How a result should be presented."""

    json_output: bool = False
    quiet: bool = False
    color: bool = True
    width: int = 120


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult according to *settings*.

    JSON takes precedence over quiet; quiet over the default Rich output.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, no_color=not settings.color, width=settings.width)

"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from ernkit.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from ernkit.services.result import ServiceResult

_ERN_FIELDS = ("domain", "category", "account", "root", "created_at")


def render_result(
    result: ServiceResult,
    *,
    no_color: bool = False,
    width: int | None = None,
) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console(no_color=no_color, width=width)

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console)
    else:
        _render_error(result, console)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode: bare ERN strings."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} - {msg}"
    if "erns" in result.data:
        return "\n".join(result.data["erns"])
    if "is_child" in result.data:
        return "true" if result.data["is_child"] else "false"
    return result.ern or f"OK: {result.op}"


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text.assemble(("OK", "ern.ok"), (f"  {result.op}", "ern.op")))


def _field(console: Console, key: str, value: Any, style: str = "") -> None:
    console.print(Text.assemble((f"  {key}: ", "ern.key"), (str(value), style)))


def _render_ern(result: ServiceResult, console: Console) -> None:
    data = result.data
    _status_line(console, result)
    _field(console, "ern", result.ern, "ern.value")
    for key in _ERN_FIELDS:
        value = data.get(key)
        if value is not None:
            _field(console, key, value, "ern.root" if key == "root" else "")
    if data.get("parts"):
        _field(console, "parts", " / ".join(data["parts"]), "ern.part")


def _render_sort(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    table = Table(show_header=True, header_style="ern.key", box=None, pad_edge=False)
    table.add_column("#", justify="right")
    table.add_column("ern", style="ern.value")
    for index, ern in enumerate(result.data.get("erns", []), start=1):
        table.add_row(Text(str(index)), Text(ern))
    console.print(table)


def _render_generic(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


def _render_error(result: ServiceResult, console: Console) -> None:
    error = result.error
    message = error.message if error else "Unknown error"
    console.print(
        Text.assemble(("ERROR", "ern.error"), (f"  {result.op}", "ern.op"), f"  {message}")
    )
    if error is not None:
        _field(console, "code", error.code)
        for key, value in error.detail.items():
            _field(console, key, value)


_OP_RENDERERS: dict[str, Callable[[ServiceResult, Console], None]] = {
    "create": _render_ern,
    "parse": _render_ern,
    "add_parts": _render_ern,
    "parent": _render_ern,
    "combine": _render_ern,
    "sort": _render_sort,
}

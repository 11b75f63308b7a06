"""structlog configuration for ernkit.

Service code logs through plain stdlib loggers and attaches its ERN context
as ``extra`` fields (``op``, ``ern``, ``component``...). The shared chain
lifts those fields onto the event dict and renders any ERN value in its
canonical string form, so both renderers show the identifier the event is
about:

- Human (default): console output to stderr
- JSON (``--log-json``): one JSON object per line to stderr
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, Processor

from ernkit.domain.ern import Ern
from ernkit.domain.parts import Parts
from ernkit.domain.root import Root

# ``extra`` keys the service layer attaches to its records.
ERN_CONTEXT_KEYS = ("op", "ern", "parent", "count", "code", "component", "value")


def render_identifiers(_logger: Any, _method: str, event_dict: EventDict) -> EventDict:
    """Replace Ern, Root and Parts values with their canonical strings."""
    for key, value in list(event_dict.items()):
        if isinstance(value, Ern | Root | Parts):
            event_dict[key] = str(value)
    return event_dict


def _shared_processors() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.ExtraAdder(allow=ERN_CONTEXT_KEYS),
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        render_identifiers,
    ]


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route ernkit logging to a single stderr handler.

    Safe to call repeatedly; each call replaces the previous handler.

    Args:
        verbose: Let ``ernkit.*`` DEBUG events through. Otherwise WARNING+.
        log_json: Render JSON lines instead of console output.
    """
    shared = _shared_processors()
    renderer: Processor = (
        structlog.processors.JSONRenderer()
        if log_json
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger("ernkit").setLevel(logging.DEBUG if verbose else logging.WARNING)

"""ernkit — Entity Resource Names.

Typed, validated, time-ordered hierarchical identifiers of the form
``ern:<domain>:<category>:<account>:<root>[/<part>...]``.
"""

from __future__ import annotations

from ernkit.domain.builder import ErnBuilder
from ernkit.domain.clock import Clock, FixedClock, SystemClock
from ernkit.domain.ern import Ern
from ernkit.domain.errors import EmptyValueError, ErnError, ErnErrorKind, InvalidFormatError
from ernkit.domain.parser import ErnParser, parse_ern
from ernkit.domain.parts import Parts
from ernkit.domain.root import Root, RootIdGenerator
from ernkit.domain.segments import ERN_PREFIX, Account, Category, Domain, Part

__version__ = "0.1.0"

__all__ = [
    "ERN_PREFIX",
    "Account",
    "Category",
    "Clock",
    "Domain",
    "EmptyValueError",
    "Ern",
    "ErnBuilder",
    "ErnError",
    "ErnErrorKind",
    "ErnParser",
    "FixedClock",
    "InvalidFormatError",
    "Part",
    "Parts",
    "Root",
    "RootIdGenerator",
    "SystemClock",
    "__version__",
    "parse_ern",
]

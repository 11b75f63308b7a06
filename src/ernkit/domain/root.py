"""Root identifiers — unique, time-ordered base names for ERNs.

A generated root is ``{base}_{token}`` where *token* is a 26-character
Crockford base32 ULID: 48 bits of milliseconds followed by 80 bits that
are random for the first token of a millisecond and incremented by one
for every further token in the same millisecond.

INVARIANT: Tokens from one generator are strictly increasing, even when
called concurrently, within one millisecond, or when the clock steps
backwards. Fixed-width encoding makes string order equal numeric order.

Two entry points build the same validated type:

- ``Root.new(base)`` generates a fresh token (creation).
- ``Root.parse(text)`` keeps the literal name verbatim (decoding), so a
  parsed ERN compares equal to the one it was serialized from.
"""

from __future__ import annotations

import re
import secrets
import threading
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from functools import total_ordering

from ulid import ULID

from ernkit.domain.clock import Clock, SystemClock
from ernkit.domain.segments import validate_segment

ROOT_COMPONENT = "Root"
DEFAULT_ROOT_BASE = "root"
SUFFIX_SEPARATOR = "_"

_RANDOM_BITS = 80
_RANDOM_MAX = (1 << _RANDOM_BITS) - 1

# {base}_{ULID}; first ULID char is 0-7 because 128 bits fill 26 base32 chars.
_SUFFIXED_NAME = re.compile(r"^(?P<base>.+)_(?P<token>[0-7][0-9A-HJKMNP-TV-Z]{25})$")


class RootIdGenerator:
    """Thread-safe source of strictly increasing ULID tokens.

    Args:
        clock: Time source; defaults to :class:`SystemClock`.
        randbits: ``randbits(k)`` returning *k* random bits; defaults to
            :func:`secrets.randbits`. Injectable for reproducible tests.
    """

    def __init__(
        self,
        clock: Clock | None = None,
        randbits: Callable[[int], int] | None = None,
    ) -> None:
        self._clock = clock or SystemClock()
        self._randbits = randbits or secrets.randbits
        self._lock = threading.Lock()
        self._last_ms = -1
        self._last_random = 0

    @property
    def clock(self) -> Clock:
        return self._clock

    def next_ulid(self) -> ULID:
        """Claim the next token as a :class:`ULID`."""
        with self._lock:
            ms = self._clock.now_ms()
            if ms > self._last_ms:
                random = self._randbits(_RANDOM_BITS)
            else:
                ms = self._last_ms
                random = self._last_random + 1
                if random > _RANDOM_MAX:
                    ms += 1
                    random = self._randbits(_RANDOM_BITS)
            self._last_ms = ms
            self._last_random = random
        return ULID.from_int((ms << _RANDOM_BITS) | random)

    def next_token(self) -> str:
        """Claim the next token as its 26-character string form."""
        return str(self.next_ulid())


_default_generator = RootIdGenerator()


def get_default_generator() -> RootIdGenerator:
    return _default_generator


def set_default_generator(generator: RootIdGenerator) -> RootIdGenerator:
    """Install *generator* as the process default and return the previous one."""
    global _default_generator
    previous = _default_generator
    _default_generator = generator
    return previous


@total_ordering
@dataclass(frozen=True, eq=True)
class Root:
    """The unique base identifier of an ERN.

    Equality is by name. Ordering is by :attr:`sort_key`, which puts
    generated roots in creation order regardless of their base names.
    """

    name: str

    def __post_init__(self) -> None:
        validate_segment(self.name, ROOT_COMPONENT)

    @classmethod
    def new(cls, base: str, *, generator: RootIdGenerator | None = None) -> Root:
        """Create a root from *base* with a freshly generated unique suffix.

        Raises:
            EmptyValueError: If *base* is empty.
            InvalidFormatError: If *base* contains ``:`` or ``/``.
        """
        validate_segment(base, ROOT_COMPONENT)
        token = (generator or _default_generator).next_token()
        return cls(f"{base}{SUFFIX_SEPARATOR}{token}")

    @classmethod
    def parse(cls, text: str) -> Root:
        """Adopt *text* verbatim as a root name. Never generates a suffix."""
        return cls(text)

    @classmethod
    def default(cls, *, generator: RootIdGenerator | None = None) -> Root:
        return cls.new(DEFAULT_ROOT_BASE, generator=generator)

    @property
    def base(self) -> str:
        """Caller-supplied base name (the whole name when unsuffixed)."""
        match = _SUFFIXED_NAME.match(self.name)
        return match.group("base") if match else self.name

    @property
    def suffix(self) -> str | None:
        """Generated ULID token, or None for a name without one."""
        match = _SUFFIXED_NAME.match(self.name)
        return match.group("token") if match else None

    @property
    def created_at(self) -> datetime | None:
        """UTC creation time encoded in the suffix."""
        suffix = self.suffix
        if suffix is None:
            return None
        return ULID.from_str(suffix).datetime

    @property
    def sort_key(self) -> tuple[str, str]:
        return (self.suffix or "", self.name)

    def as_str(self) -> str:
        return self.name

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Root):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __str__(self) -> str:
        return self.name

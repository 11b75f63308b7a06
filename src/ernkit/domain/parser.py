"""Parser — decode a canonical ERN string into an :class:`Ern`.

Single pass, no backtracking, fail-fast:

1. Split on ``:`` into at most five fields; require exactly five and the
   literal ``ern`` prefix.
2. Fields 2-4 become Domain, Category, Account.
3. Field 5 splits once on ``/`` into the root and an optional path.
4. The path splits on ``/`` into parts, each validated independently.

Empty fields are not special-cased: they fail the validation of the
component they belong to.
"""

from __future__ import annotations

from ernkit.domain.ern import Ern
from ernkit.domain.errors import InvalidFormatError
from ernkit.domain.parts import Parts
from ernkit.domain.root import Root
from ernkit.domain.segments import (
    ERN_PREFIX,
    FIELD_DELIMITER,
    PATH_DELIMITER,
    Account,
    Category,
    Domain,
)

_FIELD_COUNT = 5
_PREFIX_TOKEN = ERN_PREFIX.rstrip(FIELD_DELIMITER)


class ErnParser:
    """Parser bound to one ERN string.

    Examples:
        >>> ern = ErnParser("ern:custom:service:account123:root/resource").parse()
        >>> ern.domain.as_str(), ern.parts.as_strings()
        ('custom', ['resource'])
    """

    def __init__(self, text: str) -> None:
        self.text = text

    def parse(self) -> Ern:
        """Decode and validate the bound string.

        Raises:
            InvalidFormatError: If the prefix or field count is wrong, or a
                component contains a reserved delimiter.
            EmptyValueError: If any component is empty.
        """
        fields = self.text.split(FIELD_DELIMITER, _FIELD_COUNT - 1)
        if len(fields) != _FIELD_COUNT or fields[0] != _PREFIX_TOKEN:
            raise InvalidFormatError(
                "Ern",
                self.text,
                f"expected '{ERN_PREFIX}<domain>:<category>:<account>:<root>[/<part>...]'",
            )

        domain = Domain.parse(fields[1])
        category = Category.parse(fields[2])
        account = Account.parse(fields[3])

        root_text, has_path, path = fields[4].partition(PATH_DELIMITER)
        root = Root.parse(root_text)
        parts = Parts.parse(path) if has_path else Parts()

        return Ern(domain=domain, category=category, account=account, root=root, parts=parts)


def parse_ern(text: str) -> Ern:
    """Parse a canonical ERN string. Shorthand for ``ErnParser(text).parse()``."""
    return ErnParser(text).parse()

"""A row of the multicodec table."""

import dataclasses
from functools import cached_property

DEPRECATION_MARKER = "deprecated"


def derive_name(name: str) -> str:
    """Convert a hyphenated codec name to a constant name.

    Capitalizes the first character of each hyphen-delimited part and joins
    the parts. Digits on both sides of a part boundary are joined with an
    underscore, so `123-456` becomes `123_456` rather than `123456`.

    Empty parts, from leading, trailing, or doubled hyphens, are skipped.
    """
    derived = ""
    last = ""
    for part in name.split("-"):
        if not part:
            continue

        first = part[0]
        if last.isdecimal() and first.isdecimal():
            derived += "_"
        derived += first.upper() + part[1:]
        last = part[-1]

    return derived


def is_deprecated(description: str) -> bool:
    """Whether the description marks its code as deprecated. Case-sensitive."""
    return DEPRECATION_MARKER in description


@dataclasses.dataclass(frozen=True, kw_only=True)
class TableEntry:
    """One code of the multicodec table."""

    name: str
    tag: str
    code: str
    status: str
    description: str

    @cached_property
    def var_name(self) -> str:
        """Name of the generated constant."""
        return derive_name(self.name)

    @property
    def is_deprecated(self) -> bool:
        """Whether the code is deprecated, per its description."""
        return is_deprecated(self.description)

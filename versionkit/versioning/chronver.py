"""
Chronological versions: ``YYYY.MM.DD[.changeset][-meta]``.

The changeset encodes an incrementing change counter with an optional tag and
an optional secondary counter, e.g. ``2024.03.01.2-feature.3``. A version
without changeset sorts after every version of the same day with one.
"""

import re
from dataclasses import dataclass, field
from typing import Optional

from .exceptions import InvalidVersionError
from .version import Version, cmp, days_in_month, is_blank, require_non_blank

_VERSION_PATTERN = re.compile(
    r"^([2-9]\d{3})\.(0[1-9]|1[0-2])\.(0[1-9]|[1-2]\d|3[0-1])"
    r"(?:\.((?:[1-9]\d*)(?:(?:-[a-zA-Z0-9]+)+(?:\.[1-9]\d*)?)?))?"
    r"(?:-[a-zA-Z0-9]+)?$",
    re.ASCII,
)
_CHANGESET_PATTERN = re.compile(
    r"^(?:((?:[1-9]\d*))(?:-([a-zA-Z0-9-]+[a-zA-Z0-9]?)(?:\.([1-9]\d*))?)?)?$",
    re.ASCII,
)


@dataclass(frozen=True)
class Changeset:
    """
    The changeset part of a ChronVer value.

    Only the identifier takes part in equality; the parsed fields are derived
    from it. An identifier that does not match the changeset grammar keeps
    ``change=0``, no tag and ``change2=0``.
    """

    identifier: str = ""
    change: int = field(default=0, init=False, compare=False)
    tag: Optional[str] = field(default=None, init=False, compare=False)
    change2: int = field(default=0, init=False, compare=False)

    def __post_init__(self):
        if is_blank(self.identifier):
            object.__setattr__(self, "identifier", "")
            return

        identifier = self.identifier.strip()
        object.__setattr__(self, "identifier", identifier)
        m = _CHANGESET_PATTERN.fullmatch(identifier)
        if m and m.group(1):
            object.__setattr__(self, "change", int(m.group(1)))
            object.__setattr__(self, "tag", m.group(2))
            if m.group(3):
                object.__setattr__(self, "change2", int(m.group(3)))

    @property
    def is_empty(self) -> bool:
        return not self.identifier

    @property
    def has_tag(self) -> bool:
        return not is_blank(self.tag)

    @property
    def has_change2(self) -> bool:
        return self.change2 != 0

    def compare_to(self, other: "Changeset") -> int:
        if self.is_empty and other.is_empty:
            return 0
        if self.is_empty:
            return 1
        if other.is_empty:
            return -1

        c = cmp(self.change, other.change)
        if c == 0 and self.has_tag:
            # a tagged changeset precedes the untagged one with the same change
            c = cmp(self.tag, other.tag) if other.has_tag else -1
        if c == 0 and self.has_change2:
            c = cmp(self.change2, other.change2)
        return c

    def __str__(self) -> str:
        if self.is_empty:
            return ""
        s = str(self.change)
        if self.has_tag:
            s += "-" + self.tag
        if self.has_change2:
            s += "." + str(self.change2)
        return s

    @classmethod
    def of(cls, identifier: Optional[str]) -> "Changeset":
        return cls(identifier or "")


@dataclass(frozen=True)
class ChronVer(Version):
    year: int
    month: int
    day: int
    changeset: Changeset = field(default_factory=Changeset)

    @property
    def has_changeset(self) -> bool:
        return not self.changeset.is_empty

    def compare_to(self, other: "ChronVer") -> int:
        result = cmp((self.year, self.month, self.day), (other.year, other.month, other.day))
        if result == 0:
            result = self.changeset.compare_to(other.changeset)
        return result

    def same_scheme(self, other: "ChronVer") -> bool:
        return True

    def to_packaging_string(self) -> str:
        return str(self).replace("-", "_")

    def __str__(self) -> str:
        s = f"{self.year}.{self.month:02d}.{self.day:02d}"
        if self.has_changeset:
            s += "." + str(self.changeset)
        return s

    @classmethod
    def of(cls, version: str) -> "ChronVer":
        """
        Parse a chronological version string.

        Raises:
            ValueError: If the version is blank
            InvalidVersionError: If the version does not match or names a
                day that does not exist in that month
        """
        require_non_blank(version, "version")

        m = _VERSION_PATTERN.fullmatch(version.strip())
        if not m:
            raise InvalidVersionError(version)

        year, month, day = int(m.group(1)), int(m.group(2)), int(m.group(3))
        if day > days_in_month(year, month):
            raise InvalidVersionError(
                version, reason=f"{year}-{month:02d} has no day {day}"
            )

        return cls.of_parts(year, month, day, m.group(4))

    @classmethod
    def of_parts(
        cls, year: int, month: int, day: int, changeset: Optional[str] = None
    ) -> "ChronVer":
        for name, value in (("year", year), ("month", month), ("day", day)):
            if value < 0:
                raise ValueError(f"Argument '{name}' must not be negative")
        return cls(year, month, day, Changeset.of(changeset))

    @classmethod
    def default_of(cls) -> "ChronVer":
        return cls.of("2000.01.01")

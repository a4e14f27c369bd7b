"""
Version contract shared by every version scheme.

Concrete schemes are frozen dataclasses deriving from :class:`Version`. They
implement ``compare_to`` and the rich comparison operators are derived from
it. Equality and hashing stay structural (generated by the dataclass), so two
values may compare as equal while still being different values, e.g. the
runtime versions ``17.0.1`` and ``17.0.1.0``.
"""

import calendar
import re
from abc import ABC, abstractmethod
from typing import Any, List, Optional


def is_blank(value: Optional[str]) -> bool:
    """Check whether a string is None, empty or whitespace only."""
    return value is None or not value.strip()


def require_non_blank(value: Optional[str], name: str) -> str:
    """
    Validate a required string argument.

    Raises:
        ValueError: If the value is blank
    """
    if is_blank(value):
        raise ValueError(f"Argument '{name}' must not be blank")
    return value


def strip_or_none(value: Optional[str]) -> Optional[str]:
    """Return the trimmed value, or None when blank."""
    return None if is_blank(value) else value.strip()


def days_in_month(year: int, month: int) -> int:
    """Number of days in the given month, leap-year aware. Works for year 0."""
    if month == 2 and calendar.isleap(year):
        return 29
    return calendar.mdays[month]


def cmp(a: Any, b: Any) -> int:
    """Three-way comparison returning -1, 0 or 1."""
    return (a > b) - (a < b)


def compare_release_first(this: Optional[str], other: Optional[str]) -> int:
    """Compare optional labels where an absent label sorts after a present one."""
    if is_blank(this) and is_blank(other):
        return 0
    if is_blank(this):
        return 1
    if is_blank(other):
        return -1
    return cmp(this, other)


def compare_present_first(this: Optional[str], other: Optional[str]) -> int:
    """Compare optional labels where a present label sorts after an absent one."""
    if is_blank(this) and is_blank(other):
        return 0
    if is_blank(this):
        return -1
    if is_blank(other):
        return 1
    return cmp(this, other)


def split_label(label: Optional[str], delimiters: str) -> List[str]:
    """
    Split a label on any of the given delimiter characters.

    Empty tokens between adjacent delimiters are kept, a trailing empty token
    is dropped. A blank label yields no tokens.
    """
    if is_blank(label):
        return []
    tokens = re.split("[" + re.escape(delimiters) + "]", label)
    if tokens and tokens[-1] == "":
        tokens.pop()
    return tokens


def compare_tokens(t1: List[str], t2: List[str]) -> int:
    """
    Compare two token lists pairwise.

    Tokens are compared numerically when both are integers and lexically
    otherwise. When one list is longer, the extra tokens only count if any of
    them is not ``"0"``; in that case the longer list is greater.
    """
    n = min(len(t1), len(t2))
    for s1, s2 in zip(t1[:n], t2[:n]):
        try:
            c = cmp(int(s1), int(s2))
        except ValueError:
            c = cmp(s1, s2)
        if c != 0:
            return c

    rest = t1 if len(t1) > len(t2) else t2
    for token in rest[n:]:
        if token != "0":
            return cmp(len(t1), len(t2))
    return 0


def compare_dotted(v1: str, v2: str) -> int:
    """Compare two dotted version cores token by token."""
    return compare_tokens(v1.split("."), v2.split("."))


class Version(ABC):
    """
    Base class for all version schemes.

    Subclasses only need to implement the abstract methods; ordering
    operators are provided here. Comparing versions of different schemes
    returns NotImplemented, so Python raises TypeError.
    """

    @abstractmethod
    def compare_to(self, other: "Version") -> int:
        """Return a negative, zero or positive number."""

    @abstractmethod
    def same_scheme(self, other: "Version") -> bool:
        """Check whether both versions were produced by the same scheme definition."""

    @abstractmethod
    def to_packaging_string(self) -> str:
        """Render a form safe for revision-based packaging systems."""

    @abstractmethod
    def __str__(self) -> str:
        """Render the scheme-native form."""

    def _comparable(self, other: Any) -> bool:
        return isinstance(other, Version) and type(other) is type(self)

    def __lt__(self, other) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self.compare_to(other) >= 0

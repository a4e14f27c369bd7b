"""
Calendar versions driven by a user-supplied format string.

A format such as ``YYYY.0M.MICRO[-MODIFIER]`` is tokenized, validated and
compiled into a regular expression which is then matched against the version
string. Supported tokens:

========  =============================  ==================
Token     Meaning                        Example values
========  =============================  ==================
YYYY      full year                      2006, 2016, 2106
YY        short year                     6, 16, 106
0Y        zero-padded year               06, 16, 106
MM        short month                    1, 2 ... 11, 12
0M        zero-padded month              01, 02 ... 11, 12
WW        short week                     1, 2, 33, 52
0W        zero-padded week               01, 02, 33, 52
DD        short day                      1, 2 ... 30, 31
0D        zero-padded day                01, 02 ... 30, 31
MINOR     incrementing number            0, 1, 2
MICRO     incrementing number            0, 1, 2
MODIFIER  label                          alpha, rc1, FOO-BAR
========  =============================  ==================

Months and weeks are mutually exclusive, a day requires a month, and at most
one MINOR followed by at most one MICRO may appear. ``[.MODIFIER]`` (with any
of the supported separators) marks a trailing modifier as optional.
"""

import logging
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, List, Optional, Tuple

from .exceptions import InvalidFormatError, InvalidVersionError
from .version import (
    Version,
    cmp,
    days_in_month,
    is_blank,
    require_non_blank,
    strip_or_none,
)

logger = logging.getLogger(__name__)

YEAR = "YEAR"
MONTH = "MONTH"
WEEK = "WEEK"
DAY = "DAY"
MINOR = "MINOR"
MICRO = "MICRO"
MODIFIER = "MODIFIER"

YEAR_LONG = "YYYY"
YEAR_SHORT = "YY"
YEAR_ZERO = "0Y"
MONTH_SHORT = "MM"
MONTH_ZERO = "0M"
WEEK_SHORT = "WW"
WEEK_ZERO = "0W"
DAY_SHORT = "DD"
DAY_ZERO = "0D"
MODIFIER_OPTIONAL = "[MODIFIER]"
MODIFIER_OPTIONAL_END = "MODIFIER]"

YEARS = (YEAR_ZERO, YEAR_SHORT, YEAR_LONG)
MONTHS = (MONTH_ZERO, MONTH_SHORT)
WEEKS = (WEEK_ZERO, WEEK_SHORT)
DAYS = (DAY_ZERO, DAY_SHORT)
NUMBERS = (MICRO, MINOR)

PATTERNS: Dict[str, str] = {
    YEAR_LONG: r"([2-9][0-9]{3})",
    YEAR_SHORT: r"([0-9]|[1-9][0-9]|[1-9][0-9]{2})",
    YEAR_ZERO: r"(0[0-9]|[1-9][0-9]|[1-9][0-9]{2})",
    MONTH_SHORT: r"([1-9]|1[0-2])",
    MONTH_ZERO: r"(0[1-9]|1[0-2])",
    WEEK_SHORT: r"([1-9]|[1-4][0-9]|5[0-2])",
    WEEK_ZERO: r"(0[1-9]|[1-4][0-9]|5[0-2])",
    DAY_SHORT: r"([1-9]|[1-2][0-9]|3[0-1])",
    DAY_ZERO: r"(0[1-9]|[1-2][0-9]|3[0-1])",
    MINOR: r"(0|[1-9]\d*)",
    MICRO: r"(0|[1-9]\d*)",
    MODIFIER: r"([a-zA-Z\-][0-9a-zA-Z\-]*)",
    MODIFIER_OPTIONAL: r"([a-zA-Z\-][0-9a-zA-Z\-]*))?",
}

# substitution order matters: longer tokens first
_DEFAULTS: List[Tuple[str, str]] = [
    (YEAR_LONG, "2000"),
    (YEAR_SHORT, "0"),
    (YEAR_ZERO, "00"),
    (MONTH_SHORT, "1"),
    (MONTH_ZERO, "01"),
    (WEEK_SHORT, "1"),
    (WEEK_ZERO, "01"),
    (DAY_SHORT, "1"),
    (DAY_ZERO, "01"),
    (MINOR, "0"),
    (MICRO, "0"),
    (MODIFIER, "A"),
]

_DELIMITERS = (".", "_", "-", "[")

# group roles always follow this order after the year
_ROLE_ORDER = (WEEK, MONTH, DAY, MINOR, MICRO)

_OPTIONAL_SEGMENT = re.compile(r"\[[^\]]*\]")


def _escape(sep: str) -> str:
    return r"\." if sep == "." else sep


def _take(s: str, index: int, delims=_DELIMITERS) -> Tuple[str, str]:
    """
    Scan ``s`` from ``index`` up to the next delimiter.

    Returns the token and the (regex-escaped) separator that ended it. For
    ``[`` the separator is the character following the bracket, so that
    ``[-MODIFIER]`` yields ``-``.
    """
    token = []
    for i in range(index, len(s)):
        c = s[i]
        if c in delims:
            if c == "[" and len(s) > i + 1:
                c = s[i + 1]
            return "".join(token), _escape(c)
        token.append(c)
    return "".join(token), ""


@dataclass(frozen=True)
class FormatTokens:
    """Result of tokenizing a format: regex tokens plus the calendar components found."""

    tokens: Tuple[str, ...]
    components: Tuple[Tuple[str, str], ...]

    def has(self, role: str) -> bool:
        return any(r == role for r, _ in self.components)


@dataclass(frozen=True)
class CompiledFormat:
    """A format compiled into an anchored pattern and its ordered group roles."""

    format: str
    pattern: re.Pattern
    roles: Tuple[str, ...]


def tokenize_format(format: str) -> FormatTokens:
    """
    Split a format string into tokens, validating token order.

    Raises:
        ValueError: If the format is blank
        InvalidFormatError: If the tokens are missing, misplaced or mutually
            exclusive
    """
    require_non_blank(format, "format")
    f = format.strip()
    tokens: List[str] = []
    components: List[Tuple[str, str]] = []

    def push(token: str, sep: str) -> None:
        tokens.append(token)
        if sep:
            tokens.append(sep)

    token, sep = _take(f, 0)
    if token not in YEARS:
        raise InvalidFormatError(f, "must start with one of YYYY, YY or 0Y")
    components.append((YEAR, token))
    push(token, sep)
    i = len(token) + 1

    token, sep = _take(f, i)
    if token in MONTHS:
        if WEEK_ZERO in f or WEEK_SHORT in f:
            raise InvalidFormatError(f, "month and week tokens can not be combined")
        components.append((MONTH, token))
        push(token, sep)
        i += len(token) + 1

        token, sep = _take(f, i)
        if token in DAYS:
            components.append((DAY, token))
            push(token, sep)
            i += len(token) + 1
            token, sep = _take(f, i)
    elif token in WEEKS:
        if MONTH_ZERO in f or MONTH_SHORT in f:
            raise InvalidFormatError(f, "week and month tokens can not be combined")
        if DAY_ZERO in f or DAY_SHORT in f:
            raise InvalidFormatError(f, "week and day tokens can not be combined")
        components.append((WEEK, token))
        push(token, sep)
        i += len(token) + 1
        token, sep = _take(f, i)

    if token in NUMBERS:
        micro = token == MICRO
        components.append((MICRO if micro else MINOR, token))
        push(token, sep)
        i += len(token) + 1

        token, sep = _take(f, i)
        if token in NUMBERS:
            if micro:
                if token == MICRO:
                    raise InvalidFormatError(f, "MICRO may only appear once")
                raise InvalidFormatError(f, "MINOR can not follow MICRO")
            if token == MINOR:
                raise InvalidFormatError(f, "MINOR may only appear once")
            components.append((MICRO, token))
            push(token, sep)
            i += len(token) + 1

    # whatever remains is the modifier, possibly in its optional [..] form
    rest, _ = _take(f, i, ())
    if not is_blank(rest):
        tokens.append(rest)

    return FormatTokens(tuple(tokens), tuple(components))


@lru_cache(maxsize=128)
def compile_format(format: str) -> CompiledFormat:
    """
    Compile a format string into an anchored regular expression.

    Raises:
        ValueError: If the format is blank
        InvalidFormatError: If the format is illegal
    """
    parsed = tokenize_format(format)
    tokens = list(parsed.tokens)

    if tokens[-1].endswith(MODIFIER_OPTIONAL_END) and len(tokens) > 1:
        sep = tokens.pop(-2)
        tokens[-1] = "(?:" + sep + PATTERNS[MODIFIER_OPTIONAL]

    regex = "^" + "".join(PATTERNS.get(t, t) for t in tokens) + "$"
    try:
        pattern = re.compile(regex, re.ASCII)
    except re.error as e:
        raise InvalidFormatError(format.strip(), f"can not be compiled ({e})") from e

    roles = (YEAR,) + tuple(r for r in _ROLE_ORDER if parsed.has(r))
    logger.debug(f"Compiled calver format '{format}' into {regex} with groups {roles}")
    return CompiledFormat(format.strip(), pattern, roles)


def _as_int(value: Optional[str]) -> Optional[int]:
    return None if value is None else int(value)


@dataclass(frozen=True)
class CalVer(Version):
    """
    A calendar version value.

    Components are kept as the matched text (``"09"`` stays ``"09"``) and
    exposed as integers through the ``*_as_int`` properties. Components not
    present in the format are None.
    """

    format: str
    year: Optional[str] = None
    month: Optional[str] = None
    week: Optional[str] = None
    day: Optional[str] = None
    minor: Optional[str] = None
    micro: Optional[str] = None
    modifier: Optional[str] = None

    def __post_init__(self):
        for name in ("year", "month", "week", "day", "minor", "micro", "modifier"):
            object.__setattr__(self, name, strip_or_none(getattr(self, name)))

        if self.has_year and self.has_month and self.has_day:
            if self.day_as_int > days_in_month(self.year_as_int, self.month_as_int):
                raise InvalidVersionError(
                    str(self),
                    self.format,
                    reason=f"month {self.month} has no day {self.day}",
                )

    @property
    def has_year(self) -> bool:
        return self.year is not None

    @property
    def has_month(self) -> bool:
        return self.month is not None

    @property
    def has_week(self) -> bool:
        return self.week is not None

    @property
    def has_day(self) -> bool:
        return self.day is not None

    @property
    def has_minor(self) -> bool:
        return self.minor is not None

    @property
    def has_micro(self) -> bool:
        return self.micro is not None

    @property
    def has_modifier(self) -> bool:
        return self.modifier is not None

    @property
    def year_as_int(self) -> Optional[int]:
        return _as_int(self.year)

    @property
    def month_as_int(self) -> Optional[int]:
        return _as_int(self.month)

    @property
    def week_as_int(self) -> Optional[int]:
        return _as_int(self.week)

    @property
    def day_as_int(self) -> Optional[int]:
        return _as_int(self.day)

    @property
    def minor_as_int(self) -> Optional[int]:
        return _as_int(self.minor)

    @property
    def micro_as_int(self) -> Optional[int]:
        return _as_int(self.micro)

    def compare_to(self, other: "CalVer") -> int:
        result = cmp(self.format, other.format)

        if result == 0:
            result = cmp(self.year_as_int or 0, other.year_as_int or 0)

        # a component only counts when this side has it
        for name in ("month", "week", "day", "minor", "micro"):
            if result != 0:
                break
            if getattr(self, name) is not None:
                mine = getattr(self, f"{name}_as_int")
                theirs = getattr(other, f"{name}_as_int")
                result = cmp(mine, theirs if theirs is not None else 0)

        if result == 0 and self.has_modifier:
            result = cmp(self.modifier, other.modifier) if other.has_modifier else -1

        return result

    def same_scheme(self, other: "CalVer") -> bool:
        return self.format == other.format

    def to_packaging_string(self) -> str:
        return str(self).replace("-", "_")

    def __str__(self) -> str:
        s = self.format
        if not self.has_modifier:
            s = _OPTIONAL_SEGMENT.sub("", s)

        for token, value in (
            (YEAR_LONG, self.year),
            (YEAR_SHORT, self.year),
            (YEAR_ZERO, self.year),
            (MONTH_SHORT, self.month),
            (MONTH_ZERO, self.month),
            (WEEK_SHORT, self.week),
            (WEEK_ZERO, self.week),
            (DAY_SHORT, self.day),
            (DAY_ZERO, self.day),
            (MINOR, self.minor),
            (MICRO, self.micro),
            (MODIFIER, self.modifier),
        ):
            if value is not None:
                s = s.replace(token, value)

        return s.replace("[", "").replace("]", "")

    @classmethod
    def of(cls, format: str, version: str) -> "CalVer":
        """
        Parse a version against a calendar version format.

        Raises:
            ValueError: If the format or the version is blank
            InvalidFormatError: If the format is illegal
            InvalidVersionError: If the version does not match the format or
                names a day that does not exist in that month
        """
        require_non_blank(format, "format")
        require_non_blank(version, "version")

        compiled = compile_format(format.strip())
        m = compiled.pattern.fullmatch(version.strip())
        if not m:
            raise InvalidVersionError(version, format)

        elements: Dict[str, Optional[str]] = {}
        for index, role in enumerate(compiled.roles, start=1):
            elements[role.lower()] = m.group(index)
        if len(compiled.roles) < compiled.pattern.groups:
            elements["modifier"] = m.group(compiled.pattern.groups)

        return cls(compiled.format, **elements)

    @classmethod
    def default_of(cls, format: str) -> "CalVer":
        """Build the smallest value expressible by a format."""
        require_non_blank(format, "format")

        version = format
        for token, value in _DEFAULTS:
            version = version.replace(token, value)
        return cls.of(format, version.replace("[", "").replace("]", ""))

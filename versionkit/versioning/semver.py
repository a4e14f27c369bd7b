"""
Semantic versions with full, major.minor or major-only arity.

The tag separator may be ``.`` or ``-`` (``1.0.0.RC1`` and ``1.0.0-RC1`` are
both accepted). Build metadata follows ``+``.
"""

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .exceptions import InvalidVersionError
from .version import Version, cmp, require_non_blank, strip_or_none

logger = logging.getLogger(__name__)

_IDENTIFIER = r"(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
_TAG = rf"(?:([\.\-])({_IDENTIFIER}(?:\.{_IDENTIFIER})*))?"
_BUILD = r"(?:\+([0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?"
_NUMBER = r"(0|[1-9]\d*)"


class SemVerArity(str, Enum):
    """Which of the three semantic version grammars produced a value."""

    FULL = "full"
    MAJOR_MINOR = "major_minor"
    MAJOR = "major"


_PATTERNS = [
    (SemVerArity.FULL, re.compile(rf"^{_NUMBER}\.{_NUMBER}\.{_NUMBER}{_TAG}{_BUILD}$", re.ASCII)),
    (SemVerArity.MAJOR_MINOR, re.compile(rf"^{_NUMBER}\.{_NUMBER}{_TAG}{_BUILD}$", re.ASCII)),
    (SemVerArity.MAJOR, re.compile(rf"^{_NUMBER}{_TAG}{_BUILD}$", re.ASCII)),
]


def _compare_optional_numbers(a: Optional[int], b: Optional[int]) -> int:
    # an absent component sorts below any present one
    if a is None and b is None:
        return 0
    if a is None:
        return -1
    if b is None:
        return 1
    return cmp(a, b)


@dataclass(frozen=True)
class SemanticVersion(Version):
    """
    A semantic version value.

    Attributes:
        major: Major component
        minor: Minor component, None for major-only versions
        patch: Patch component, None unless the arity is FULL
        tag: Pre-release tag
        build: Build metadata
        arity: Grammar that produced this value
        tag_separator: ``.`` or ``-``; not part of equality
    """

    major: int
    minor: Optional[int] = None
    patch: Optional[int] = None
    tag: Optional[str] = None
    build: Optional[str] = None
    arity: SemVerArity = SemVerArity.FULL
    tag_separator: Optional[str] = field(default=None, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "tag", strip_or_none(self.tag))
        object.__setattr__(self, "build", strip_or_none(self.build))
        separator = strip_or_none(self.tag_separator)
        if separator is not None and separator not in (".", "-"):
            raise ValueError("Argument 'tag_separator' must be '.' or '-'")
        if self.tag is None:
            separator = None
        elif separator is None:
            separator = "."
        object.__setattr__(self, "tag_separator", separator)

    @property
    def has_minor(self) -> bool:
        return self.minor is not None

    @property
    def has_patch(self) -> bool:
        return self.patch is not None

    @property
    def has_tag(self) -> bool:
        return self.tag is not None

    @property
    def has_build(self) -> bool:
        return self.build is not None

    @property
    def number(self) -> str:
        """The numeric part, e.g. ``1.2`` for ``1.2-RC1``."""
        parts = [str(self.major)]
        if self.has_minor:
            parts.append(str(self.minor))
        if self.has_patch:
            parts.append(str(self.patch))
        return ".".join(parts)

    def compare_to(self, other: "SemanticVersion") -> int:
        result = cmp(self.major, other.major)
        if result == 0:
            result = _compare_optional_numbers(self.minor, other.minor)
        if result == 0:
            result = _compare_optional_numbers(self.patch, other.patch)

        # tag and build only take part when this side has them
        if result == 0 and self.has_tag:
            result = cmp(self.tag, other.tag) if other.has_tag else -1
        if result == 0 and self.has_build:
            result = cmp(self.build, other.build) if other.has_build else 1

        return result

    def same_scheme(self, other: "SemanticVersion") -> bool:
        return self.arity == other.arity

    def to_packaging_string(self) -> str:
        s = self.number
        if self.has_tag:
            s += "~" + self.tag.replace("-", "_")
        if self.has_build:
            s += "_" + self.build.replace("-", "_")
        return s

    def __str__(self) -> str:
        s = self.number
        if self.has_tag:
            s += self.tag_separator + self.tag
        if self.has_build:
            s += "+" + self.build
        return s

    @classmethod
    def of(cls, version: str) -> "SemanticVersion":
        """
        Parse a semantic version string.

        Grammars are tried in order: major.minor.patch, major.minor, major.

        Raises:
            ValueError: If the version is blank
            InvalidVersionError: If no grammar matches
        """
        require_non_blank(version, "version")
        v = version.strip()

        for arity, pattern in _PATTERNS:
            m = pattern.fullmatch(v)
            if not m:
                continue

            logger.debug(f"Parsed '{v}' as {arity.value} semantic version")
            groups = m.groups()
            if arity == SemVerArity.FULL:
                major, minor, patch, sep, tag, build = groups
                return cls.of_full(int(major), int(minor), int(patch), tag, build, sep)
            if arity == SemVerArity.MAJOR_MINOR:
                major, minor, sep, tag, build = groups
                return cls.of_major_minor(int(major), int(minor), tag, build, sep)
            major, sep, tag, build = groups
            return cls.of_major(int(major), tag, build, sep)

        raise InvalidVersionError(version)

    @classmethod
    def of_full(
        cls,
        major: int,
        minor: int,
        patch: int,
        tag: Optional[str] = None,
        build: Optional[str] = None,
        separator: Optional[str] = ".",
    ) -> "SemanticVersion":
        _require_not_negative(major=major, minor=minor, patch=patch)
        return cls(major, minor, patch, tag, build, SemVerArity.FULL, separator)

    @classmethod
    def of_major_minor(
        cls,
        major: int,
        minor: int,
        tag: Optional[str] = None,
        build: Optional[str] = None,
        separator: Optional[str] = ".",
    ) -> "SemanticVersion":
        _require_not_negative(major=major, minor=minor)
        return cls(major, minor, None, tag, build, SemVerArity.MAJOR_MINOR, separator)

    @classmethod
    def of_major(
        cls,
        major: int,
        tag: Optional[str] = None,
        build: Optional[str] = None,
        separator: Optional[str] = ".",
    ) -> "SemanticVersion":
        _require_not_negative(major=major)
        return cls(major, None, None, tag, build, SemVerArity.MAJOR, separator)

    @classmethod
    def default_of(cls) -> "SemanticVersion":
        return cls.of("0.0.0")


def _require_not_negative(**components: int) -> None:
    for name, value in components.items():
        if value < 0:
            raise ValueError(f"Argument '{name}' must not be negative")

"""Module versions: a dotted core with optional ``-prerelease`` and ``+build``."""

from dataclasses import dataclass
from typing import Optional

from .exceptions import InvalidVersionError
from .version import (
    Version,
    compare_dotted,
    compare_tokens,
    require_non_blank,
    split_label,
    strip_or_none,
)

_PRERELEASE_DELIMITERS = ".-"
_BUILD_DELIMITERS = ".-+"


def _take(s: str, start: int, delimiters: str) -> str:
    """Characters of ``s`` from ``start`` up to the first delimiter."""
    end = start
    while end < len(s) and s[end] not in delimiters:
        end += 1
    return s[start:end]


@dataclass(frozen=True)
class ModuleVersion(Version):
    version: str
    prerelease: Optional[str] = None
    build: Optional[str] = None

    def __post_init__(self):
        require_non_blank(self.version, "version")
        object.__setattr__(self, "prerelease", strip_or_none(self.prerelease))
        object.__setattr__(self, "build", strip_or_none(self.build))

    @property
    def has_prerelease(self) -> bool:
        return self.prerelease is not None

    @property
    def has_build(self) -> bool:
        return self.build is not None

    def compare_to(self, other: "ModuleVersion") -> int:
        c = compare_dotted(self.version, other.version)
        if c != 0:
            return c
        if self.has_prerelease != other.has_prerelease:
            # release sorts after pre-release
            return -1 if self.has_prerelease else 1
        c = compare_tokens(
            split_label(self.prerelease, _PRERELEASE_DELIMITERS),
            split_label(other.prerelease, _PRERELEASE_DELIMITERS),
        )
        if c != 0:
            return c
        return compare_tokens(
            split_label(self.build, _BUILD_DELIMITERS),
            split_label(other.build, _BUILD_DELIMITERS),
        )

    def same_scheme(self, other: "ModuleVersion") -> bool:
        return (
            self.has_prerelease == other.has_prerelease
            and self.has_build == other.has_build
        )

    def to_packaging_string(self) -> str:
        s = self.version
        if self.has_prerelease:
            s += "~" + self.prerelease.replace("-", "_")
        if self.has_build:
            s += "_" + self.build.replace("-", "_")
        return s

    def __str__(self) -> str:
        s = self.version
        if self.has_prerelease:
            s += "-" + self.prerelease
        if self.has_build:
            s += "+" + self.build
        return s

    @classmethod
    def of(cls, version: str) -> "ModuleVersion":
        """
        Parse a module version string such as ``1.2.3-TAG+456``.

        The core runs up to the first ``-`` or ``+``, the pre-release up to
        the next ``+`` and the build takes the rest. Empty segments are
        dropped, so ``1.0-ea+`` has no build.

        Raises:
            ValueError: If the version is blank
            InvalidVersionError: If the version does not start with a digit
        """
        require_non_blank(version, "version")
        v = version.strip()

        if v[0] not in "0123456789":
            raise InvalidVersionError(version, reason="Version does not start with a digit")

        core = _take(v, 0, "-+")
        prerelease = None
        build = None
        rest = len(core) + 1
        if rest < len(v):
            if v[len(core)] == "-":
                prerelease = _take(v, rest, "+")
                if rest + len(prerelease) + 1 < len(v):
                    build = v[rest + len(prerelease) + 1:]
            else:
                build = v[rest:]

        return cls(core, prerelease, build)

    @classmethod
    def default_of(cls) -> "ModuleVersion":
        return cls.of("0.0.0")

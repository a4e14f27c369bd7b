"""
Runtime versions in the ``feature.interim.update.patch`` style.

Examples: ``17``, ``17.0.1``, ``17.0.1+12``, ``21-ea+35``, ``11.0.2+9-LTS``,
``17.0.1+-custom``. The trailing segment is matched against three grammars in
a fixed order and the first match decides the variant of the value:

- O: ``+-optional``
- PO: ``-prerelease[-optional]``
- PBO: ``[-prerelease]+build[-optional]`` (also used when nothing matches)
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .exceptions import InvalidVersionError
from .version import (
    Version,
    compare_dotted,
    compare_present_first,
    compare_release_first,
    require_non_blank,
    strip_or_none,
)

logger = logging.getLogger(__name__)


class RuntimeVariant(str, Enum):
    """Trailing-segment grammar that matched."""

    PBO = "pbo"
    PO = "po"
    O = "o"  # noqa: E741


_PBO = re.compile(r"(?:\-([a-zA-Z0-9]+))?\+(0|[1-9]\d*)(?:\-([\-a-zA-Z0-9\.]+))?", re.ASCII)
_PO = re.compile(r"\-([a-zA-Z0-9]+)(?:\-([-a-zA-Z0-9.]+))?", re.ASCII)
_O = re.compile(r"\+\-([-a-zA-Z0-9.]+)", re.ASCII)


def _take_core(version: str) -> str:
    for i, c in enumerate(version):
        if c in "-+":
            return version[:i]
    return version


def _component(version: str, index: int) -> int:
    parts = version.split(".")
    return int(parts[index]) if len(parts) > index else 0


@dataclass(frozen=True)
class RuntimeVersion(Version):
    """
    A runtime version value.

    Attributes:
        version: Dotted numeric core
        prerelease: Pre-release identifier
        build: Build number
        optional: Optional build information
        variant: Trailing-segment grammar that produced the value
    """

    version: str
    prerelease: Optional[str] = None
    build: Optional[str] = None
    optional: Optional[str] = None
    variant: RuntimeVariant = RuntimeVariant.PBO

    def __post_init__(self):
        require_non_blank(self.version, "version")
        object.__setattr__(self, "prerelease", strip_or_none(self.prerelease))
        object.__setattr__(self, "build", strip_or_none(self.build))
        object.__setattr__(self, "optional", strip_or_none(self.optional))

    @property
    def feature(self) -> int:
        return _component(self.version, 0)

    @property
    def interim(self) -> int:
        return _component(self.version, 1)

    @property
    def update(self) -> int:
        return _component(self.version, 2)

    @property
    def patch(self) -> int:
        return _component(self.version, 3)

    @property
    def has_prerelease(self) -> bool:
        return self.prerelease is not None

    @property
    def has_build(self) -> bool:
        return self.build is not None

    @property
    def has_optional(self) -> bool:
        return self.optional is not None

    def _optional_only(self) -> bool:
        return not self.has_prerelease and not self.has_build and self.has_optional

    def compare_to(self, other: "RuntimeVersion") -> int:
        c = compare_dotted(self.version, other.version)
        if c != 0:
            return c
        c = compare_release_first(self.prerelease, other.prerelease)
        if c != 0:
            return c
        c = compare_present_first(self.build, other.build)
        if c != 0:
            return c
        return compare_present_first(self.optional, other.optional)

    def same_scheme(self, other: "RuntimeVersion") -> bool:
        return self.variant == other.variant

    def to_packaging_string(self) -> str:
        s = self.version
        if self._optional_only():
            return s + "~" + self.optional.replace("-", "_")
        if self.has_prerelease:
            s += "~" + self.prerelease.replace("-", "_")
        if self.has_build:
            s += "_" + self.build.replace("-", "_")
        if self.has_optional:
            s += "_" + self.optional.replace("-", "_")
        return s

    def __str__(self) -> str:
        s = self.version
        if self._optional_only():
            return s + "+-" + self.optional
        if self.has_prerelease:
            s += "-" + self.prerelease
        if self.has_build:
            s += "+" + self.build
        if self.has_optional:
            s += "-" + self.optional
        return s

    @classmethod
    def of(cls, version: str) -> "RuntimeVersion":
        """
        Parse a runtime version string.

        Raises:
            ValueError: If the version is blank
            InvalidVersionError: If the version does not start with a digit
        """
        require_non_blank(version, "version")
        if not ("0" <= version[0] <= "9"):
            raise InvalidVersionError(version, reason="Version does not start with a digit")

        core = _take_core(version)
        if len(core) + 1 < len(version):
            rest = version[len(core):]

            m = _O.fullmatch(rest)
            if m:
                logger.debug(f"Runtime version '{version}' matched the optional-only grammar")
                return cls(core, optional=m.group(1), variant=RuntimeVariant.O)

            m = _PO.fullmatch(rest)
            if m:
                logger.debug(f"Runtime version '{version}' matched the pre-release grammar")
                return cls(core, prerelease=m.group(1), optional=m.group(2), variant=RuntimeVariant.PO)

            m = _PBO.fullmatch(rest)
            if m:
                return cls(core, m.group(1), m.group(2), m.group(3), RuntimeVariant.PBO)

        return cls(core, variant=RuntimeVariant.PBO)

    @classmethod
    def of_parts(
        cls,
        version: str,
        prerelease: Optional[str] = None,
        build: Optional[str] = None,
        optional: Optional[str] = None,
    ) -> "RuntimeVersion":
        return cls(version, prerelease, build, optional, RuntimeVariant.PBO)

    @classmethod
    def default_of(cls) -> "RuntimeVersion":
        return cls.of("0.0.0")

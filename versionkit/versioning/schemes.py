"""
Scheme dispatch: turn a scheme tag and a raw string into a Version.

This is the entry point used by configuration and tag resolution. The set of
schemes is closed; every scheme is listed in :class:`VersionScheme`.
"""

from enum import Enum
from typing import Optional, Union

from .calver import CalVer
from .chronver import ChronVer
from .custom import CustomVersion
from .module import ModuleVersion
from .runtime import RuntimeVersion
from .semver import SemanticVersion
from .version import Version, cmp, require_non_blank


class VersionScheme(str, Enum):
    """Supported version schemes."""

    SEMVER = "semver"
    CALVER = "calver"
    CHRONVER = "chronver"
    JAVA_RUNTIME = "java_runtime"
    JAVA_MODULE = "java_module"
    CUSTOM = "custom"

    @classmethod
    def of(cls, tag: Union[str, "VersionScheme"]) -> "VersionScheme":
        """
        Resolve a scheme tag, ignoring ASCII case and accepting ``-`` for ``_``.

        Raises:
            ValueError: If the tag names no known scheme
        """
        if isinstance(tag, cls):
            return tag
        require_non_blank(tag, "scheme")
        normalized = tag.strip().lower().replace("-", "_")
        try:
            return cls(normalized)
        except ValueError:
            supported = ", ".join(s.value for s in cls)
            raise ValueError(
                f"Unknown version scheme '{tag}'. Supported schemes: {supported}"
            ) from None

    @property
    def requires_format(self) -> bool:
        return self is VersionScheme.CALVER


def _require_format(format: Optional[str]) -> str:
    return require_non_blank(format, "format")


def parse_version(
    scheme: Union[str, VersionScheme], version: str, format: Optional[str] = None
) -> Version:
    """
    Parse a version string under the given scheme.

    Args:
        scheme: Scheme tag or VersionScheme member
        version: Raw version string
        format: CalVer format string, ignored by the other schemes

    Returns:
        The parsed version

    Raises:
        ValueError: If the scheme is unknown or a required argument is blank
        InvalidVersionError: If the version does not match the scheme
        InvalidFormatError: If the CalVer format is illegal
    """
    s = VersionScheme.of(scheme)
    if s is VersionScheme.SEMVER:
        return SemanticVersion.of(version)
    if s is VersionScheme.CALVER:
        return CalVer.of(_require_format(format), version)
    if s is VersionScheme.CHRONVER:
        return ChronVer.of(version)
    if s is VersionScheme.JAVA_RUNTIME:
        return RuntimeVersion.of(version)
    if s is VersionScheme.JAVA_MODULE:
        return ModuleVersion.of(version)
    return CustomVersion.of(version)


def default_version(
    scheme: Union[str, VersionScheme], format: Optional[str] = None
) -> Version:
    """
    Return the baseline version of a scheme.

    CalVer needs the format string; the other schemes use a fixed default.
    """
    s = VersionScheme.of(scheme)
    if s is VersionScheme.SEMVER:
        return SemanticVersion.default_of()
    if s is VersionScheme.CALVER:
        return CalVer.default_of(_require_format(format))
    if s is VersionScheme.CHRONVER:
        return ChronVer.default_of()
    if s is VersionScheme.JAVA_RUNTIME:
        return RuntimeVersion.default_of()
    if s is VersionScheme.JAVA_MODULE:
        return ModuleVersion.default_of()
    return CustomVersion.default_of()


def compare_versions(version1: Version, version2: Version) -> int:
    """
    Compare two versions of the same scheme.

    Returns:
        -1 if version1 < version2
         0 if version1 == version2
         1 if version1 > version2

    Raises:
        TypeError: If the versions belong to different schemes
    """
    if type(version1) is not type(version2):
        raise TypeError(
            f"Can not compare {type(version1).__name__} with {type(version2).__name__}"
        )
    return cmp(version1.compare_to(version2), 0)

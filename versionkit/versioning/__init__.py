"""
Versioning module for versionkit.

Every version scheme lives here, behind one contract, so that callers parse,
compare and render versions without knowing which scheme a project uses.

ARCHITECTURAL LAYERS:
====================

1. **Version Contract** (version.py):
   - Version: abstract base with ``compare_to``, ``same_scheme``,
     ``to_packaging_string`` and ``__str__``. Ordering operators derive
     from ``compare_to`` and refuse to mix schemes.
   - Shared helpers for blank checks and optional label ordering

2. **Schemes**:
   - SemanticVersion (semver.py): ``MAJOR[.MINOR[.PATCH]][(-|.)TAG][+BUILD]``
   - CalVer (calver.py): calendar versions driven by a format string such
     as ``YYYY.0M.MICRO``. Formats are validated and compiled once.
   - ChronVer (chronver.py): ``YYYY.MM.DD[.changeset]``
   - RuntimeVersion (runtime.py): ``$VNUM(-$PRE)?(\\+($BUILD)?(-$OPT)?)?``
   - ModuleVersion (module.py): dotted core with ``-pre`` and ``+build``
   - CustomVersion (custom.py): opaque strings ordered lexically

3. **Dispatch** (schemes.py):
   - VersionScheme: the closed set of scheme tags
   - parse_version / default_version / compare_versions

4. **Integration helpers**:
   - tags.py: extract a version from a git tag name using a tag template,
     falling back to the scheme default
   - properties.py: named values for template rendering

5. **Exception Hierarchy** (exceptions.py):
   - VersioningError and its subclasses. Parse errors are also ValueErrors.

DESIGN PRINCIPLES:
=================

- Values are immutable. Parsing either returns a fully valid value or raises.
- Equality is structural; ``compare_to`` may report 0 for values that are
  not equal (e.g. runtime ``17.0.1`` and ``17.0.1.0``).
- Versions of different schemes are never ordered against each other.
"""

from .calver import CalVer
from .chronver import Changeset, ChronVer
from .custom import CustomVersion
from .exceptions import (
    InvalidFormatError,
    InvalidVersionError,
    VersioningConfigError,
    VersioningError,
)
from .module import ModuleVersion
from .properties import version_properties
from .runtime import RuntimeVariant, RuntimeVersion
from .schemes import VersionScheme, compare_versions, default_version, parse_version
from .semver import SemanticVersion, SemVerArity
from .tags import clear_unparseable_tags, resolve_version_pattern, version_from_tag
from .version import Version

__all__ = [
    # Contract
    "Version",
    # Schemes
    "CalVer",
    "Changeset",
    "ChronVer",
    "CustomVersion",
    "ModuleVersion",
    "RuntimeVariant",
    "RuntimeVersion",
    "SemanticVersion",
    "SemVerArity",
    # Dispatch
    "VersionScheme",
    "parse_version",
    "default_version",
    "compare_versions",
    # Integration helpers
    "resolve_version_pattern",
    "version_from_tag",
    "clear_unparseable_tags",
    "version_properties",
    # Exceptions
    "VersioningError",
    "InvalidVersionError",
    "InvalidFormatError",
    "VersioningConfigError",
]

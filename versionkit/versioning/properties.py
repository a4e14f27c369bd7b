"""Named values derived from a version, ready to feed a template renderer."""

import json
from typing import Any, Dict, Optional

import yaml

from versionkit.constants import (
    KEY_VERSION_BUILD,
    KEY_VERSION_DAY,
    KEY_VERSION_MAJOR,
    KEY_VERSION_MICRO,
    KEY_VERSION_MINOR,
    KEY_VERSION_MODIFIER,
    KEY_VERSION_MONTH,
    KEY_VERSION_NUMBER,
    KEY_VERSION_NUMBER_WITH_DASHES,
    KEY_VERSION_NUMBER_WITH_UNDERSCORES,
    KEY_VERSION_OPTIONAL,
    KEY_VERSION_PATCH,
    KEY_VERSION_PRERELEASE,
    KEY_VERSION_TAG,
    KEY_VERSION_WEEK,
    KEY_VERSION_WITH_DASHES,
    KEY_VERSION_WITH_UNDERSCORES,
    KEY_VERSION_YEAR,
)

from .calver import CalVer
from .chronver import ChronVer
from .module import ModuleVersion
from .runtime import RuntimeVersion
from .semver import SemanticVersion
from .version import Version


def underscore(value: str) -> str:
    return value.replace(".", "_").replace("-", "_").replace("+", "_")


def dash(value: str) -> str:
    return value.replace(".", "-").replace("_", "-").replace("+", "-")


def _put(props: Dict[str, Any], key: str, value: Any) -> None:
    if value is not None:
        props[key] = value


def _semver_properties(version: SemanticVersion, props: Dict[str, Any]) -> None:
    props[KEY_VERSION_NUMBER] = version.number
    props[KEY_VERSION_MAJOR] = version.major
    _put(props, KEY_VERSION_MINOR, version.minor)
    _put(props, KEY_VERSION_PATCH, version.patch)
    _put(props, KEY_VERSION_TAG, version.tag)
    _put(props, KEY_VERSION_BUILD, version.build)


def _runtime_properties(version: RuntimeVersion, props: Dict[str, Any]) -> None:
    props[KEY_VERSION_NUMBER] = version.version
    _put(props, KEY_VERSION_PRERELEASE, version.prerelease)
    _put(props, KEY_VERSION_BUILD, version.build)
    _put(props, KEY_VERSION_OPTIONAL, version.optional)


def _module_properties(version: ModuleVersion, props: Dict[str, Any]) -> None:
    props[KEY_VERSION_NUMBER] = version.version
    _put(props, KEY_VERSION_PRERELEASE, version.prerelease)
    _put(props, KEY_VERSION_BUILD, version.build)


def _calver_properties(version: CalVer, raw: str, props: Dict[str, Any]) -> None:
    props[KEY_VERSION_NUMBER] = raw
    _put(props, KEY_VERSION_YEAR, version.year)
    _put(props, KEY_VERSION_MONTH, version.month)
    _put(props, KEY_VERSION_DAY, version.day)
    _put(props, KEY_VERSION_WEEK, version.week)
    _put(props, KEY_VERSION_MINOR, version.minor)
    _put(props, KEY_VERSION_MICRO, version.micro)
    _put(props, KEY_VERSION_MODIFIER, version.modifier)


def _chronver_properties(version: ChronVer, raw: str, props: Dict[str, Any]) -> None:
    props[KEY_VERSION_NUMBER] = raw
    props[KEY_VERSION_YEAR] = version.year
    props[KEY_VERSION_MONTH] = version.month
    props[KEY_VERSION_DAY] = version.day
    if version.has_changeset:
        props[KEY_VERSION_MODIFIER] = str(version.changeset)


def version_properties(version: Version, raw: Optional[str] = None) -> Dict[str, Any]:
    """
    Collect the template properties of a version.

    Args:
        version: Parsed version
        raw: The string the version was parsed from. Defaults to the
            version's native rendering.

    Returns:
        Mapping of property names to values. Component keys are present only
        when the version has that component.
    """
    raw = str(version) if raw is None else raw.strip()
    props: Dict[str, Any] = {}

    if isinstance(version, SemanticVersion):
        _semver_properties(version, props)
    elif isinstance(version, RuntimeVersion):
        _runtime_properties(version, props)
    elif isinstance(version, ModuleVersion):
        _module_properties(version, props)
    elif isinstance(version, CalVer):
        _calver_properties(version, raw, props)
    elif isinstance(version, ChronVer):
        _chronver_properties(version, raw, props)
    else:
        props[KEY_VERSION_NUMBER] = raw

    number = str(props[KEY_VERSION_NUMBER])
    props[KEY_VERSION_WITH_UNDERSCORES] = underscore(raw)
    props[KEY_VERSION_WITH_DASHES] = dash(raw)
    props[KEY_VERSION_NUMBER_WITH_UNDERSCORES] = underscore(number)
    props[KEY_VERSION_NUMBER_WITH_DASHES] = dash(number)
    return props


def format_properties(props: Dict[str, Any], format_type: str) -> str:
    """Render properties as ``json`` or ``yaml``."""
    if format_type.lower() == "json":
        return json.dumps(props, indent=2)
    if format_type.lower() == "yaml":
        return yaml.safe_dump(props, default_flow_style=False, sort_keys=False)
    raise ValueError(f"Unsupported output format: {format_type}")

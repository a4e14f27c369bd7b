"""Resolve versions from git tag names using a tag template."""

import logging
import re
import threading
from typing import Optional, Set, Union

from .custom import CustomVersion
from .schemes import VersionScheme, default_version, parse_version
from .version import Version, is_blank

logger = logging.getLogger(__name__)

_PLACEHOLDER = re.compile(r"\{\{.*\}\}")
_ANY = "(.*)"


class UnparseableTags(threading.local):
    """Per-thread record of tags that already produced a warning."""

    def __init__(self):
        self.tags: Set[str] = set()

    def clear(self) -> None:
        self.tags.clear()

    def unparseable(self, tag: str, error: Exception) -> None:
        if tag in self.tags:
            return
        self.tags.add(tag)
        logger.warning(f"Tag '{tag}' can not be parsed as a version: {error}")


_unparseable_tags = UnparseableTags()


def clear_unparseable_tags() -> None:
    """Forget which tags were already reported as unparseable."""
    _unparseable_tags.clear()


def resolve_version_pattern(tag_template: str) -> "re.Pattern[str]":
    """
    Turn a tag template into a pattern whose first group captures the version.

    ``v{{projectVersion}}`` becomes ``v(.*)``. A template without a
    placeholder matches the whole tag.
    """
    if "{{" not in tag_template:
        return re.compile(_ANY)
    return re.compile(_PLACEHOLDER.sub(lambda _: _ANY, tag_template))


def _try_parse(
    scheme: VersionScheme, tag: str, format: Optional[str]
) -> Optional[Version]:
    try:
        return parse_version(scheme, tag, format)
    except ValueError as e:
        _unparseable_tags.unparseable(tag, e)
        return None


def version_from_tag(
    scheme: Union[str, VersionScheme],
    tag_name: str,
    pattern: "re.Pattern[str]",
    format: Optional[str] = None,
    strict: bool = False,
) -> Version:
    """
    Extract the version carried by a tag name.

    Args:
        scheme: Version scheme of the project
        tag_name: Tag name, e.g. ``v1.2.3``
        pattern: Pattern from :func:`resolve_version_pattern`
        format: CalVer format string
        strict: When False, a tag starting with ``v`` is retried without it

    Returns:
        The parsed version, or the scheme's default version when the tag
        does not carry a parseable version
    """
    s = VersionScheme.of(scheme)
    matcher = pattern.fullmatch(tag_name)

    if s is VersionScheme.CUSTOM:
        if matcher and not is_blank(matcher.group(1)):
            return CustomVersion.of(matcher.group(1))
        return CustomVersion.default_of()

    if matcher:
        version = _try_parse(s, matcher.group(1), format)
        if version is not None:
            return version

    if not strict and tag_name.startswith("v"):
        logger.debug(f"Retrying tag '{tag_name}' without leading 'v'")
        version = _try_parse(s, tag_name[1:], format)
        if version is not None:
            return version

    return default_version(s, format)

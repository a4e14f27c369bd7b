"""Versioning settings: which scheme a project uses and how its tags look."""

import logging
import os
import re
from typing import Any, Dict, Mapping, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from versionkit.constants import (
    DEFAULT_TAG_NAME,
    ENV_STRICT,
    ENV_TAG_NAME,
    ENV_VERSION_PATTERN,
)
from versionkit.versioning.calver import compile_format
from versionkit.versioning.exceptions import VersioningConfigError
from versionkit.versioning.schemes import VersionScheme, default_version, parse_version
from versionkit.versioning.tags import resolve_version_pattern, version_from_tag
from versionkit.versioning.version import Version, is_blank, strip_or_none

logger = logging.getLogger(__name__)


def split_pattern(spec: str) -> Dict[str, Optional[str]]:
    """Split the compact ``TYPE[:format]`` form into its fields."""
    if is_blank(spec):
        raise ValueError("Version pattern must not be blank")
    scheme, _, format = spec.strip().partition(":")
    return {"type": scheme, "format": strip_or_none(format)}


class VersionPattern(BaseModel):
    """A version scheme plus the format string CalVer needs."""

    type: VersionScheme = Field(VersionScheme.SEMVER, description="Version scheme")
    format: Optional[str] = Field(None, description="Format string (calver only)")

    @field_validator("type", mode="before")
    @classmethod
    def validate_type(cls, v: Any) -> Any:
        if isinstance(v, str):
            return VersionScheme.of(v)
        return v

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: Optional[str]) -> Optional[str]:
        return strip_or_none(v)

    @model_validator(mode="after")
    def validate_calver_format(self) -> "VersionPattern":
        if self.type is VersionScheme.CALVER:
            if self.format is None:
                raise ValueError("A calver version pattern requires a format")
            compile_format(self.format)
        return self

    @classmethod
    def of(cls, spec: str) -> "VersionPattern":
        """Build a pattern from ``semver`` or ``calver:YYYY.0M.MICRO``."""
        return cls(**split_pattern(spec))

    def parse(self, version: str) -> Version:
        return parse_version(self.type, version, self.format)

    def default(self) -> Version:
        return default_version(self.type, self.format)

    def __str__(self) -> str:
        if self.format:
            return f"{self.type.value}:{self.format}"
        return self.type.value


class VersioningSettings(BaseModel):
    """Project versioning settings."""

    version_pattern: VersionPattern = Field(
        default_factory=VersionPattern, description="Scheme and optional format"
    )
    tag_name: str = Field(DEFAULT_TAG_NAME, description="Tag template")
    strict: bool = Field(
        False, description="Do not retry tags without their leading 'v'"
    )

    @field_validator("version_pattern", mode="before")
    @classmethod
    def validate_version_pattern(cls, v: Any) -> Any:
        if isinstance(v, str):
            return split_pattern(v)
        return v

    @field_validator("tag_name")
    @classmethod
    def validate_tag_name(cls, v: str) -> str:
        if is_blank(v):
            raise ValueError("must be a non-empty string")
        return v.strip()

    @property
    def tag_pattern(self) -> "re.Pattern[str]":
        return resolve_version_pattern(self.tag_name)

    def version_from_tag(self, tag: str) -> Version:
        """Resolve the version carried by a tag name."""
        return version_from_tag(
            self.version_pattern.type,
            tag,
            self.tag_pattern,
            self.version_pattern.format,
            self.strict,
        )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "VersioningSettings":
        """
        Create settings from a plain mapping.

        Raises:
            VersioningConfigError: If a setting fails validation
        """
        try:
            return cls(**dict(data))
        except ValidationError as e:
            raise _to_config_error(e) from e

    @classmethod
    def from_yaml(cls, content: str) -> "VersioningSettings":
        """
        Create settings from YAML content.

        Raises:
            VersioningConfigError: If the content is not a YAML mapping or a
                setting fails validation
        """
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise VersioningConfigError("<root>", f"Invalid YAML: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise VersioningConfigError("<root>", "expected a mapping")
        return cls.from_mapping(data)

    @classmethod
    def from_env(
        cls, environ: Optional[Mapping[str, str]] = None
    ) -> "VersioningSettings":
        """Create settings from ``VERSIONKIT_*`` environment variables over defaults."""
        env = os.environ if environ is None else environ
        data: Dict[str, Any] = {}
        for key, var in (
            ("version_pattern", ENV_VERSION_PATTERN),
            ("tag_name", ENV_TAG_NAME),
            ("strict", ENV_STRICT),
        ):
            value = env.get(var)
            if not is_blank(value):
                logger.debug(f"Using {var}={value}")
                data[key] = value.strip()
        return cls.from_mapping(data)


def _to_config_error(error: ValidationError) -> VersioningConfigError:
    details = error.errors()
    if not details:
        return VersioningConfigError("<root>", str(error))
    first = details[0]
    field = ".".join(str(part) for part in first.get("loc", ())) or "<root>"
    return VersioningConfigError(field, first.get("msg", str(error)))

"""
Exception classes for the versioning module.
"""

from typing import Optional


class VersioningError(Exception):
    """Base exception for all versioning-related errors."""

    pass


class InvalidVersionError(VersioningError, ValueError):
    """Raised when a version string does not match its scheme."""

    def __init__(
        self,
        version_string: str,
        format: Optional[str] = None,
        reason: Optional[str] = None,
    ):
        self.version_string = version_string
        self.format = format
        self.reason = reason
        message = f"Invalid version: '{version_string}'"
        if format:
            message += f" does not match format '{format}'"
        if reason:
            message += f". {reason}"
        super().__init__(message)


class InvalidFormatError(VersioningError, ValueError):
    """Raised when a CalVer format string is structurally illegal."""

    def __init__(self, format: str, reason: str):
        self.format = format
        self.reason = reason
        super().__init__(f"Invalid format '{format}': {reason}")


class VersioningConfigError(VersioningError):
    """Raised when versioning settings fail validation."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"Invalid versioning setting '{field}': {message}")

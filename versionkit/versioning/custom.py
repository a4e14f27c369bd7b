"""Opaque versions that are only ordered as plain strings."""

from dataclasses import dataclass

from .exceptions import InvalidVersionError
from .version import Version, cmp, is_blank


@dataclass(frozen=True)
class CustomVersion(Version):
    """Any non-blank text, compared lexicographically."""

    raw: str

    def __post_init__(self):
        if is_blank(self.raw):
            raise InvalidVersionError(self.raw or "", reason="Version must not be blank")

    def compare_to(self, other: "CustomVersion") -> int:
        return cmp(self.raw, other.raw)

    def same_scheme(self, other: "CustomVersion") -> bool:
        return True

    def to_packaging_string(self) -> str:
        return self.raw.replace("-", "_")

    def __str__(self) -> str:
        return self.raw

    @classmethod
    def of(cls, version: str) -> "CustomVersion":
        return cls(version)

    @classmethod
    def default_of(cls) -> "CustomVersion":
        return cls("0.0.0")

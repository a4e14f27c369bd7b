from typing import Final

# Tag template used when none is configured
DEFAULT_TAG_NAME: Final[str] = "v{{projectVersion}}"

# Environment variables read by VersioningSettings.from_env
ENV_PREFIX: Final[str] = "VERSIONKIT_"
ENV_VERSION_PATTERN: Final[str] = ENV_PREFIX + "VERSION_PATTERN"
ENV_TAG_NAME: Final[str] = ENV_PREFIX + "TAG_NAME"
ENV_STRICT: Final[str] = ENV_PREFIX + "STRICT"

# Template property keys
KEY_VERSION_MAJOR: Final[str] = "versionMajor"
KEY_VERSION_MINOR: Final[str] = "versionMinor"
KEY_VERSION_PATCH: Final[str] = "versionPatch"
KEY_VERSION_TAG: Final[str] = "versionTag"
KEY_VERSION_NUMBER: Final[str] = "versionNumber"
KEY_VERSION_PRERELEASE: Final[str] = "versionPrerelease"
KEY_VERSION_BUILD: Final[str] = "versionBuild"
KEY_VERSION_OPTIONAL: Final[str] = "versionOptional"
KEY_VERSION_YEAR: Final[str] = "versionYear"
KEY_VERSION_MONTH: Final[str] = "versionMonth"
KEY_VERSION_DAY: Final[str] = "versionDay"
KEY_VERSION_WEEK: Final[str] = "versionWeek"
KEY_VERSION_MICRO: Final[str] = "versionMicro"
KEY_VERSION_MODIFIER: Final[str] = "versionModifier"
KEY_VERSION_WITH_UNDERSCORES: Final[str] = "versionWithUnderscores"
KEY_VERSION_WITH_DASHES: Final[str] = "versionWithDashes"
KEY_VERSION_NUMBER_WITH_UNDERSCORES: Final[str] = "versionNumberWithUnderscores"
KEY_VERSION_NUMBER_WITH_DASHES: Final[str] = "versionNumberWithDashes"

"""Tests for resolving versions from tag names."""

import pytest

from versionkit.versioning import (
    CalVer,
    clear_unparseable_tags,
    resolve_version_pattern,
    version_from_tag,
)


@pytest.mark.short
class TestResolveVersionPattern:
    """Test turning tag templates into patterns."""

    @pytest.mark.parametrize(
        "template,expected",
        [
            ("v{{projectVersion}}", "v(.*)"),
            ("release-{{projectVersion}}-final", "release-(.*)-final"),
            ("{{projectVersion}}", "(.*)"),
            ("latest", "(.*)"),
        ],
    )
    def test_patterns(self, template, expected):
        assert resolve_version_pattern(template).pattern == expected


@pytest.mark.short
class TestVersionFromTag:
    """Test version extraction with fallbacks."""

    def test_matching_tag(self):
        pattern = resolve_version_pattern("v{{projectVersion}}")
        assert str(version_from_tag("semver", "v1.2.3", pattern)) == "1.2.3"

    def test_retry_without_leading_v(self):
        pattern = resolve_version_pattern("{{projectVersion}}")
        assert str(version_from_tag("semver", "v1.2.3", pattern)) == "1.2.3"

    def test_strict_does_not_retry(self):
        pattern = resolve_version_pattern("{{projectVersion}}")
        assert str(version_from_tag("semver", "v1.2.3", pattern, strict=True)) == "0.0.0"

    def test_non_matching_tag_uses_default(self):
        pattern = resolve_version_pattern("v{{projectVersion}}")
        assert str(version_from_tag("semver", "release-1.0", pattern)) == "0.0.0"
        assert str(version_from_tag("chronver", "nightly", pattern)) == "2000.01.01"

    def test_calver(self):
        pattern = resolve_version_pattern("release-{{projectVersion}}")
        v = version_from_tag("calver", "release-2024.03.5", pattern, "YYYY.0M.MICRO")
        assert isinstance(v, CalVer)
        assert str(v) == "2024.03.5"

    def test_calver_default(self):
        pattern = resolve_version_pattern("v{{projectVersion}}")
        v = version_from_tag("calver", "vlatest", pattern, "YYYY.0M.MICRO")
        assert str(v) == "2000.01.0"

    def test_java_runtime(self):
        pattern = resolve_version_pattern("jdk-{{projectVersion}}")
        assert str(version_from_tag("java_runtime", "jdk-21-ea+35", pattern)) == "21-ea+35"

    def test_custom_uses_match(self):
        pattern = resolve_version_pattern("v{{projectVersion}}")
        assert str(version_from_tag("custom", "vnightly-1", pattern)) == "nightly-1"

    def test_custom_never_retries(self):
        pattern = resolve_version_pattern("{{projectVersion}}")
        assert str(version_from_tag("custom", "v1", pattern)) == "v1"

    def test_custom_default(self):
        pattern = resolve_version_pattern("v{{projectVersion}}")
        assert str(version_from_tag("custom", "nightly", pattern)) == "0.0.0"
        assert str(version_from_tag("custom", "v", pattern)) == "0.0.0"


@pytest.mark.short
class TestUnparseableTags:
    """Test that unparseable tags are reported once."""

    def test_warning_logged_once(self, capture_logs):
        pattern = resolve_version_pattern("v{{projectVersion}}")
        version_from_tag("semver", "vbad", pattern)
        version_from_tag("semver", "vbad", pattern)

        assert capture_logs.getvalue().count("Tag 'bad' can not be parsed") == 1

    def test_clear_reports_again(self, capture_logs):
        pattern = resolve_version_pattern("v{{projectVersion}}")
        version_from_tag("semver", "vbad", pattern)
        clear_unparseable_tags()
        version_from_tag("semver", "vbad", pattern)

        assert capture_logs.getvalue().count("Tag 'bad' can not be parsed") == 2

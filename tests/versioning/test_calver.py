"""
Tests for calendar versions and the format compiler.

All tests in this file are marked as 'short' since they don't require
external dependencies, containers, or network I/O.
"""

import pytest

from versionkit.versioning import CalVer, InvalidFormatError, InvalidVersionError
from versionkit.versioning.calver import compile_format, tokenize_format

FIELDS = ("year", "month", "week", "day", "minor", "micro", "modifier")


@pytest.mark.short
class TestFormatCompiler:
    """Test tokenizing and compiling format strings."""

    def test_components(self):
        tokens = tokenize_format("YYYY.0M.MICRO")
        assert tokens.components == (
            ("YEAR", "YYYY"),
            ("MONTH", "0M"),
            ("MICRO", "MICRO"),
        )

    def test_compiled_pattern(self):
        compiled = compile_format("YYYY.0M.MICRO")
        assert compiled.pattern.pattern == r"^([2-9][0-9]{3})\.(0[1-9]|1[0-2])\.(0|[1-9]\d*)$"
        assert compiled.roles == ("YEAR", "MONTH", "MICRO")

    def test_optional_modifier_group(self):
        compiled = compile_format("YYYY.0M[-MODIFIER]")
        assert compiled.pattern.pattern.endswith(r"(?:-([a-zA-Z\-][0-9a-zA-Z\-]*))?$")
        assert compiled.roles == ("YEAR", "MONTH")

    def test_week_roles(self):
        assert compile_format("YYYY.0W.MINOR").roles == ("YEAR", "WEEK", "MINOR")

    def test_compilation_is_logged(self, capture_logs):
        compile_format("YYYY_WW_MICRO")
        assert "Compiled calver format 'YYYY_WW_MICRO'" in capture_logs.getvalue()

    @pytest.mark.parametrize(
        "format,message",
        [
            ("0M.YYYY", "must start with one of"),
            ("MICRO", "must start with one of"),
            ("YYYY.0M.0W", "month and week"),
            ("YYYY.WW.MM", "week and month"),
            ("YYYY.WW.0D", "week and day"),
            ("YYYY.MICRO.MINOR", "MINOR can not follow MICRO"),
            ("YYYY.MICRO.MICRO", "MICRO may only appear once"),
            ("YYYY.MINOR.MINOR", "MINOR may only appear once"),
        ],
    )
    def test_invalid_formats(self, format, message):
        with pytest.raises(InvalidFormatError, match=message) as exc_info:
            CalVer.of(format, "2024.1.1")
        assert exc_info.value.format == format

    def test_blank_format(self):
        with pytest.raises(ValueError, match="must not be blank"):
            CalVer.of("  ", "2024.1")


@pytest.mark.short
class TestCalVerParsing:
    """Test matching versions against formats."""

    @pytest.mark.parametrize(
        "format,version,expected",
        [
            ("YYYY.0M.MICRO", "2024.03.5", {"year": "2024", "month": "03", "micro": "5"}),
            ("YYYY.MM.DD", "2024.3.15", {"year": "2024", "month": "3", "day": "15"}),
            ("YY.0M.0D", "24.03.15", {"year": "24", "month": "03", "day": "15"}),
            ("0Y.WW", "06.33", {"year": "06", "week": "33"}),
            ("YYYY.0W.MINOR", "2024.07.3", {"year": "2024", "week": "07", "minor": "3"}),
            ("YYYY.MINOR.MICRO", "2024.1.2", {"year": "2024", "minor": "1", "micro": "2"}),
            ("YYYY_0M_0D", "2024_03_15", {"year": "2024", "month": "03", "day": "15"}),
            ("YYYY.0M-MODIFIER", "2024.03-beta", {"year": "2024", "month": "03", "modifier": "beta"}),
            ("YYYY.MODIFIER", "2024.final", {"year": "2024", "modifier": "final"}),
            (
                "YYYY.0M.MINOR[-MODIFIER]",
                "2024.03.1-rc1",
                {"year": "2024", "month": "03", "minor": "1", "modifier": "rc1"},
            ),
            ("YYYY.0M.MINOR[-MODIFIER]", "2024.03.1", {"year": "2024", "month": "03", "minor": "1"}),
        ],
    )
    def test_valid(self, format, version, expected):
        v = CalVer.of(format, version)
        assert v.format == format
        for name in FIELDS:
            assert getattr(v, name) == expected.get(name), name

    def test_integer_views(self):
        v = CalVer.of("YYYY.0M.0D", "2024.03.09")
        assert v.year_as_int == 2024
        assert v.month_as_int == 3
        assert v.day_as_int == 9
        assert v.week_as_int is None

    @pytest.mark.parametrize(
        "format,version",
        [
            ("YYYY.0M.MICRO", "2024.13.5"),  # Month out of range
            ("YYYY.0M.MICRO", "2024.3.5"),  # Missing zero padding
            ("YYYY.0M.MICRO", "2024.03.05"),  # Leading zero in MICRO
            ("YYYY.MICRO", "1999.1"),  # Year before 2000
            ("YYYY.0M-MODIFIER", "2024.03"),  # Required modifier missing
            ("YYYY.WW", "2024.53"),  # Week out of range
        ],
    )
    def test_invalid(self, format, version):
        with pytest.raises(InvalidVersionError, match="does not match format") as exc_info:
            CalVer.of(format, version)
        assert exc_info.value.version_string == version
        assert exc_info.value.format == format

    @pytest.mark.parametrize("version", ["2023.02.29", "2024.02.30", "2024.04.31"])
    def test_day_of_month(self, version):
        with pytest.raises(InvalidVersionError, match="has no day"):
            CalVer.of("YYYY.0M.0D", version)

    def test_leap_day(self):
        assert CalVer.of("YYYY.0M.0D", "2024.02.29").day == "29"

    def test_without_day_token_no_calendar_check(self):
        v = CalVer.of("YYYY.0M.MICRO", "2024.02.30")
        assert v.micro == "30"

    def test_blank_version(self):
        with pytest.raises(ValueError, match="must not be blank"):
            CalVer.of("YYYY.0M", "")


@pytest.mark.short
class TestCalVerComparison:
    """Test calendar version ordering."""

    def test_components(self):
        f = "YYYY.0M.MICRO"
        assert CalVer.of(f, "2024.03.5") < CalVer.of(f, "2024.03.10")
        assert CalVer.of(f, "2024.03.5") < CalVer.of(f, "2024.04.0")
        assert CalVer.of(f, "2025.01.0") > CalVer.of(f, "2024.12.9")
        assert CalVer.of(f, "2024.03.5").compare_to(CalVer.of(f, "2024.03.5")) == 0

    def test_modifiers_compare_lexically(self):
        f = "YYYY.0M.MINOR[-MODIFIER]"
        assert CalVer.of(f, "2024.03.1-alpha") < CalVer.of(f, "2024.03.1-beta")

    def test_modifier_sorts_before_no_modifier(self):
        f = "YYYY.0M.MINOR[-MODIFIER]"
        assert CalVer.of(f, "2024.03.1-rc1").compare_to(CalVer.of(f, "2024.03.1")) < 0

    def test_known_asymmetry_modifier(self):
        """Only the side holding a modifier breaks the tie."""
        f = "YYYY.0M.MINOR[-MODIFIER]"
        release = CalVer.of(f, "2024.03.1")
        candidate = CalVer.of(f, "2024.03.1-rc1")
        assert candidate.compare_to(release) < 0
        assert release.compare_to(candidate) == 0

    def test_known_asymmetry_missing_component(self):
        """A component this side lacks contributes nothing to the comparison."""
        partial = CalVer("YYYY.0M", year="2024")
        full = CalVer.of("YYYY.0M", "2024.03")
        assert partial.compare_to(full) == 0
        assert full.compare_to(partial) > 0

    def test_same_scheme_requires_same_format(self):
        assert CalVer.of("YYYY.0M", "2024.03").same_scheme(CalVer.of("YYYY.0M", "2025.01"))
        assert not CalVer.of("YYYY.0M", "2024.03").same_scheme(CalVer.of("YYYY.MM", "2024.3"))


@pytest.mark.short
class TestCalVerRendering:
    """Test native and packaging renderings."""

    def test_optional_modifier_absent(self):
        assert str(CalVer.of("YYYY.0M.MINOR[-MODIFIER]", "2024.03.1")) == "2024.03.1"

    def test_optional_modifier_present(self):
        v = CalVer.of("YYYY.0M.MINOR[-MODIFIER]", "2024.03.1-rc1")
        assert str(v) == "2024.03.1-rc1"
        assert v.to_packaging_string() == "2024.03.1_rc1"

    @pytest.mark.parametrize(
        "format,version",
        [
            ("YYYY.0M.MICRO", "2024.03.5"),
            ("YYYY.MM.DD", "2024.3.15"),
            ("YY.0M.0D", "24.03.15"),
            ("0Y.WW", "06.33"),
            ("YYYY.MINOR.MICRO", "2024.1.2"),
            ("YYYY_0M_0D", "2024_03_15"),
            ("YYYY.0M-MODIFIER", "2024.03-beta"),
            ("YYYY.0M.MINOR[-MODIFIER]", "2024.03.1-rc1"),
        ],
    )
    def test_round_trip(self, format, version):
        v = CalVer.of(format, version)
        assert str(v) == version
        assert CalVer.of(format, str(v)) == v


@pytest.mark.short
class TestCalVerDefaults:
    """Test the smallest value expressible by a format."""

    @pytest.mark.parametrize(
        "format,expected",
        [
            ("YYYY.0M.MICRO", "2000.01.0"),
            ("YY.0M.0D", "0.01.01"),
            ("0Y.WW", "00.1"),
            ("YYYY.MINOR.MICRO", "2000.0.0"),
            ("YYYY.0M.MINOR[-MODIFIER]", "2000.01.0-A"),
        ],
    )
    def test_default(self, format, expected):
        assert str(CalVer.default_of(format)) == expected

    @pytest.mark.parametrize(
        "format,versions",
        [
            ("YYYY.0M.MICRO", ["2024.03.5", "2000.01.0", "2000.01.1"]),
            ("YY.0M.0D", ["24.03.15", "0.01.02"]),
            ("0Y.WW", ["06.33", "00.2"]),
            ("YYYY.MINOR.MICRO", ["2024.1.2", "2000.0.1"]),
            ("YYYY.0M.MINOR[-MODIFIER]", ["2024.03.1", "2000.01.0", "2000.01.0-B"]),
        ],
    )
    def test_default_sorts_first(self, format, versions):
        default = CalVer.default_of(format)
        for version in versions:
            assert default.compare_to(CalVer.of(format, version)) <= 0, version

    def test_known_edge_case_dash_modifier_sorts_below_default(self):
        # the placeholder modifier "A" sorts after labels starting with "-"
        format = "YYYY.0M-MODIFIER"
        default = CalVer.default_of(format)
        assert str(default) == "2000.01-A"

        dashed = CalVer.of(format, "2000.01--x")
        assert dashed.modifier == "-x"
        assert default.compare_to(dashed) > 0
        assert default.compare_to(CalVer.of(format, "2000.01-a")) < 0

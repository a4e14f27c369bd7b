"""CLI commands for parsing, comparing and inspecting versions."""

from typing import Optional

import click

from versionkit.cli.utils.logging import logger
from versionkit.config import VersionPattern
from versionkit.constants import DEFAULT_TAG_NAME
from versionkit.versioning import (
    VersioningError,
    compare_versions,
    default_version,
    parse_version,
    resolve_version_pattern,
    version_from_tag,
    version_properties,
)
from versionkit.versioning.properties import format_properties

_SYMBOLS = {-1: "<", 0: "=", 1: ">"}

format_option = click.option(
    "--format",
    "-f",
    "format",
    default=None,
    help="Format string, required by the calver scheme (e.g. YYYY.0M.MICRO).",
)


@click.command(name="parse")
@click.argument("scheme")
@click.argument("version")
@format_option
@click.pass_context
def parse(ctx, scheme: str, version: str, format: Optional[str]):
    """Parse VERSION with SCHEME and print its native and packaging forms."""
    try:
        v = parse_version(scheme, version, format)
    except (ValueError, VersioningError) as e:
        logger.error(str(e))
        ctx.exit(1)

    logger.debug(f"Parsed {version} as {v!r}")
    click.echo(str(v))
    click.echo(v.to_packaging_string())


@click.command(name="compare")
@click.argument("scheme")
@click.argument("version1")
@click.argument("version2")
@format_option
@click.pass_context
def compare(ctx, scheme: str, version1: str, version2: str, format: Optional[str]):
    """Compare two versions of SCHEME and print <, = or >."""
    try:
        v1 = parse_version(scheme, version1, format)
        v2 = parse_version(scheme, version2, format)
    except (ValueError, VersioningError) as e:
        logger.error(str(e))
        ctx.exit(1)

    click.echo(_SYMBOLS[compare_versions(v1, v2)])


@click.command(name="default")
@click.argument("scheme")
@format_option
@click.pass_context
def default(ctx, scheme: str, format: Optional[str]):
    """Print the default version of SCHEME."""
    try:
        v = default_version(scheme, format)
    except (ValueError, VersioningError) as e:
        logger.error(str(e))
        ctx.exit(1)

    click.echo(str(v))


@click.command(name="props")
@click.argument("scheme")
@click.argument("version")
@format_option
@click.option(
    "--output",
    "-o",
    type=click.Choice(["json", "yaml"], case_sensitive=False),
    default="yaml",
    help="Output format for the properties.",
)
@click.pass_context
def props(ctx, scheme: str, version: str, format: Optional[str], output: str):
    """Print the template properties of VERSION."""
    try:
        v = parse_version(scheme, version, format)
    except (ValueError, VersioningError) as e:
        logger.error(str(e))
        ctx.exit(1)

    click.echo(format_properties(version_properties(v, version), output))


@click.command(name="tag")
@click.argument("tag_name")
@click.option(
    "--pattern",
    "-p",
    default="semver",
    show_default=True,
    help="Version pattern as TYPE[:format], e.g. calver:YYYY.0M.MICRO.",
)
@click.option(
    "--template",
    "-t",
    default=DEFAULT_TAG_NAME,
    show_default=True,
    help="Tag template, the placeholder marks the version.",
)
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Do not retry tags without their leading 'v'.",
)
@click.pass_context
def tag(ctx, tag_name: str, pattern: str, template: str, strict: bool):
    """Resolve the version carried by TAG_NAME."""
    try:
        vp = VersionPattern.of(pattern)
    except ValueError as e:
        logger.error(f"Invalid version pattern '{pattern}': {e}")
        ctx.exit(1)

    v = version_from_tag(
        vp.type, tag_name, resolve_version_pattern(template), vp.format, strict
    )
    click.echo(str(v))

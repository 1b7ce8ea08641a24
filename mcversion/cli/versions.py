"""CLI commands for parsing, comparing and resolving Minecraft versions."""

import sys
from pathlib import Path
from typing import Optional

import click

from mcversion.cli.utils.logging import logger
from mcversion.config import ConfigAccessor
from mcversion.host import SERVER_SECTION, VERSION_KEY, ConfiguredHost, StaticHost
from mcversion.versioning import (
    CATALOGS,
    KNOWN_VERSIONS,
    NEWEST_KNOWN_VERSION,
    GenerationCatalog,
    MinecraftVersion,
    RuntimeResolver,
    RuntimeVersionError,
    VersionFormatError,
    compare_versions,
)

catalog_option = click.option(
    "--catalog",
    "-c",
    type=click.Choice(sorted(CATALOGS)),
    default="nms",
    show_default=True,
    help="Generation catalog to use.",
)

_SYMBOLS = {-1: "<", 0: "==", 1: ">"}


def _parse_or_exit(text: str) -> MinecraftVersion:
    try:
        return MinecraftVersion(text)
    except VersionFormatError as e:
        logger.error(str(e))
        sys.exit(1)


def _describe_generation(catalog: GenerationCatalog, version: MinecraftVersion):
    generation = catalog.for_minecraft_version(version)
    click.echo(f"{catalog.name}: {generation.name}")
    if generation.is_none:
        logger.debug(f"Minecraft {version} is not registered in {catalog.name}")
        return
    click.echo(f"  nms prefix: {generation.nms_prefix}")
    click.echo(f"  obc prefix: {generation.obc_prefix}")


@click.command("parse")
@click.argument("version")
def parse(version: str):
    """Parse VERSION and show its components."""
    v = _parse_or_exit(version)
    click.echo(str(v))
    click.echo("components: " + " ".join(str(c) for c in v.components))


@click.command("compare")
@click.argument("first")
@click.argument("second")
def compare(first: str, second: str):
    """Compare two versions, treating missing trailing components as zero.

    Example:

      mcv compare 1.21 1.21.0
    """
    v1 = _parse_or_exit(first)
    v2 = _parse_or_exit(second)
    click.echo(f"{v1} {_SYMBOLS[compare_versions(v1, v2)]} {v2}")


@click.command("resolve")
@click.argument("version")
@catalog_option
def resolve(version: str, catalog: str):
    """Resolve VERSION to its generation.

    Only registered versions resolve; anything else is NONE.
    """
    v = _parse_or_exit(version)
    _describe_generation(CATALOGS[catalog], v)


@click.command("known")
def known():
    """List the known Minecraft versions, newest first."""
    for name, version in KNOWN_VERSIONS.items():
        marker = "  (newest)" if version == NEWEST_KNOWN_VERSION else ""
        click.echo(f"{name:<10} {version}{marker}")


@click.command("generations")
@catalog_option
def generations(catalog: str):
    """List the generations of a catalog in release order."""
    selected = CATALOGS[catalog]
    for generation in selected.values():
        if generation.is_none:
            continue
        versions = ", ".join(
            str(v) for v in sorted(selected.member_versions(generation))
        )
        click.echo(f"{generation.name:<14} {versions}")


@click.command("runtime")
@click.option(
    "--server-version",
    "-s",
    type=str,
    default=None,
    help="Version reported by the server. Falls back to the config file.",
    envvar="MCV_SERVER_VERSION",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Configuration file to read [server] minecraft_version from.",
)
@click.option(
    "--save",
    is_flag=True,
    default=False,
    help="Store --server-version in the configuration file for later runs.",
)
def runtime(server_version: Optional[str], config_path: Optional[Path], save: bool):
    """Show the runtime version and its generation in every catalog."""
    config = ConfigAccessor(config_path)
    if server_version is not None:
        host = StaticHost(server_version)
    else:
        if save:
            logger.error("--save requires --server-version")
            sys.exit(1)
        host = ConfiguredHost(config)

    resolver = RuntimeResolver(host)
    try:
        version = resolver.version
    except RuntimeVersionError as e:
        logger.error(str(e))
        sys.exit(1)

    if save:
        config.set(SERVER_SECTION, VERSION_KEY, str(version))
        config.save()
        logger.info(f"Saved Minecraft {version} to {config.config_path}")

    click.echo(f"Minecraft {version}")
    for key in sorted(CATALOGS):
        selected = CATALOGS[key]
        click.echo(f"{selected.name}: {resolver.generation(selected).name}")

"""
Unified CLI entry point for release-mirror using Click.

This module provides the main CLI group and shared options.
"""

import sys
from typing import Optional

import click
from dotenv import find_dotenv, load_dotenv

from . import transfer
from .._version import __version__
from ..utils.constants import ENV_CONFIG


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="release-mirror")
@click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False),
    envvar=ENV_CONFIG,
    help=f"Path to a TOML config file with [storage] and [source] defaults [env: {ENV_CONFIG}]",
)
@click.option(
    "-d",
    "--debug",
    count=True,
    help="Increase verbosity (use -d for INFO, -dd for DEBUG, -ddd for DEBUG with HTTP logs)",
)
@click.pass_context
def cli(ctx: click.Context, config: Optional[str], debug: int) -> None:
    """Release Mirror - Copy GitHub release assets into S3-compatible storage."""
    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["debug"] = debug


cli.add_command(transfer.transfer)


def main() -> None:
    """Main entry point for the CLI."""
    # Values already in the environment take precedence over .env
    load_dotenv(find_dotenv(usecwd=True), override=False)
    try:
        cli()  # pylint: disable=no-value-for-parameter  # Click handles parameters
    except KeyboardInterrupt:
        click.echo("\n\nOperation cancelled by user", err=True)
        sys.exit(130)


__all__ = ["cli", "main"]

"""
Transfer command for the release-mirror CLI.

This module provides the transfer command that copies the assets of a
release into an S3-compatible bucket.
"""

import logging
import sys
from typing import Any, Dict, NoReturn, Optional, Tuple

import click

from ..api import GitHubClient, ObjectStoreClient
from ..exceptions import ReleaseMirrorError
from ..models.context import TransferContext
from ..transfer import TransferPipeline
from ..utils import ConfigManager, setup_logging
from ..utils.constants import (
    ENV_ACCESS_KEY_ID,
    ENV_ACCESS_KEY_SECRET,
    ENV_BUCKET_NAME,
    ENV_DEST,
    ENV_DRY_RUN,
    ENV_ENDPOINT_URL,
    ENV_GITHUB_TOKEN,
    ENV_KEY_POLICY,
    ENV_RELEASE_ID,
    ENV_REPOSITORY,
    KEY_POLICIES,
)
from ..utils.error_handling import describe_error, handle_generic_error, handle_run_error


def _fail(error: Exception) -> NoReturn:
    """Print a single-line error description and exit non-zero."""
    click.echo(f"Error: {describe_error(error)}", err=True)
    sys.exit(1)


def resolve_context(values: Dict[str, Any], config: Optional[str]) -> TransferContext:
    """
    Merge command line values with the config file and validate them.

    Command line and environment values win over the config file.

    Args:
        values: Values from flags and environment variables (None when unset)
        config: Optional path to the TOML config file

    Returns:
        Validated TransferContext

    Raises:
        ConfigurationError: If the merged configuration is invalid
    """
    merged = dict(values)
    if config:
        for field, value in ConfigManager(config).transfer_defaults().items():
            if merged.get(field) is None:
                merged[field] = value
                logging.debug("Using %s from config file %s", field, config)

    return TransferContext.resolve(**{k: v for k, v in merged.items() if v is not None})


@click.command()
@click.option("--bucket-name", envvar=ENV_BUCKET_NAME, help=f"Destination bucket [env: {ENV_BUCKET_NAME}]")
@click.option("--access-key-id", envvar=ENV_ACCESS_KEY_ID, help=f"Object store access key id [env: {ENV_ACCESS_KEY_ID}]")
@click.option(
    "--access-key-secret",
    envvar=ENV_ACCESS_KEY_SECRET,
    help=f"Object store secret access key [env: {ENV_ACCESS_KEY_SECRET}]",
)
@click.option("--endpoint-url", envvar=ENV_ENDPOINT_URL, help=f"Object store endpoint URL [env: {ENV_ENDPOINT_URL}]")
@click.option(
    "--repository",
    envvar=ENV_REPOSITORY,
    help=f"Source repository as owner/name [env: {ENV_REPOSITORY}]",
)
@click.option("--release-id", envvar=ENV_RELEASE_ID, help=f"Numeric release id [env: {ENV_RELEASE_ID}]")
@click.option(
    "--github-token",
    envvar=ENV_GITHUB_TOKEN,
    help=f"Token for the GitHub API (optional) [env: {ENV_GITHUB_TOKEN}]",
)
@click.option(
    "--pattern",
    "patterns",
    multiple=True,
    help="Regular expression selecting assets by name; repeat for several. If not specified, all assets are transferred.",
)
@click.option("--dest", envvar=ENV_DEST, help=f"Destination directory prefix inside the bucket [env: {ENV_DEST}]")
@click.option(
    "--key-policy",
    type=click.Choice(KEY_POLICIES, case_sensitive=False),
    default="flat",
    show_default=True,
    envvar=ENV_KEY_POLICY,
    help="flat: [dest/]name; versioned: [dest/]<version from tag>/name",
)
@click.option(
    "--dry-run",
    is_flag=True,
    default=False,
    envvar=ENV_DRY_RUN,
    help=f"Select assets and derive keys without downloading or uploading [env: {ENV_DRY_RUN}]",
)
@click.pass_context
def transfer(  # pylint: disable=too-many-positional-arguments,too-many-arguments
    ctx: click.Context,
    bucket_name: Optional[str],
    access_key_id: Optional[str],
    access_key_secret: Optional[str],
    endpoint_url: Optional[str],
    repository: Optional[str],
    release_id: Optional[str],
    github_token: Optional[str],
    patterns: Tuple[str, ...],
    dest: Optional[str],
    key_policy: str,
    dry_run: bool,
) -> None:
    """Stream release assets from GitHub into an S3-compatible bucket."""
    config = ctx.obj["config"]
    debug = ctx.obj["debug"]

    setup_logging(debug, use_wrapping=True)

    values = {
        "bucket_name": bucket_name,
        "access_key_id": access_key_id,
        "access_key_secret": access_key_secret,
        "endpoint_url": endpoint_url,
        "repository": repository,
        "release_id": release_id,
        "github_token": github_token,
        "patterns": list(patterns),
        "dest": dest,
        "key_policy": key_policy.lower(),
        "dry_run": dry_run,
        "debug": debug,
    }

    try:
        args = resolve_context(values, config)
    except ReleaseMirrorError as e:
        logging.error("%s", e)
        _fail(e)

    logging.debug(
        "bucket=%s repository=%s release_id=%s endpoint=%s dry_run=%s",
        args.bucket_name,
        args.repository,
        args.release_id,
        args.endpoint_url,
        args.dry_run,
    )

    github_client = None
    store_client = None
    try:
        github_client = GitHubClient(token=args.github_token)
        store_client = ObjectStoreClient(args.endpoint_url, args.access_key_id, args.access_key_secret)

        pipeline = TransferPipeline.from_context(args, github_client, store_client)
        pipeline.run(args.repository_ref, args.release_id)

    except ReleaseMirrorError as e:
        handle_run_error(e, "transfer operation")
        _fail(e)
    except Exception as e:
        handle_generic_error(e, "transfer operation")
        _fail(e)
    finally:
        if github_client is not None:
            github_client.close()
            logging.debug("GitHub client session closed")
        if store_client is not None:
            store_client.close()
            logging.debug("Object store client closed")


__all__ = ["transfer", "resolve_context"]

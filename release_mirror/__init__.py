"""
Release Mirror - Copy GitHub release assets into S3-compatible storage.

This package lists the assets of a GitHub release, selects them by name
pattern, and streams each selected asset straight into a bucket such as
Cloudflare R2 under a key derived from its name.
"""

from ._version import __version__

__author__ = "Release Engineering"

# Import main classes and functions for easy access
from .api import GitHubClient, ObjectStoreClient
from .exceptions import (
    ConfigurationError,
    KeyEncodingError,
    MalformedTagError,
    ReleaseLookupError,
    ReleaseMirrorError,
    StreamOpenError,
    UploadError,
)
from .models import AssetDescriptor, KeyPolicy, TransferContext, TransferReport
from .transfer import TransferPipeline, run_transfer
from .utils import setup_logging
from .cli import main as cli_main, cli as cli_group

__all__ = [
    "__version__",
    "GitHubClient",
    "ObjectStoreClient",
    "ReleaseMirrorError",
    "ConfigurationError",
    "ReleaseLookupError",
    "MalformedTagError",
    "StreamOpenError",
    "UploadError",
    "KeyEncodingError",
    "AssetDescriptor",
    "KeyPolicy",
    "TransferContext",
    "TransferReport",
    "TransferPipeline",
    "run_transfer",
    "setup_logging",
    "cli_main",
    "cli_group",
]

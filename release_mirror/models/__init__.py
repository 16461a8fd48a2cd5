"""
Pydantic models for release-mirror.

This package contains all Pydantic models used in the application:
- base: Shared base model
- assets: Repository, release and asset models
- context: Resolved run configuration
- results: Per-task outcomes and run reports
"""

from .base import MirrorBaseModel
from .assets import AssetDescriptor, ReleaseAssetSet, RepositoryRef, TransferTask
from .context import KeyPolicy, TransferContext
from .results import TransferOutcome, TransferReport, TransferStatus

__all__ = [
    "MirrorBaseModel",
    "AssetDescriptor",
    "ReleaseAssetSet",
    "RepositoryRef",
    "TransferTask",
    "KeyPolicy",
    "TransferContext",
    "TransferOutcome",
    "TransferReport",
    "TransferStatus",
]

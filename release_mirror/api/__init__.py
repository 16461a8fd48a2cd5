"""
Service clients used by the transfer pipeline.

This package provides:
- GitHub client for listing release assets and opening download streams
- Object store client for streaming uploads to S3-compatible storage
"""

from .github_client import GitHubClient
from .object_store import ObjectStoreClient

__all__ = [
    "GitHubClient",
    "ObjectStoreClient",
]

"""
Exception hierarchy for release transfers.

Every failure that ends a run is raised as a subclass of ReleaseMirrorError.
Collaborator exceptions (httpx, botocore) are chained as ``__cause__``.
"""

from typing import Optional


class ReleaseMirrorError(Exception):
    """Base exception for all release-mirror failures."""

    def __init__(self, message: str, asset_name: Optional[str] = None) -> None:
        super().__init__(message)
        self.asset_name = asset_name


class ConfigurationError(ReleaseMirrorError):
    """A required value is missing or empty, or a value is malformed."""


class ReleaseLookupError(ReleaseMirrorError):
    """The release or its asset listing could not be retrieved."""


class MalformedTagError(ReleaseMirrorError):
    """The release tag cannot be split into a version for versioned keys."""


class StreamOpenError(ReleaseMirrorError):
    """The download stream for an asset could not be opened."""


class UploadError(ReleaseMirrorError):
    """The object store rejected or failed the write of an asset."""


class KeyEncodingError(ReleaseMirrorError):
    """A derived key cannot be represented as an object-store key."""


__all__ = [
    "ReleaseMirrorError",
    "ConfigurationError",
    "ReleaseLookupError",
    "MalformedTagError",
    "StreamOpenError",
    "UploadError",
    "KeyEncodingError",
]

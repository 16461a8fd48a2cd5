"""
Collaborator protocols for the transfer pipeline.

This module defines the interfaces the pipeline consumes, so that the
source and sink can be swapped for test doubles without inheritance.
"""

from typing import ContextManager, Iterator, Protocol

from ..models.assets import ReleaseAssetSet, RepositoryRef


class ReadableBody(Protocol):
    """Protocol for a single-pass, file-like request body."""

    def read(self, size: int = -1) -> bytes:
        """Read up to size bytes; an empty result means the body is exhausted."""
        ...


class AssetSource(Protocol):
    """
    Protocol defining the interface of a release-hosting service.
    """

    def list_assets(self, repository: RepositoryRef, release_id: int) -> ReleaseAssetSet:
        """
        List the assets of a release.

        Args:
            repository: Source repository
            release_id: Release identifier

        Returns:
            ReleaseAssetSet with the release tag and ordered assets

        Raises:
            ReleaseLookupError: If the release cannot be retrieved
        """
        ...

    def open_stream(self, repository: RepositoryRef, asset_id: int) -> ContextManager[Iterator[bytes]]:
        """
        Open the byte stream of an asset.

        The stream is released when the returned context manager exits.

        Args:
            repository: Source repository
            asset_id: Asset handle from the listing

        Returns:
            Context manager yielding an iterator of byte chunks

        Raises:
            StreamOpenError: If the stream cannot be opened
        """
        ...


class ObjectSink(Protocol):
    """
    Protocol defining the interface of an object store.
    """

    def put(self, bucket: str, key: str, body: "ReadableBody", length: int) -> None:
        """
        Write an object from a streaming body.

        Args:
            bucket: Destination bucket
            key: Destination key
            body: Readable body consumed exactly once
            length: Declared content length in bytes

        Raises:
            UploadError: If the write fails
        """
        ...


__all__ = ["ReadableBody", "AssetSource", "ObjectSink"]

"""
GitHub client for listing and downloading release assets.

This module provides the asset source used by the transfer pipeline. It
reads release metadata from the GitHub REST API and opens raw download
streams for individual assets.
"""

# Standard library imports
import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional

# Third-party imports
import httpx

# Local imports
from ..exceptions import ReleaseLookupError, StreamOpenError
from ..models.assets import AssetDescriptor, ReleaseAssetSet, RepositoryRef
from ..utils import create_session
from ..utils.constants import (
    ASSETS_PER_PAGE,
    DEFAULT_CHUNK_SIZE,
    DOWNLOAD_TIMEOUT,
    GITHUB_API_URL,
    GITHUB_API_VERSION,
    GITHUB_JSON_MEDIA_TYPE,
    OCTET_STREAM_MEDIA_TYPE,
)

logger = logging.getLogger(__name__)


class GitHubClient:
    """Client for GitHub release metadata and asset downloads."""

    def __init__(
        self,
        token: Optional[str] = None,
        base_url: str = GITHUB_API_URL,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> None:
        """Initialize the GitHub client.

        Args:
            token: Optional personal access token; anonymous access when None
            base_url: GitHub REST API root
            chunk_size: Size of chunks yielded by asset streams
        """
        self.base_url = base_url.rstrip("/")
        self.chunk_size = chunk_size
        self._token = token
        self.session = self._create_session()

    def _create_session(self) -> httpx.Client:
        """Create an httpx client with GitHub API headers.

        Uses the download timeout since asset bodies stream over the same client.
        """
        headers = {
            "Accept": GITHUB_JSON_MEDIA_TYPE,
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
        }
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return create_session(headers=headers, timeout=DOWNLOAD_TIMEOUT, base_url=self.base_url)

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.session.close()

    def __enter__(self) -> "GitHubClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _release_url(self, repository: RepositoryRef, release_id: int) -> str:
        return f"/repos/{repository.owner}/{repository.name}/releases/{release_id}"

    def _get_json(self, url: str, params: Optional[Dict[str, Any]] = None) -> httpx.Response:
        response = self.session.get(url, params=params)
        response.raise_for_status()
        return response

    def _list_asset_pages(self, repository: RepositoryRef, release_id: int) -> List[Dict[str, Any]]:
        """Collect raw asset entries across all pages of the listing."""
        raw_assets: List[Dict[str, Any]] = []
        url: Optional[str] = f"{self._release_url(repository, release_id)}/assets"
        params: Optional[Dict[str, Any]] = {"per_page": ASSETS_PER_PAGE}

        while url:
            response = self._get_json(url, params=params)
            raw_assets.extend(response.json())
            # The next link already carries the query string
            url = response.links.get("next", {}).get("url")
            params = None

        return raw_assets

    def list_assets(self, repository: RepositoryRef, release_id: int) -> ReleaseAssetSet:
        """List the assets of a release in the order GitHub returns them.

        Args:
            repository: Source repository
            release_id: Numeric release identifier

        Returns:
            ReleaseAssetSet with the release tag and assets

        Raises:
            ReleaseLookupError: If the release or its assets cannot be retrieved
        """
        logger.debug("Fetching release %s of %s", release_id, repository)
        try:
            release = self._get_json(self._release_url(repository, release_id)).json()
            raw_assets = self._list_asset_pages(repository, release_id)
        except httpx.HTTPError as e:
            raise ReleaseLookupError(f"Unable to get release {release_id} of {repository}: {e}") from e
        except ValueError as e:
            raise ReleaseLookupError(f"Invalid release data for release {release_id} of {repository}: {e}") from e

        try:
            assets = [
                AssetDescriptor(
                    id=raw["id"],
                    name=raw["name"],
                    size=raw["size"],
                    content_type=raw.get("content_type"),
                )
                for raw in raw_assets
            ]
            asset_set = ReleaseAssetSet(release_id=release_id, tag_name=release["tag_name"], assets=assets)
        except (KeyError, TypeError, ValueError) as e:
            raise ReleaseLookupError(f"Invalid release data for release {release_id} of {repository}: {e}") from e

        logger.info("Found %d asset(s) on release %s (%s)", len(asset_set), release_id, asset_set.tag_name)
        return asset_set

    @contextmanager
    def open_stream(self, repository: RepositoryRef, asset_id: int) -> Iterator[Iterator[bytes]]:
        """Open a raw download stream for an asset.

        Redirects to the storage backend are followed; the authorization
        header is dropped by httpx when the redirect leaves the API host.

        Args:
            repository: Source repository
            asset_id: Asset identifier from the listing

        Yields:
            Iterator of byte chunks of the asset body

        Raises:
            StreamOpenError: If the request fails or returns an error status
        """
        url = f"/repos/{repository.owner}/{repository.name}/releases/assets/{asset_id}"
        logger.debug("Opening stream for asset %s", asset_id)

        try:
            request = self.session.build_request("GET", url, headers={"Accept": OCTET_STREAM_MEDIA_TYPE})
            response = self.session.send(request, stream=True)
        except httpx.HTTPError as e:
            raise StreamOpenError(f"Unable to construct stream for asset {asset_id}: {e}") from e

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            response.close()
            raise StreamOpenError(f"Unable to construct stream for asset {asset_id}: {e}") from e

        try:
            yield response.iter_bytes(chunk_size=self.chunk_size)
        finally:
            response.close()


__all__ = ["GitHubClient"]

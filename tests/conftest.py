"""
Test fixtures and test doubles for release-mirror tests.

This module provides common fixtures, fake collaborators, and utilities
for testing the release-mirror package.
"""

from contextlib import contextmanager
from typing import Dict, Iterator, List, Optional, Set, Tuple

import pytest
import respx

from release_mirror.exceptions import StreamOpenError, UploadError
from release_mirror.models import AssetDescriptor, ReleaseAssetSet, RepositoryRef


class FakeAssetSource:
    """In-memory asset source that records every call."""

    def __init__(
        self,
        tag_name: str = "v1.0.0",
        assets: Optional[List[AssetDescriptor]] = None,
        payloads: Optional[Dict[int, bytes]] = None,
        fail_open: Optional[Set[int]] = None,
        chunk_size: int = 4,
    ) -> None:
        self.tag_name = tag_name
        self.assets = assets or []
        self.payloads = payloads or {}
        self.fail_open = fail_open or set()
        self.chunk_size = chunk_size
        self.list_calls: List[Tuple[RepositoryRef, int]] = []
        self.open_calls: List[int] = []
        self.closed: List[int] = []
        self.open_streams = 0
        self.max_open_streams = 0

    def list_assets(self, repository: RepositoryRef, release_id: int) -> ReleaseAssetSet:
        self.list_calls.append((repository, release_id))
        return ReleaseAssetSet(release_id=release_id, tag_name=self.tag_name, assets=self.assets)

    def _payload(self, asset_id: int) -> bytes:
        if asset_id in self.payloads:
            return self.payloads[asset_id]
        size = next(asset.size for asset in self.assets if asset.id == asset_id)
        return b"x" * size

    @contextmanager
    def open_stream(self, repository: RepositoryRef, asset_id: int) -> Iterator[Iterator[bytes]]:
        self.open_calls.append(asset_id)
        if asset_id in self.fail_open:
            raise StreamOpenError(f"Unable to construct stream for asset {asset_id}")

        payload = self._payload(asset_id)
        self.open_streams += 1
        self.max_open_streams = max(self.max_open_streams, self.open_streams)
        try:
            yield iter(payload[i : i + self.chunk_size] for i in range(0, len(payload), self.chunk_size))
        finally:
            self.open_streams -= 1
            self.closed.append(asset_id)


class FakeObjectSink:
    """In-memory object sink that reads bodies the way an HTTP client would."""

    def __init__(self, fail_keys: Optional[Set[str]] = None, read_size: int = 3) -> None:
        self.fail_keys = fail_keys or set()
        self.read_size = read_size
        self.puts: List[Tuple[str, str, int]] = []
        self.objects: Dict[str, bytes] = {}

    def put(self, bucket: str, key: str, body, length: int) -> None:
        self.puts.append((bucket, key, length))
        if key in self.fail_keys:
            raise UploadError(f"Unable to upload {key} to bucket {bucket}: AccessDenied")

        parts = []
        while True:
            data = body.read(self.read_size)
            if not data:
                break
            parts.append(data)
        self.objects[key] = b"".join(parts)


@pytest.fixture
def httpx_mock():
    """Provide respx mock for HTTP mocking."""
    with respx.mock:
        yield respx


@pytest.fixture
def repository():
    """Source repository used across tests."""
    return RepositoryRef(owner="acme", name="widget")


@pytest.fixture
def two_assets():
    """Two assets matching the end-to-end scenario."""
    return [
        AssetDescriptor(id=1, name="a.zip", size=10),
        AssetDescriptor(id=2, name="b.zip", size=20),
    ]


@pytest.fixture
def mixed_assets():
    """Assets with different extensions for filtering tests."""
    return [
        AssetDescriptor(id=1, name="widget-linux-x86_64.tar.gz", size=5),
        AssetDescriptor(id=2, name="widget-macos-arm64.tar.gz", size=6),
        AssetDescriptor(id=3, name="widget-windows-x64.zip", size=7),
        AssetDescriptor(id=4, name="checksums.txt", size=8),
    ]


@pytest.fixture
def fake_source(two_assets):
    """Fake asset source serving the two-asset release."""
    return FakeAssetSource(tag_name="v1/2024-01-01", assets=two_assets)


@pytest.fixture
def fake_sink():
    """Fake object sink."""
    return FakeObjectSink()


@pytest.fixture
def context_values():
    """Complete, valid set of configuration values."""
    return {
        "bucket_name": "releases",
        "access_key_id": "test-access-key",
        "access_key_secret": "test-secret",
        "endpoint_url": "https://account.r2.cloudflarestorage.com",
        "repository": "acme/widget",
        "release_id": 42,
    }


@pytest.fixture
def cli_env(monkeypatch):
    """Environment with every required transfer variable set."""
    env = {
        "R2_BUCKET_NAME": "releases",
        "R2_ACCESS_KEY_ID": "test-access-key",
        "R2_SECRET_ACCESS_KEY": "test-secret",
        "R2_ENDPOINT_URL": "https://account.r2.cloudflarestorage.com",
        "GITHUB_REPOSITORY": "acme/widget",
        "RELEASE_ID": "42",
    }
    for name in ("GITHUB_TOKEN", "R2_DEST", "KEY_POLICY", "DRY_RUN", "RELEASE_MIRROR_CONFIG"):
        monkeypatch.delenv(name, raising=False)
    for name, value in env.items():
        monkeypatch.setenv(name, value)
    return env


@pytest.fixture
def temp_config(tmp_path):
    """Config file supplying storage and source defaults."""
    config_path = tmp_path / "release-mirror.toml"
    config_path.write_text(
        "[storage]\n"
        'bucket_name = "config-bucket"\n'
        'access_key_id = "config-key"\n'
        'access_key_secret = "config-secret"\n'
        'endpoint_url = "https://config.r2.cloudflarestorage.com"\n'
        'dest = "mirror"\n'
        "\n"
        "[source]\n"
        'repository = "config-owner/config-repo"\n'
        'token = "config-token"\n',
        encoding="utf-8",
    )
    return str(config_path)


@pytest.fixture
def make_source():
    """Factory for asset sources with custom assets, payloads or failures."""
    return FakeAssetSource


@pytest.fixture
def make_sink():
    """Factory for object sinks with custom failures."""
    return FakeObjectSink

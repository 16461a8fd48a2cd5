"""
Destination key derivation.

Two policies map an asset to the key it is stored under:

- flat: ``[prefix/]name``
- versioned: ``[prefix/]version/name`` where ``version`` is the part of the
  release tag after the first separator (``v1/2024-01-01`` -> ``2024-01-01``)

Keys depend only on the prefix, the version and the asset name.
"""

from typing import Optional, Protocol

from ..exceptions import MalformedTagError
from ..models.assets import AssetDescriptor, TransferTask
from ..models.context import KeyPolicy
from ..utils.constants import KEY_SEPARATOR, TAG_VERSION_SEPARATOR
from ..utils.validation import validate_key


class KeyDeriver(Protocol):
    """Interface shared by the key policies."""

    def derive(self, asset: AssetDescriptor) -> str:
        """Return the destination key for an asset."""
        ...


def join_key(prefix: Optional[str], name: str) -> str:
    """
    Join a key prefix and a name with exactly one separator.

    Leading, trailing and repeated separators in the prefix are dropped.

    Args:
        prefix: Optional directory prefix
        name: Final key segment

    Returns:
        Joined key

    Example:
        >>> join_key("releases/", "a.zip")
        'releases/a.zip'
        >>> join_key(None, "a.zip")
        'a.zip'
    """
    segments = [segment for segment in (prefix or "").split(KEY_SEPARATOR) if segment]
    segments.append(name)
    return KEY_SEPARATOR.join(segments)


def version_from_tag(tag_name: str) -> str:
    """
    Extract the version from a release tag.

    Args:
        tag_name: Release tag such as ``v1/2024-01-01``

    Returns:
        Everything after the first separator

    Raises:
        MalformedTagError: If the tag has no separator or nothing after it
    """
    _, separator, version = tag_name.partition(TAG_VERSION_SEPARATOR)
    if not separator or not version:
        raise MalformedTagError(
            f"Failed to get version from tag '{tag_name}': expected '<prefix>{TAG_VERSION_SEPARATOR}<version>'"
        )
    return version


class FlatKeyPolicy:
    """Store assets under their own name, optionally below a prefix."""

    def __init__(self, prefix: Optional[str] = None) -> None:
        self.prefix = prefix

    def derive(self, asset: AssetDescriptor) -> str:
        return join_key(self.prefix, asset.name)


class VersionedKeyPolicy:
    """Store assets below the version taken from the release tag."""

    def __init__(self, tag_name: str, prefix: Optional[str] = None) -> None:
        # Release scoped: a malformed tag fails here, before any asset is processed
        self.version = version_from_tag(tag_name)
        self.prefix = prefix

    def derive(self, asset: AssetDescriptor) -> str:
        return join_key(join_key(self.prefix, self.version), asset.name)


def build_key_policy(policy: KeyPolicy, tag_name: str, prefix: Optional[str] = None) -> KeyDeriver:
    """
    Build the key policy selected by configuration.

    Args:
        policy: Selected policy
        tag_name: Tag of the release being transferred
        prefix: Optional destination directory prefix

    Returns:
        Key deriver for the run

    Raises:
        MalformedTagError: If the versioned policy is selected and the tag is malformed
    """
    if policy == KeyPolicy.VERSIONED:
        return VersionedKeyPolicy(tag_name, prefix=prefix)
    return FlatKeyPolicy(prefix=prefix)


def make_task(asset: AssetDescriptor, key_policy: KeyDeriver) -> TransferTask:
    """
    Derive the transfer task for a selected asset.

    Args:
        asset: Selected asset
        key_policy: Key deriver for the run

    Returns:
        TransferTask with a validated key and the asset size as declared length

    Raises:
        KeyEncodingError: If the derived key cannot be stored
    """
    key = validate_key(key_policy.derive(asset), asset_name=asset.name)
    return TransferTask(asset_id=asset.id, asset_name=asset.name, key=key, length=asset.size)


__all__ = [
    "KeyDeriver",
    "join_key",
    "version_from_tag",
    "FlatKeyPolicy",
    "VersionedKeyPolicy",
    "build_key_policy",
    "make_task",
]

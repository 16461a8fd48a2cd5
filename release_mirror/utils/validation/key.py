"""
Object key validation.

This module checks that derived destination keys can be written to the
object store as-is.
"""

from typing import Optional

from ...exceptions import KeyEncodingError
from ..constants import MAX_KEY_BYTES


def validate_key(key: str, asset_name: Optional[str] = None) -> str:
    """
    Validate that a key is representable by the object store.

    Args:
        key: Derived destination key
        asset_name: Asset the key was derived for, used in error messages

    Returns:
        The key, unchanged

    Raises:
        KeyEncodingError: If the key is empty, not valid UTF-8, or too long
    """
    if not key:
        raise KeyEncodingError("Derived key is empty", asset_name=asset_name)

    try:
        encoded = key.encode("utf-8")
    except UnicodeEncodeError as e:
        raise KeyEncodingError(f"{key!r} is not a valid destination key: {e.reason}", asset_name=asset_name) from e

    if len(encoded) > MAX_KEY_BYTES:
        raise KeyEncodingError(
            f"Destination key is {len(encoded)} bytes, longer than the {MAX_KEY_BYTES} byte limit",
            asset_name=asset_name,
        )

    return key


__all__ = ["validate_key"]

"""Release and asset models."""

from typing import List, Optional

from pydantic import ConfigDict, Field, field_validator

from ..utils.constants import REPOSITORY_SEPARATOR
from .base import MirrorBaseModel


class RepositoryRef(MirrorBaseModel):
    """
    Source repository identifier split into its two components.

    Attributes:
        owner: Repository owner (user or organization)
        name: Repository name
    """

    model_config = ConfigDict(frozen=True)

    owner: str = Field(min_length=1)
    name: str = Field(min_length=1)

    @classmethod
    def parse(cls, identifier: str, separator: str = REPOSITORY_SEPARATOR) -> "RepositoryRef":
        """
        Split an ``owner/name`` identifier into a RepositoryRef.

        Args:
            identifier: Repository identifier
            separator: Separator between owner and name

        Returns:
            Parsed RepositoryRef

        Raises:
            ValueError: If the identifier does not have exactly two non-empty components
        """
        parts = identifier.split(separator) if identifier else []
        if len(parts) != 2 or not all(parts):
            raise ValueError(f"Invalid repository identifier '{identifier}': expected 'owner{separator}name'")
        return cls(owner=parts[0], name=parts[1])

    @property
    def full_name(self) -> str:
        """Repository identifier in ``owner/name`` form."""
        return f"{self.owner}/{self.name}"

    def __str__(self) -> str:
        return self.full_name


class AssetDescriptor(MirrorBaseModel):
    """
    A single asset attached to a release.

    Attributes:
        id: Opaque handle used to request the asset's byte stream
        name: File name of the asset as published
        size: Size of the asset in bytes
        content_type: Content type reported by the source, if any
    """

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    size: int = Field(ge=0)
    content_type: Optional[str] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Reject empty asset names."""
        if not v:
            raise ValueError("Asset name must not be empty")
        return v


class ReleaseAssetSet(MirrorBaseModel):
    """
    Ordered asset listing of one release.

    Attributes:
        release_id: Identifier of the release
        tag_name: Tag label of the release
        assets: Assets in the order the source listed them
    """

    model_config = ConfigDict(frozen=True)

    release_id: int
    tag_name: str
    assets: List[AssetDescriptor] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.assets)

class TransferTask(MirrorBaseModel):
    """
    One selected asset bound to its destination key.

    Attributes:
        asset_id: Source handle of the asset
        asset_name: Name of the asset, for reporting
        key: Destination key in the bucket
        length: Declared content length, equal to the listed asset size
    """

    model_config = ConfigDict(frozen=True)

    asset_id: int
    asset_name: str
    key: str
    length: int = Field(ge=0)


__all__ = [
    "RepositoryRef",
    "AssetDescriptor",
    "ReleaseAssetSet",
    "TransferTask",
]

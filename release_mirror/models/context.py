"""Context and configuration models for release transfers."""

import re
from enum import Enum
from typing import Any, List, Optional

from pydantic import Field, ValidationError, ValidationInfo, field_validator

from ..exceptions import ConfigurationError
from .assets import RepositoryRef
from .base import MirrorBaseModel


class KeyPolicy(str, Enum):
    """Policy used to derive destination keys from asset names."""

    FLAT = "flat"
    VERSIONED = "versioned"


class TransferContext(MirrorBaseModel):
    """
    Resolved configuration for a transfer run.

    Attributes:
        bucket_name: Destination bucket
        access_key_id: Object store access key id
        access_key_secret: Object store secret access key (never logged)
        endpoint_url: Object store endpoint URL
        repository: Source repository identifier in ``owner/name`` form
        release_id: Identifier of the release to transfer
        github_token: Optional token for the source API
        patterns: Regular expressions selecting assets by name; empty selects all
        dest: Optional destination directory prefix
        key_policy: Key derivation policy
        dry_run: Skip all downloads and uploads
        debug: Verbosity level (0=WARNING, 1=INFO, 2=DEBUG, 3+=DEBUG with HTTP logs)
    """

    bucket_name: str
    access_key_id: str
    access_key_secret: str = Field(repr=False)
    endpoint_url: str
    repository: str
    release_id: int = Field(ge=0)
    github_token: Optional[str] = Field(default=None, repr=False)
    patterns: List[str] = Field(default_factory=list)
    dest: Optional[str] = None
    key_policy: KeyPolicy = KeyPolicy.FLAT
    dry_run: bool = False
    debug: int = 0

    @field_validator("bucket_name", "access_key_id", "access_key_secret", "endpoint_url", "repository", mode="after")
    @classmethod
    def is_empty(cls, value: str, info: ValidationInfo) -> str:
        """Reject empty or whitespace-only required values."""
        if not value or not value.strip():
            raise ValueError(f"{info.field_name} must not be empty")
        return value

    @field_validator("repository", mode="after")
    @classmethod
    def validate_repository(cls, value: str) -> str:
        """Require exactly two non-empty ``owner/name`` components."""
        RepositoryRef.parse(value)
        return value

    @field_validator("patterns", mode="after")
    @classmethod
    def validate_patterns(cls, value: List[str]) -> List[str]:
        """Check that every pattern is a valid regular expression."""
        for pattern in value:
            try:
                re.compile(pattern)
            except re.error as e:
                raise ValueError(f"Invalid pattern '{pattern}': {e}") from e
        return value

    @field_validator("github_token", "dest", mode="after")
    @classmethod
    def empty_as_none(cls, value: Optional[str]) -> Optional[str]:
        """Treat empty optional values as unset."""
        if value is not None and not value.strip():
            return None
        return value

    @property
    def repository_ref(self) -> RepositoryRef:
        """Repository split into owner and name."""
        return RepositoryRef.parse(self.repository)

    @classmethod
    def resolve(cls, **values: Any) -> "TransferContext":
        """
        Build a validated context, reporting problems as ConfigurationError.

        Args:
            **values: Raw configuration values

        Returns:
            Validated TransferContext

        Raises:
            ConfigurationError: If a required value is missing, empty, or malformed
        """
        try:
            return cls(**values)
        except ValidationError as e:
            problems = []
            for error in e.errors():
                field = ".".join(str(loc) for loc in error["loc"]) or "configuration"
                message = error["msg"]
                if error["type"] == "missing":
                    message = "required value not set"
                problems.append(f"{field}: {message}")
            raise ConfigurationError("Invalid configuration: " + "; ".join(problems)) from e


__all__ = [
    "KeyPolicy",
    "TransferContext",
]

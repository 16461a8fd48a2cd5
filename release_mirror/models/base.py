"""Base models for release-mirror."""

from pydantic import BaseModel, ConfigDict


class MirrorBaseModel(BaseModel):
    """Base model for all release-mirror models."""

    model_config = ConfigDict(
        extra="forbid",  # Don't allow extra fields
        frozen=False,  # Allow modification (can be changed per model)
        validate_assignment=True,  # Validate on attribute assignment
    )


__all__ = ["MirrorBaseModel"]

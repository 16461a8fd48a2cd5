"""
Tests for Pydantic models.

This module tests the asset, context and result models.
"""

import pytest
from pydantic import ValidationError

from release_mirror.exceptions import ConfigurationError
from release_mirror.models import (
    AssetDescriptor,
    KeyPolicy,
    ReleaseAssetSet,
    RepositoryRef,
    TransferContext,
    TransferOutcome,
    TransferReport,
    TransferStatus,
    TransferTask,
)


class TestRepositoryRef:
    """Test RepositoryRef model."""

    def test_parse(self):
        """Test parsing an owner/name identifier."""
        ref = RepositoryRef.parse("acme/widget")

        assert ref.owner == "acme"
        assert ref.name == "widget"
        assert ref.full_name == "acme/widget"
        assert str(ref) == "acme/widget"

    @pytest.mark.parametrize("identifier", ["ownerrepo", "a/b/c", "/widget", "acme/", "", "/"])
    def test_parse_invalid(self, identifier):
        """Test that identifiers without exactly two components are rejected."""
        with pytest.raises(ValueError, match="Invalid repository identifier"):
            RepositoryRef.parse(identifier)

    def test_frozen(self):
        """Test that repository references are immutable."""
        ref = RepositoryRef(owner="acme", name="widget")

        with pytest.raises(ValidationError):
            ref.owner = "other"

    def test_equality(self):
        """Test that equal components compare equal."""
        assert RepositoryRef.parse("acme/widget") == RepositoryRef(owner="acme", name="widget")


class TestAssetModels:
    """Test asset and task models."""

    def test_asset_descriptor(self):
        """Test creating an asset descriptor."""
        asset = AssetDescriptor(id=1, name="a.zip", size=10)

        assert asset.content_type is None
        assert asset.size == 10

    def test_asset_empty_name(self):
        """Test that an empty asset name is rejected."""
        with pytest.raises(ValidationError):
            AssetDescriptor(id=1, name="", size=10)

    def test_asset_negative_size(self):
        """Test that a negative size is rejected."""
        with pytest.raises(ValidationError):
            AssetDescriptor(id=1, name="a.zip", size=-1)

    def test_asset_extra_field(self):
        """Test that unknown fields are rejected."""
        with pytest.raises(ValidationError):
            AssetDescriptor(id=1, name="a.zip", size=1, url="https://example.com")

    def test_release_asset_set(self, two_assets):
        """Test release asset set helpers."""
        release = ReleaseAssetSet(release_id=42, tag_name="v1.0.0", assets=two_assets)

        assert len(release) == 2
        assert [a.name for a in release.assets] == ["a.zip", "b.zip"]

    def test_transfer_task(self):
        """Test creating a transfer task."""
        task = TransferTask(asset_id=1, asset_name="a.zip", key="mirror/a.zip", length=10)

        assert task.key == "mirror/a.zip"
        with pytest.raises(ValidationError):
            task.key = "other"


class TestTransferContext:
    """Test TransferContext model."""

    def test_defaults(self, context_values):
        """Test default values of optional settings."""
        context = TransferContext(**context_values)

        assert context.github_token is None
        assert context.patterns == []
        assert context.dest is None
        assert context.key_policy == KeyPolicy.FLAT
        assert context.dry_run is False
        assert context.repository_ref == RepositoryRef(owner="acme", name="widget")

    def test_secrets_not_in_repr(self, context_values):
        """Test that secrets are kept out of the representation."""
        context = TransferContext(**context_values, github_token="secret-token")

        assert "test-secret" not in repr(context)
        assert "secret-token" not in repr(context)

    def test_empty_optional_values(self, context_values):
        """Test that empty optional values are treated as unset."""
        context = TransferContext(**context_values, github_token="", dest="  ")

        assert context.github_token is None
        assert context.dest is None

    def test_key_policy_from_string(self, context_values):
        """Test that the key policy accepts its string value."""
        context = TransferContext(**context_values, key_policy="versioned")

        assert context.key_policy == KeyPolicy.VERSIONED

    def test_resolve_missing_value(self, context_values):
        """Test that missing required values name the field."""
        del context_values["bucket_name"]

        with pytest.raises(ConfigurationError, match="bucket_name: required value not set"):
            TransferContext.resolve(**context_values)

    def test_resolve_empty_value(self, context_values):
        """Test that whitespace-only required values are rejected."""
        context_values["endpoint_url"] = "   "

        with pytest.raises(ConfigurationError, match="endpoint_url must not be empty"):
            TransferContext.resolve(**context_values)

    def test_resolve_malformed_repository(self, context_values):
        """Test that a repository without separator is rejected."""
        context_values["repository"] = "ownerrepo"

        with pytest.raises(ConfigurationError, match="Invalid repository identifier 'ownerrepo'"):
            TransferContext.resolve(**context_values)

    def test_resolve_invalid_pattern(self, context_values):
        """Test that invalid patterns are rejected."""
        with pytest.raises(ConfigurationError, match="Invalid pattern"):
            TransferContext.resolve(**context_values, patterns=["("])

    def test_resolve_negative_release_id(self, context_values):
        """Test that a negative release id is rejected."""
        context_values["release_id"] = -1

        with pytest.raises(ConfigurationError, match="release_id"):
            TransferContext.resolve(**context_values)

    def test_resolve_reports_every_problem(self):
        """Test that all problems are reported in one error."""
        with pytest.raises(ConfigurationError) as exc_info:
            TransferContext.resolve(repository="acme/widget")

        message = str(exc_info.value)
        for field in ("bucket_name", "access_key_id", "access_key_secret", "endpoint_url", "release_id"):
            assert field in message


class TestResults:
    """Test outcome and report models."""

    def _report(self):
        report = TransferReport(repository="acme/widget", release_id=42, total_assets=3, selected_assets=3)
        report.add_outcome(TransferOutcome(asset_name="a.zip", key="a.zip", size=10, status=TransferStatus.UPLOADED))
        report.add_outcome(TransferOutcome(asset_name="b.zip", key="b.zip", size=20, status=TransferStatus.UPLOADED))
        report.add_outcome(
            TransferOutcome(asset_name="c.zip", key="c.zip", size=5, status=TransferStatus.FAILED, reason="denied")
        )
        return report

    def test_counts(self):
        """Test report counters."""
        report = self._report()

        assert report.uploaded_count == 2
        assert report.failed_count == 1
        assert report.skipped_count == 0
        assert report.uploaded_bytes == 30
        assert report.has_failures

    def test_aborted(self):
        """Test that a report is aborted once an error is recorded."""
        report = self._report()
        assert not report.aborted

        report.error = "denied"

        assert report.aborted

    def test_outcome_is_failed(self):
        """Test the failed helper on outcomes."""
        assert TransferOutcome(asset_name="a.zip", status=TransferStatus.FAILED).is_failed
        assert not TransferOutcome(asset_name="a.zip", status=TransferStatus.SKIPPED_DRY_RUN).is_failed

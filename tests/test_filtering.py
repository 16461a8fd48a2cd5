"""
Tests for asset selection by name pattern.
"""

import logging
from unittest.mock import Mock

import pytest

from release_mirror.exceptions import ConfigurationError
from release_mirror.transfer.filtering import compile_patterns, filter_assets, matches_any


class TestCompilePatterns:
    """Test pattern compilation."""

    def test_compiles_in_order(self):
        """Test that patterns are compiled in the given order."""
        compiled = compile_patterns([r"\.zip$", "linux"])

        assert [p.pattern for p in compiled] == [r"\.zip$", "linux"]

    def test_invalid_pattern(self):
        """Test that an invalid regular expression is a configuration error."""
        with pytest.raises(ConfigurationError, match="Invalid pattern"):
            compile_patterns(["valid", "("])


class TestMatchesAny:
    """Test single-name matching."""

    def test_no_patterns_match_everything(self):
        """Test that an empty pattern list selects every name."""
        assert matches_any("anything.bin", [])

    def test_search_semantics(self):
        """Test that patterns match anywhere in the name."""
        patterns = compile_patterns(["linux"])

        assert matches_any("widget-linux-x86_64.tar.gz", patterns)
        assert not matches_any("widget-macos-arm64.tar.gz", patterns)

    def test_anchored_pattern(self):
        """Test that anchors restrict the match."""
        patterns = compile_patterns([r"^checksums"])

        assert matches_any("checksums.txt", patterns)
        assert not matches_any("widget-checksums.txt", patterns)


class TestFilterAssets:
    """Test asset filtering."""

    def test_no_patterns_keep_all(self, mixed_assets):
        """Test that without patterns all assets are kept in order."""
        assert filter_assets(mixed_assets, []) == mixed_assets

    def test_union_of_patterns(self, mixed_assets):
        """Test that an asset is kept when any pattern matches."""
        selected = filter_assets(mixed_assets, compile_patterns([r"\.zip$", r"\.txt$"]))

        assert [a.name for a in selected] == ["widget-windows-x64.zip", "checksums.txt"]

    def test_order_preserved(self, mixed_assets):
        """Test that pattern order does not change asset order."""
        selected = filter_assets(mixed_assets, compile_patterns([r"\.txt$", "linux"]))

        assert [a.id for a in selected] == [1, 4]

    def test_asset_matching_several_patterns_kept_once(self, mixed_assets):
        """Test that an asset matching several patterns appears once."""
        selected = filter_assets(mixed_assets, compile_patterns(["linux", "x86_64"]))

        assert [a.id for a in selected] == [1]

    def test_no_match(self, mixed_assets):
        """Test that a pattern matching nothing selects nothing."""
        assert filter_assets(mixed_assets, compile_patterns([r"\.deb$"])) == []

    def test_logs_through_given_logger(self, mixed_assets):
        """Test that the selection summary goes to the logger passed in."""
        log = Mock(spec=logging.Logger)

        filter_assets(mixed_assets, compile_patterns(["linux"]), log=log)

        log.debug.assert_called_once_with("Selected %d of %d asset(s) using %d pattern(s)", 1, 4, 1)

    def test_logs_to_module_logger_by_default(self, mixed_assets, caplog):
        """Test that the selection summary is logged under the package namespace."""
        with caplog.at_level(logging.DEBUG, logger="release_mirror"):
            filter_assets(mixed_assets, compile_patterns(["linux"]))

        assert [record.name for record in caplog.records] == ["release_mirror.transfer.filtering"]

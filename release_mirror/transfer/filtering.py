"""
Asset selection by name pattern.

Patterns are regular expressions matched anywhere in the asset name. An
asset is selected when any pattern matches; with no patterns every asset
is selected.
"""

import logging
import re
from typing import Iterable, List, Optional, Pattern, Sequence

from ..exceptions import ConfigurationError
from ..models.assets import AssetDescriptor

logger = logging.getLogger(__name__)


def compile_patterns(patterns: Iterable[str]) -> List[Pattern[str]]:
    """
    Compile name patterns.

    Args:
        patterns: Regular expression strings

    Returns:
        Compiled patterns in the given order

    Raises:
        ConfigurationError: If a pattern is not a valid regular expression
    """
    compiled = []
    for pattern in patterns:
        try:
            compiled.append(re.compile(pattern))
        except re.error as e:
            raise ConfigurationError(f"Invalid pattern '{pattern}': {e}") from e
    return compiled


def matches_any(name: str, patterns: Sequence[Pattern[str]]) -> bool:
    """
    Check a name against patterns, stopping at the first match.

    Args:
        name: Asset name
        patterns: Compiled patterns

    Returns:
        True if no patterns are given or at least one pattern matches
    """
    if not patterns:
        return True
    return any(pattern.search(name) for pattern in patterns)


def filter_assets(
    assets: Iterable[AssetDescriptor],
    patterns: Sequence[Pattern[str]],
    log: Optional[logging.Logger] = None,
) -> List[AssetDescriptor]:
    """
    Select assets whose names match at least one pattern.

    Args:
        assets: Assets in listing order
        patterns: Compiled patterns; empty selects every asset
        log: Logger for the selection summary; defaults to this module's logger

    Returns:
        Selected assets, order preserved
    """
    assets = list(assets)
    if not patterns:
        return assets

    selected = [asset for asset in assets if matches_any(asset.name, patterns)]
    (log or logger).debug("Selected %d of %d asset(s) using %d pattern(s)", len(selected), len(assets), len(patterns))
    return selected


__all__ = ["compile_patterns", "matches_any", "filter_assets"]

"""
Transfer operations for copying release assets into an object store.

This package selects the assets of a release by name, derives their
destination keys, and streams each one from the release host into the
bucket without materializing it.

Modules:
    - filtering: Asset selection by name pattern
    - keys: Destination key policies
    - streaming: Pass-through request bodies
    - pipeline: The sequential, fail-fast transfer loop
    - reporting: Run summary logging
"""

from .filtering import compile_patterns, filter_assets, matches_any
from .keys import (
    FlatKeyPolicy,
    VersionedKeyPolicy,
    build_key_policy,
    join_key,
    make_task,
    version_from_tag,
)
from .pipeline import TransferPipeline, run_transfer
from .reporting import log_transfer_report
from .streaming import PassThroughBody, StreamLengthError

__all__ = [
    "compile_patterns",
    "filter_assets",
    "matches_any",
    "FlatKeyPolicy",
    "VersionedKeyPolicy",
    "build_key_policy",
    "join_key",
    "make_task",
    "version_from_tag",
    "TransferPipeline",
    "run_transfer",
    "log_transfer_report",
    "PassThroughBody",
    "StreamLengthError",
]

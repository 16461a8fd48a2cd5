"""
Release asset transfer pipeline.

The pipeline lists the assets of one release, selects them by name,
derives a destination key for each, and streams every selected asset from
the source straight into the object store, one asset at a time.

Per task the states are::

    Selected -> DryRunSkip
    Selected -> StreamOpened -> Uploading -> Uploaded
    Selected -> Failed

The first failure aborts the run. Assets uploaded before the failure stay
in the store.
"""

import logging
from typing import Optional, Pattern, Sequence

from ..exceptions import ReleaseMirrorError, StreamOpenError, UploadError
from ..models.assets import RepositoryRef, TransferTask
from ..models.context import KeyPolicy, TransferContext
from ..models.results import TransferOutcome, TransferReport, TransferStatus
from ..protocols import AssetSource, ObjectSink
from .filtering import compile_patterns, filter_assets
from .keys import build_key_policy, make_task
from .reporting import log_transfer_report
from .streaming import PassThroughBody


class TransferPipeline:
    """Sequential, fail-fast transfer of release assets into a bucket."""

    def __init__(
        self,
        source: AssetSource,
        sink: ObjectSink,
        bucket: str,
        *,
        patterns: Sequence[Pattern[str]] = (),
        key_policy: KeyPolicy = KeyPolicy.FLAT,
        dest: Optional[str] = None,
        dry_run: bool = False,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        """
        Initialize the pipeline.

        Args:
            source: Asset source to list and download from
            sink: Object sink to upload to
            bucket: Destination bucket
            patterns: Compiled name patterns; empty selects every asset
            key_policy: Key derivation policy
            dest: Optional destination directory prefix
            dry_run: Derive keys and report, but never open streams or upload
            logger: Logger for progress messages; defaults to this module's logger
        """
        self.source = source
        self.sink = sink
        self.bucket = bucket
        self.patterns = list(patterns)
        self.key_policy = key_policy
        self.dest = dest
        self.dry_run = dry_run
        self.logger = logger or logging.getLogger(__name__)
        self.report: Optional[TransferReport] = None

    @classmethod
    def from_context(
        cls,
        context: TransferContext,
        source: AssetSource,
        sink: ObjectSink,
        logger: Optional[logging.Logger] = None,
    ) -> "TransferPipeline":
        """
        Build a pipeline from a resolved configuration.

        Args:
            context: Resolved configuration
            source: Asset source
            sink: Object sink
            logger: Optional logger handle

        Returns:
            Configured TransferPipeline
        """
        return cls(
            source,
            sink,
            context.bucket_name,
            patterns=compile_patterns(context.patterns),
            key_policy=context.key_policy,
            dest=context.dest,
            dry_run=context.dry_run,
            logger=logger,
        )

    def run(self, repository: RepositoryRef, release_id: int) -> TransferReport:
        """
        Transfer the selected assets of a release.

        Args:
            repository: Source repository
            release_id: Release to transfer

        Returns:
            TransferReport with one outcome per selected asset

        Raises:
            ReleaseLookupError: If the release cannot be listed
            MalformedTagError: If versioned keys are requested and the tag is malformed
            KeyEncodingError: If a derived key cannot be stored
            StreamOpenError: If an asset download cannot be opened
            UploadError: If an upload fails, or the transfer fails for any other reason
        """
        self.report = TransferReport(repository=repository.full_name, release_id=release_id, dry_run=self.dry_run)
        try:
            self._run(repository, release_id, self.report)
        except Exception as e:
            self.report.error = str(e) or type(e).__name__
            raise
        finally:
            log_transfer_report(self.report, self.logger)
        return self.report

    def _run(self, repository: RepositoryRef, release_id: int, report: TransferReport) -> None:
        release = self.source.list_assets(repository, release_id)
        report.tag_name = release.tag_name
        report.total_assets = len(release)

        # Computed once per run, before any asset is touched
        key_policy = build_key_policy(self.key_policy, release.tag_name, prefix=self.dest)

        selected = filter_assets(release.assets, self.patterns, log=self.logger)
        report.selected_assets = len(selected)
        self.logger.info("Transferring %d of %d asset(s) to bucket %s", len(selected), len(release), self.bucket)

        for asset in selected:
            try:
                task = make_task(asset, key_policy)
            except ReleaseMirrorError as e:
                report.add_outcome(
                    TransferOutcome(
                        asset_name=asset.name, size=asset.size, status=TransferStatus.FAILED, reason=str(e)
                    )
                )
                raise
            report.add_outcome(self._transfer(repository, task))

    def _transfer(self, repository: RepositoryRef, task: TransferTask) -> TransferOutcome:
        """Run one task to a terminal state, raising on failure."""
        self.logger.info("Uploading asset %s (%d bytes)", task.asset_name, task.length)
        self.logger.debug("Destination key for %s: %s", task.asset_name, task.key)

        if self.dry_run:
            self.logger.info("Skipping upload of %s due to --dry-run", task.asset_name)
            return TransferOutcome(
                asset_name=task.asset_name, key=task.key, size=task.length, status=TransferStatus.SKIPPED_DRY_RUN
            )

        try:
            with self.source.open_stream(repository, task.asset_id) as chunks:
                body = PassThroughBody(chunks, task.length)
                self.sink.put(self.bucket, task.key, body, task.length)
        except (StreamOpenError, UploadError) as e:
            self._record_failure(task, e)
            self.logger.error("Unable to transfer asset %s: %s", task.asset_name, e)
            if e.asset_name is None:
                e.asset_name = task.asset_name
            raise
        except Exception as e:
            self._record_failure(task, e)
            self.logger.error("Unable to transfer asset %s: %s", task.asset_name, e)
            raise UploadError(f"Unable to transfer asset {task.asset_name}: {e}", asset_name=task.asset_name) from e

        self.logger.info("Successfully uploaded asset %s", task.asset_name)
        return TransferOutcome(
            asset_name=task.asset_name, key=task.key, size=task.length, status=TransferStatus.UPLOADED
        )

    def _record_failure(self, task: TransferTask, error: Exception) -> None:
        if self.report is not None:
            self.report.add_outcome(
                TransferOutcome(
                    asset_name=task.asset_name,
                    key=task.key,
                    size=task.length,
                    status=TransferStatus.FAILED,
                    reason=str(error),
                )
            )


def run_transfer(
    context: TransferContext,
    source: AssetSource,
    sink: ObjectSink,
    logger: Optional[logging.Logger] = None,
) -> TransferReport:
    """
    Run a transfer described by a resolved configuration.

    Args:
        context: Resolved configuration
        source: Asset source
        sink: Object sink
        logger: Optional logger handle

    Returns:
        TransferReport of the run
    """
    pipeline = TransferPipeline.from_context(context, source, sink, logger=logger)
    return pipeline.run(context.repository_ref, context.release_id)


__all__ = ["TransferPipeline", "run_transfer"]

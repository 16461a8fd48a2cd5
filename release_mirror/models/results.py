"""Result models for transfer runs."""

from enum import Enum
from typing import List, Optional

from pydantic import Field

from .base import MirrorBaseModel


class TransferStatus(str, Enum):
    """Terminal state of a single transfer task."""

    UPLOADED = "uploaded"
    SKIPPED_DRY_RUN = "skipped_dry_run"
    FAILED = "failed"


class TransferOutcome(MirrorBaseModel):
    """
    Outcome of one transfer task.

    Attributes:
        asset_name: Name of the source asset
        key: Destination key (None if the key could not be derived)
        size: Declared size of the asset in bytes
        status: Terminal state reached by the task
        reason: Failure description for failed tasks
    """

    asset_name: str
    key: Optional[str] = None
    size: int = Field(default=0, ge=0)
    status: TransferStatus
    reason: Optional[str] = None

    @property
    def is_failed(self) -> bool:
        """Check if the task failed."""
        return self.status == TransferStatus.FAILED


class TransferReport(MirrorBaseModel):
    """
    Aggregated outcomes of a transfer run.

    The report is built incrementally while the pipeline runs. Outcomes are
    only used for logging; a failed task still aborts the run.

    Attributes:
        repository: Source repository in ``owner/name`` form
        release_id: Release that was transferred
        tag_name: Tag of the release, once known
        dry_run: Whether uploads were skipped
        total_assets: Number of assets listed on the release
        selected_assets: Number of assets left after filtering
        outcomes: Per-task outcomes in processing order
        error: Description of the error that aborted the run, if any
    """

    repository: str
    release_id: int
    tag_name: Optional[str] = None
    dry_run: bool = False
    total_assets: int = Field(default=0, ge=0)
    selected_assets: int = Field(default=0, ge=0)
    outcomes: List[TransferOutcome] = Field(default_factory=list)
    error: Optional[str] = None

    def add_outcome(self, outcome: TransferOutcome) -> None:
        """
        Record the outcome of a task.

        Args:
            outcome: Outcome to append
        """
        self.outcomes.append(outcome)

    def _count(self, status: TransferStatus) -> int:
        return sum(1 for outcome in self.outcomes if outcome.status == status)

    @property
    def uploaded_count(self) -> int:
        """Number of assets uploaded."""
        return self._count(TransferStatus.UPLOADED)

    @property
    def skipped_count(self) -> int:
        """Number of assets skipped because of dry run."""
        return self._count(TransferStatus.SKIPPED_DRY_RUN)

    @property
    def failed_count(self) -> int:
        """Number of failed assets."""
        return self._count(TransferStatus.FAILED)

    @property
    def uploaded_bytes(self) -> int:
        """Total bytes written to the object store."""
        return sum(o.size for o in self.outcomes if o.status == TransferStatus.UPLOADED)

    @property
    def aborted(self) -> bool:
        """Check if the run ended on a fatal error."""
        return self.error is not None

    @property
    def has_failures(self) -> bool:
        """Check if any task failed."""
        return self.failed_count > 0

__all__ = [
    "TransferStatus",
    "TransferOutcome",
    "TransferReport",
]

"""
Reporting and logging utilities for transfer runs.

The run summary is logged at WARNING level so it is visible at the default
verbosity; per-asset details are logged at INFO and DEBUG.
"""

import logging
from typing import Optional

from ..models.results import TransferReport, TransferStatus


def _format_file_size(size_bytes: int) -> str:
    """
    Format file size in human-readable format.

    Args:
        size_bytes: Size in bytes

    Returns:
        Formatted size string
    """
    if size_bytes == 0:
        return "0 B"

    size_names = ["B", "KB", "MB", "GB", "TB"]
    size = float(size_bytes)
    i = 0
    while size >= 1024 and i < len(size_names) - 1:
        size /= 1024.0
        i += 1

    return f"{size:.1f} {size_names[i]}"


def _plural(count: int, word: str) -> str:
    return f"{count} {word}{'s' if count != 1 else ''}"


def _format_summary(report: TransferReport) -> str:
    """Build the one-line summary of a run."""
    if report.dry_run:
        action = f"{_plural(report.skipped_count, 'asset')} would be uploaded (dry run)"
    else:
        action = f"{_plural(report.uploaded_count, 'asset')} uploaded ({_format_file_size(report.uploaded_bytes)})"

    summary = f"{action} from {report.repository} release {report.release_id}"
    if report.tag_name:
        summary += f" ({report.tag_name})"
    summary += f", {report.selected_assets} of {report.total_assets} selected"

    if report.has_failures:
        summary += f", {report.failed_count} failed"
    return summary


def _log_outcomes(report: TransferReport, logger: logging.Logger) -> None:
    """Log one line per task outcome."""
    for outcome in report.outcomes:
        if outcome.status == TransferStatus.FAILED:
            logger.debug("  %s: failed (%s)", outcome.asset_name, outcome.reason)
        else:
            logger.debug(
                "  %s -> %s [%s, %s]",
                outcome.asset_name,
                outcome.key,
                outcome.status.value,
                _format_file_size(outcome.size),
            )


def log_transfer_report(report: TransferReport, logger: Optional[logging.Logger] = None) -> None:
    """
    Log the summary of a transfer run.

    Args:
        report: Report of the run, complete or aborted
        logger: Logger to write to; defaults to the root logger
    """
    logger = logger or logging.getLogger()

    _log_outcomes(report, logger)

    if report.aborted:
        logger.warning("Transfer aborted: %s", _format_summary(report))
        if report.uploaded_count:
            logger.warning(
                "%s already written to the bucket remain in place",
                _plural(report.uploaded_count, "asset"),
            )
    elif report.selected_assets == 0:
        logger.warning("Transfer complete: no assets selected from %s release %s", report.repository, report.release_id)
    else:
        logger.warning("Transfer complete: %s", _format_summary(report))


__all__ = ["log_transfer_report"]

"""
Error handling utilities for standardized error logging and handling.

This module provides reusable error handling patterns for reporting fatal
failures at the top level of a run.
"""

import logging
import traceback

import botocore.exceptions
import httpx

from ..exceptions import ReleaseMirrorError


def describe_error(error: BaseException) -> str:
    """
    Build a single-line description of an error.

    Args:
        error: The exception to describe

    Returns:
        Description naming the asset when known
    """
    message = str(error) or type(error).__name__
    asset_name = getattr(error, "asset_name", None)
    if asset_name and asset_name not in message:
        message = f"{message} (asset: {asset_name})"

    return " ".join(message.split())


def handle_http_error(error: httpx.HTTPError, operation: str, *, log_traceback: bool = True) -> None:
    """
    Handle HTTP errors from the source API with standardized logging.

    Args:
        error: The HTTP error to handle
        operation: Description of the operation that failed
        log_traceback: Whether to log the full traceback
    """
    status_code = error.response.status_code if isinstance(error, httpx.HTTPStatusError) else None

    if status_code == 401:
        logging.error(
            "Authentication failed during %s: Invalid token. Please check GITHUB_TOKEN.",
            operation,
        )
    elif status_code == 403:
        logging.error(
            "Access denied during %s: the token lacks permission or the API rate limit was exceeded.",
            operation,
        )
    elif status_code == 404:
        logging.error("Resource not found during %s: %s", operation, error)
    elif status_code is not None and status_code >= 500:
        logging.error("Server error during %s: %s", operation, error)
    else:
        logging.error("HTTP error during %s: %s", operation, error)

    if log_traceback:
        logging.debug("Traceback: %s", traceback.format_exc())


def handle_storage_error(error: Exception, operation: str, *, log_traceback: bool = True) -> None:
    """
    Handle object store errors with standardized logging.

    Args:
        error: The botocore error to handle
        operation: Description of the operation that failed
        log_traceback: Whether to log the full traceback
    """
    if isinstance(error, botocore.exceptions.ClientError):
        code = error.response.get("Error", {}).get("Code", "Unknown")
        if code in ("AccessDenied", "InvalidAccessKeyId", "SignatureDoesNotMatch"):
            logging.error(
                "Object store rejected credentials during %s (%s). Please check R2_ACCESS_KEY_ID and "
                "R2_SECRET_ACCESS_KEY.",
                operation,
                code,
            )
        elif code == "NoSuchBucket":
            logging.error("Bucket not found during %s: %s", operation, error)
        else:
            logging.error("Object store error during %s (%s): %s", operation, code, error)
    else:
        logging.error("Object store error during %s: %s", operation, error)

    if log_traceback:
        logging.debug("Traceback: %s", traceback.format_exc())


def handle_generic_error(error: Exception, operation: str, *, log_traceback: bool = True) -> None:
    """
    Handle generic errors with standardized logging.

    Args:
        error: The exception to handle
        operation: Description of the operation that failed
        log_traceback: Whether to log the full traceback
    """
    logging.error("Unexpected error during %s: %s", operation, error)

    if log_traceback:
        logging.error("Traceback: %s", traceback.format_exc())


def handle_run_error(error: Exception, operation: str) -> None:
    """
    Log a fatal run error, dispatching on the underlying cause.

    Args:
        error: The exception that ended the run
        operation: Description of the operation that failed
    """
    if not isinstance(error, ReleaseMirrorError):
        handle_generic_error(error, operation)
        return

    cause = error.__cause__
    if isinstance(cause, httpx.HTTPError):
        handle_http_error(cause, operation)
    elif isinstance(cause, (botocore.exceptions.BotoCoreError, botocore.exceptions.ClientError)):
        handle_storage_error(cause, operation)
    else:
        logging.error("%s failed: %s", operation.capitalize(), describe_error(error))
        logging.debug("Traceback: %s", traceback.format_exc())


__all__ = [
    "describe_error",
    "handle_http_error",
    "handle_storage_error",
    "handle_generic_error",
    "handle_run_error",
]

"""
Logging configuration and utilities for the release-mirror package.

This module provides logging setup, custom formatters, and logging utilities
to ensure consistent and readable logging across the package.
"""

import logging
from typing import Optional

# ============================================================================
# Logging Configuration Constants
# ============================================================================

# Default width for log message wrapping
DEFAULT_LOG_WIDTH = 120

# Default log line format
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

# Third-party loggers that log every request at INFO/DEBUG
HTTP_LOGGERS = ["httpx", "httpcore", "botocore", "boto3", "urllib3"]

# ============================================================================
# Custom Formatters
# ============================================================================


class WrappingFormatter(logging.Formatter):
    """
    Custom formatter that wraps long log messages for better readability.

    This formatter extends the standard logging formatter to handle
    long messages by wrapping them at a specified width.
    """

    def __init__(
        self, fmt: Optional[str] = None, datefmt: Optional[str] = None, width: int = DEFAULT_LOG_WIDTH
    ) -> None:
        """
        Initialize the wrapping formatter.

        Args:
            fmt: Format string for log messages
            datefmt: Date format string
            width: Maximum width for log message wrapping
        """
        super().__init__(fmt, datefmt)
        self.width = width

    def format(self, record: logging.LogRecord) -> str:
        """
        Format the log record with line wrapping.

        Args:
            record: Log record to format

        Returns:
            Formatted log message with wrapping
        """
        formatted = super().format(record)

        if len(formatted) <= self.width:
            return formatted

        lines = []
        current_line = ""
        for word in formatted.split():
            if len(current_line + " " + word) <= self.width:
                current_line += (" " + word) if current_line else word
            else:
                if current_line:
                    lines.append(current_line)
                current_line = word

        if current_line:
            lines.append(current_line)

        return "\n".join(lines)


# ============================================================================
# Logging Setup Functions
# ============================================================================


def verbosity_to_level(verbosity: int) -> int:
    """
    Map a ``-d`` count to a logging level.

    Args:
        verbosity: Number of ``-d`` flags given

    Returns:
        Logging level constant
    """
    if verbosity <= 0:
        return logging.WARNING
    if verbosity == 1:
        return logging.INFO
    return logging.DEBUG


def setup_logging(verbosity: int = 0, use_wrapping: bool = False) -> None:
    """
    Setup logging configuration with multi-level verbosity.

    Args:
        verbosity: Verbosity level (0=WARNING, 1=INFO, 2=DEBUG, 3+=DEBUG with HTTP logs)
        use_wrapping: If True, use wrapping formatter for long messages

    Verbosity Levels:
        0 (default): WARNING - Only warnings, errors and the run summary
        1 (-d):      INFO - Per-asset progress
        2 (-dd):     DEBUG - Derived keys and request details
        3+ (-ddd):   DEBUG - Maximum verbosity including HTTP and S3 wire logs

    Example:
        >>> from release_mirror.utils import setup_logging
        >>> setup_logging(1)  # INFO level
    """
    level = verbosity_to_level(verbosity)

    if use_wrapping:
        handler = logging.StreamHandler()
        handler.setFormatter(WrappingFormatter(fmt=LOG_FORMAT, width=DEFAULT_LOG_WIDTH))

        root_logger = logging.getLogger()
        root_logger.handlers.clear()
        root_logger.addHandler(handler)
        root_logger.setLevel(level)
    else:
        logging.basicConfig(level=level, format=LOG_FORMAT)

    # httpx and botocore log every request which clutters the output
    http_level = logging.DEBUG if verbosity >= 3 else logging.WARNING
    for name in HTTP_LOGGERS:
        logging.getLogger(name).setLevel(http_level)


__all__ = [
    "WrappingFormatter",
    "verbosity_to_level",
    "setup_logging",
]

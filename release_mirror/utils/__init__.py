"""
Utility modules for release-mirror operations.
"""

from .logger import setup_logging, WrappingFormatter
from .session import create_session
from .config_manager import ConfigManager

from . import constants
from . import error_handling

__all__ = [
    "setup_logging",
    "WrappingFormatter",
    "create_session",
    "ConfigManager",
    "constants",
    "error_handling",
]

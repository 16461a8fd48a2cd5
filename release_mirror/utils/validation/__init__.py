"""
Validation utilities for release transfers.

Modules:
    - key: Destination key validation
"""

from .key import validate_key

__all__ = [
    "validate_key",
]

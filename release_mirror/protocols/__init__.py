"""
Protocols for type safety.

This package provides protocols that define the interfaces of the
transfer pipeline's collaborators.
"""

from .transfer_protocol import AssetSource, ObjectSink, ReadableBody

__all__ = ["ReadableBody", "AssetSource", "ObjectSink"]

"""Version information for release-mirror."""

__version__ = "1.0.0"

"""Font enumeration generator for build-time asset lookups."""

__version__ = "0.1.0"

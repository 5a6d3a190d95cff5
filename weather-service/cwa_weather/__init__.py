"""CWA weather forecast proxy."""

__version__ = "1.0.0"

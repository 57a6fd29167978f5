"""Lockfile-based sync of vendored Maven archives."""

__version__ = "0.1.0"

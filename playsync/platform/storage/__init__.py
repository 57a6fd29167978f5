"""Local filesystem storage helpers."""

from .local import empty_dir

__all__ = ["empty_dir"]

"""Lockfile persistence."""

from .manager import LockfileManager

__all__ = ["LockfileManager"]

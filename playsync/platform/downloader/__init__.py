"""Archive download module."""

from .service import ArchiveDownloadService

__all__ = ["ArchiveDownloadService"]

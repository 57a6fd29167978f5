"""Exceptions for playsync.

All sync-related exceptions inherit from PlaySyncException. None of them are
recoverable: any one raised inside a per-library task terminates the run.
Filesystem failures are not wrapped and surface as the builtin OSError.
"""

from typing import List, Optional


class PlaySyncException(Exception):
    """Base exception for library sync operations."""

    pass


class NetworkError(PlaySyncException):
    """Raised when an HTTP request fails or returns a non-success status.

    Covers listing pages, version pages, file pages and archive downloads.
    """

    def __init__(self, url: str, reason: str):
        """Initialize network error.

        Args:
            url: The URL that could not be fetched
            reason: Human-readable cause (status code or transport error)
        """
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to fetch {url}: {reason}")


class ListingError(PlaySyncException):
    """Raised when the repository listing cannot be walked to completion."""

    pass


class UnresolvedVersionError(PlaySyncException):
    """Raised when no release version can be found for a library."""

    def __init__(self, library: str, url: str):
        """Initialize unresolved version error.

        Args:
            library: Library identifier
            url: Library page that was searched for a release link
        """
        self.library = library
        self.url = url
        super().__init__(f"Unable to resolve latest version of {library} from {url}")


class AmbiguousArchiveError(PlaySyncException):
    """Raised when a library version does not map to exactly one archive."""

    def __init__(self, library: str, version: str, matches: List[str]):
        """Initialize ambiguous archive error.

        Args:
            library: Library identifier
            version: Resolved version
            matches: Every archive URL that matched the extension filter
        """
        self.library = library
        self.version = version
        self.matches = matches
        super().__init__(
            f"Expected single URL to download library: {library}/{version}, "
            f"but got: {matches}"
        )


class ConfigError(PlaySyncException):
    """Raised when required configuration (e.g. an integrity value) is missing."""

    pass


class IntegrityError(PlaySyncException):
    """Raised when file contents do not match the expected integrity value."""

    def __init__(self, path: str, expected: str, actual: Optional[str] = None):
        """Initialize integrity error.

        Args:
            path: File whose digest was checked
            expected: Expected SRI string
            actual: Computed SRI string, if available
        """
        self.path = path
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Integrity check failed for {path}: expected {expected}, got {actual}"
        )


class LockfileError(PlaySyncException):
    """Raised when the lockfile cannot be parsed."""

    pass


class LockfileNotFoundError(LockfileError):
    """Raised when the lockfile does not exist."""

    pass

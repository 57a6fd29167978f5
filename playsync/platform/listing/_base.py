"""Abstract listing provider interface.

A listing provider answers the three questions the orchestrator asks of a
repository: which libraries exist, what is the latest version of one, and
which files are published for a version. Page-shape details stay inside
implementations.
"""

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional


class ListingProvider(ABC):
    """Abstract source of library, version and file listings."""

    @abstractmethod
    async def list_libraries(self, base_url: str) -> List[str]:
        """List every library identifier published under ``base_url``.

        Args:
            base_url: Repository root listing URL

        Returns:
            Identifiers in listing order (duplicates preserved)

        Raises:
            NetworkError: If any listing page cannot be fetched
        """
        pass

    @abstractmethod
    async def get_latest_version(self, library_url: str) -> Optional[str]:
        """Return the latest release version listed on a library page.

        Args:
            library_url: Library detail page URL

        Returns:
            Version string, or None if the page lists no release
        """
        pass

    @abstractmethod
    async def list_files(
        self, version_url: str, extensions: Optional[Iterable[str]] = None
    ) -> List[str]:
        """List download URLs published for one library version.

        Args:
            version_url: Version detail page URL
            extensions: If given, only URLs whose extension is in this set are kept

        Returns:
            Download URLs in page order
        """
        pass

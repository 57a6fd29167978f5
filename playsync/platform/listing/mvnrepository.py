"""Listing provider that scrapes mvnrepository.com HTML pages.

Selectors used:
- ``.im-title a``: library entries on a group listing page
- ``.search-nav``: pagination control; its last child is marked ``current``
  on the final page
- ``.release``: release links on a library page, newest first
- ``.vbtn``: download buttons on a version page
"""

from typing import Iterable, List, Optional, Set
from urllib.parse import urljoin, urlparse

import httpx
from bs4 import BeautifulSoup

from playsync.core.exceptions import ListingError, NetworkError
from playsync.core.logging import ContextualLogger
from playsync.core.logging import logger as default_logger
from playsync.platform.listing._base import ListingProvider


def _last_path_segment(href: str) -> str:
    """Return the last non-empty path segment of an href.

    Handles both relative (``group/artifact``) and absolute
    (``/artifact/group/artifact``) forms used by the site.
    """
    segments = [segment for segment in urlparse(href).path.split("/") if segment]
    return segments[-1] if segments else ""


def _extension(href: str) -> str:
    """Return the final dot-separated segment of an href's path."""
    return urlparse(href).path.split(".")[-1]


class MvnRepositoryListingProvider(ListingProvider):
    """Scrapes library, version and file listings from mvnrepository pages."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        max_pages: int = 50,
        logger: Optional[ContextualLogger] = None,
    ):
        """Initialize the provider.

        Args:
            client: Shared async HTTP client
            max_pages: Upper bound on listing pages walked before giving up
            logger: Optional contextual logger
        """
        self._client = client
        self._max_pages = max_pages
        self.logger = logger or default_logger.with_context(component="mvnrepository")

    async def _fetch_page(self, url: str) -> BeautifulSoup:
        """Fetch a page and parse it.

        Raises:
            NetworkError: On transport errors or non-2xx responses
        """
        try:
            response = await self._client.get(url, follow_redirects=True)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise NetworkError(url, f"HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise NetworkError(url, str(e) or e.__class__.__name__) from e

        return BeautifulSoup(response.text, "html.parser")

    async def list_libraries(self, base_url: str) -> List[str]:
        """List library identifiers across every listing page.

        Pages are walked iteratively by following the pagination control
        until the final page (or a page without pagination) is reached.
        """
        libraries: List[str] = []
        visited: Set[str] = set()
        url: Optional[str] = base_url

        while url is not None:
            if len(visited) >= self._max_pages:
                raise ListingError(
                    f"Listing at {base_url} exceeded {self._max_pages} pages; aborting"
                )
            if url in visited:
                raise ListingError(f"Pagination loop detected at {url}")
            visited.add(url)

            self.logger.debug(f"Fetching listing page {url}")
            soup = await self._fetch_page(url)

            for title in soup.select(".im-title"):
                anchor = title.find("a", href=True)
                if anchor is None:
                    continue
                libraries.append(_last_path_segment(anchor["href"]))

            url = self._next_page_url(soup, base_url)

        self.logger.debug(f"Listed {len(libraries)} libraries over {len(visited)} page(s)")
        return libraries

    @staticmethod
    def _next_page_url(soup: BeautifulSoup, base_url: str) -> Optional[str]:
        nav = soup.select_one(".search-nav")
        if nav is None:
            return None

        items = nav.find_all(recursive=False)
        if not items:
            return None

        last = items[-1]
        if "current" in (last.get("class") or []):
            return None

        anchors = last.find_all("a", href=True)
        if not anchors:
            return None
        return urljoin(base_url, anchors[-1]["href"])

    async def get_latest_version(self, library_url: str) -> Optional[str]:
        """Return the version of the first release link on the library page."""
        soup = await self._fetch_page(library_url)

        release = soup.select_one(".release[href]")
        if release is None:
            return None
        return _last_path_segment(release["href"]) or None

    async def list_files(
        self, version_url: str, extensions: Optional[Iterable[str]] = None
    ) -> List[str]:
        """Return download button URLs, optionally filtered by extension."""
        soup = await self._fetch_page(version_url)
        allowed = set(extensions) if extensions is not None else None

        files = []
        for button in soup.select(".vbtn"):
            href = button.get("href")
            if not href:
                continue
            if allowed is not None and _extension(href) not in allowed:
                continue
            files.append(urljoin(version_url, href))
        return files

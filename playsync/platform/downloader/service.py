"""Archive download service for streaming files to local disk."""

import asyncio
import os
from pathlib import Path
from typing import Optional, Union

import httpx

from playsync.core.exceptions import NetworkError
from playsync.core.logging import ContextualLogger
from playsync.core.logging import logger as default_logger


class ArchiveDownloadService:
    """Streams remote archives straight to a destination path.

    Responsibilities:
    - Stream the response body to disk chunk by chunk
    - Map HTTP and transport failures to NetworkError
    - Remove a partially written file when the transfer fails
    """

    def __init__(self, client: httpx.AsyncClient, logger: Optional[ContextualLogger] = None):
        """Initialize the download service.

        Args:
            client: Shared async HTTP client
            logger: Optional contextual logger
        """
        self._client = client
        self.logger = logger or default_logger.with_context(component="downloader")

    async def download(self, url: str, destination: Union[str, Path]) -> Path:
        """Download ``url`` to ``destination``, creating or overwriting it.

        Returns only after the file has been fully written and closed.

        Args:
            url: Archive URL
            destination: Local file path

        Returns:
            The destination path

        Raises:
            NetworkError: On HTTP errors or transport failures
            OSError: On file write errors
        """
        destination = Path(destination)
        self.logger.info(f"  {destination}")

        try:
            async with self._client.stream("GET", url, follow_redirects=True) as response:
                response.raise_for_status()

                with open(destination, "wb") as f:
                    async for chunk in response.aiter_bytes():
                        f.write(chunk)
        except httpx.HTTPStatusError as e:
            self._remove_partial(destination)
            raise NetworkError(url, f"HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            self._remove_partial(destination)
            raise NetworkError(url, str(e) or e.__class__.__name__) from e
        except (OSError, asyncio.CancelledError):
            self._remove_partial(destination)
            raise

        self.logger.debug(f"Downloaded {url} to {destination}")
        return destination

    @staticmethod
    def _remove_partial(destination: Path) -> None:
        if os.path.isfile(destination):
            os.remove(destination)

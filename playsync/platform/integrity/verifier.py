"""Integrity-checked downloads with a single self-healing re-fetch."""

import os
from pathlib import Path
from typing import Optional, Union

from playsync.core.exceptions import ConfigError, IntegrityError
from playsync.core.logging import ContextualLogger
from playsync.core.logging import logger as default_logger
from playsync.platform.downloader.service import ArchiveDownloadService
from playsync.platform.integrity.sri import check_integrity, parse_integrity, pick_algorithm
from playsync.sync.async_helpers import run_in_thread_pool


class IntegrityVerifier:
    """Ensures a local archive matches its pinned integrity value.

    States:
    - No integrity value: ConfigError, nothing is touched
    - File present and valid: returned as-is, no network access
    - File present but corrupt: deleted, fetched once more and verified
    - File absent: fetched and verified

    A mismatch after a fresh fetch is fatal.
    """

    def __init__(
        self,
        downloader: ArchiveDownloadService,
        logger: Optional[ContextualLogger] = None,
    ):
        """Initialize the verifier.

        Args:
            downloader: Service used for (re-)fetching archives
            logger: Optional contextual logger
        """
        self.downloader = downloader
        self.logger = logger or default_logger.with_context(component="integrity")

    async def download_if_necessary(
        self, url: str, destination: Union[str, Path], integrity: Optional[str]
    ) -> Path:
        """Return a path to a verified copy of ``url``, downloading only if needed.

        Args:
            url: Archive URL
            destination: Local file path
            integrity: Expected SRI string

        Returns:
            The destination path

        Raises:
            ConfigError: If ``integrity`` is missing or has no supported hash
            IntegrityError: If a freshly downloaded file does not match
            NetworkError: If the download fails
        """
        if not integrity:
            raise ConfigError(
                f'No "integrity" value given for {url}, may need to run "upgrade" to '
                f"generate new library listing with updated integrity hashes."
            )
        pick_algorithm(parse_integrity(integrity))

        destination = Path(destination)
        if os.path.exists(destination):
            try:
                await run_in_thread_pool(check_integrity, destination, integrity)
                self.logger.debug(f"Cached copy of {destination.name} is valid")
                return destination
            except IntegrityError as e:
                self.logger.warning(
                    f"Cached copy of {destination.name} failed integrity check "
                    f"({e.actual}); re-downloading"
                )
                os.remove(destination)

        return await self.download_with_integrity(url, destination, integrity)

    async def download_with_integrity(
        self, url: str, destination: Union[str, Path], integrity: str
    ) -> Path:
        """Download ``url`` and verify it against ``integrity``.

        Raises:
            IntegrityError: If the downloaded file does not match
        """
        path = await self.downloader.download(url, destination)
        await run_in_thread_pool(check_integrity, path, integrity)
        return path

"""Factory wiring the orchestrator from settings."""

from typing import Optional

import httpx

from playsync.core.config import Settings, settings as default_settings
from playsync.core.logging import ContextualLogger
from playsync.core.logging import logger as default_logger
from playsync.platform.downloader.service import ArchiveDownloadService
from playsync.platform.integrity.verifier import IntegrityVerifier
from playsync.platform.listing.mvnrepository import MvnRepositoryListingProvider
from playsync.platform.lockfile.manager import LockfileManager
from playsync.sync.orchestrator import LibrarySyncOrchestrator


class SyncFactory:
    """Factory for library sync orchestrators."""

    @classmethod
    def create_http_client(cls, config: Optional[Settings] = None) -> httpx.AsyncClient:
        """Create the shared HTTP client for a run.

        The connection pool is unlimited so the number of simultaneous
        requests is governed only by MAX_CONCURRENT_TASKS.
        """
        config = config or default_settings
        return httpx.AsyncClient(
            timeout=httpx.Timeout(config.HTTP_TIMEOUT_SECONDS),
            limits=httpx.Limits(max_connections=None, max_keepalive_connections=None),
            headers={"User-Agent": config.USER_AGENT},
            follow_redirects=True,
        )

    @classmethod
    def create_orchestrator(
        cls,
        client: httpx.AsyncClient,
        config: Optional[Settings] = None,
        logger: Optional[ContextualLogger] = None,
    ) -> LibrarySyncOrchestrator:
        """Create an orchestrator backed by mvnrepository listings.

        Args:
            client: Shared async HTTP client
            config: Settings to use (default: module settings)
            logger: Optional contextual logger

        Returns:
            A LibrarySyncOrchestrator instance
        """
        config = config or default_settings
        logger = logger or default_logger

        downloader = ArchiveDownloadService(
            client, logger=logger.with_context(component="downloader")
        )
        return LibrarySyncOrchestrator(
            provider=MvnRepositoryListingProvider(
                client,
                max_pages=config.MAX_LISTING_PAGES,
                logger=logger.with_context(component="mvnrepository"),
            ),
            downloader=downloader,
            verifier=IntegrityVerifier(
                downloader, logger=logger.with_context(component="integrity")
            ),
            lockfile=LockfileManager(
                config.LOCKFILE_PATH, logger=logger.with_context(component="lockfile")
            ),
            destination_dir=config.DESTINATION_DIR,
            repository_url=config.REPOSITORY_URL,
            repository_name=config.REPOSITORY_NAME,
            archive_extension=config.ARCHIVE_EXTENSION,
            library_prefix=config.LIBRARY_PREFIX,
            license_suffix=config.LICENSE_SUFFIX,
            integrity_algorithm=config.INTEGRITY_ALGORITHM,
            max_concurrency=config.MAX_CONCURRENT_TASKS,
            logger=logger.with_context(component="orchestrator"),
        )

"""Library sync orchestrator.

Two procedures share the same collaborators:

- ``upgrade``: discover libraries, download the latest archive of each and
  pin them in the lockfile.
- ``ci``: replay the lockfile, verifying each archive and re-fetching it
  once if the local copy is corrupt.
"""

from pathlib import Path
from typing import Dict, Iterable, List, Optional

from playsync.core.constants.denylist import DEFAULT_DENYLIST
from playsync.core.exceptions import (
    AmbiguousArchiveError,
    ConfigError,
    LockfileError,
    UnresolvedVersionError,
)
from playsync.core.logging import ContextualLogger
from playsync.core.logging import logger as default_logger
from playsync.platform.downloader.service import ArchiveDownloadService
from playsync.platform.filters import filter_libraries
from playsync.platform.integrity.sri import compute_integrity, parse_integrity, pick_algorithm
from playsync.platform.integrity.verifier import IntegrityVerifier
from playsync.platform.listing._base import ListingProvider
from playsync.platform.lockfile.manager import LockfileManager
from playsync.platform.storage.local import empty_dir
from playsync.schemas.lockfile import LockEntry
from playsync.sync.async_helpers import gather_fail_fast, run_in_thread_pool

LATEST = "latest"
UPGRADE_MODE = "upgrade"


class LibrarySyncOrchestrator:
    """Coordinates listing, download, verification and lockfile persistence."""

    def __init__(
        self,
        provider: ListingProvider,
        downloader: ArchiveDownloadService,
        verifier: IntegrityVerifier,
        lockfile: LockfileManager,
        destination_dir: Path,
        repository_url: str,
        repository_name: str = "google",
        archive_extension: str = "aar",
        denylist: Iterable[str] = DEFAULT_DENYLIST,
        library_prefix: str = "play-",
        license_suffix: str = "license",
        integrity_algorithm: str = "sha512",
        max_concurrency: Optional[int] = None,
        logger: Optional[ContextualLogger] = None,
    ):
        """Initialize the orchestrator.

        Args:
            provider: Source of library, version and file listings
            downloader: Streams archives to disk
            verifier: Integrity-checked download for ci runs
            lockfile: Lockfile persistence
            destination_dir: Directory receiving the archives (emptied each run)
            repository_url: Root listing URL of the repository
            repository_name: Value of the ``?repo=`` query on library pages
            archive_extension: Archive file type to vendor
            denylist: Libraries never vendored
            library_prefix: Required library identifier prefix
            license_suffix: Identifiers with this suffix are skipped
            integrity_algorithm: Algorithm used for new lockfile digests
            max_concurrency: Cap on per-library tasks; None runs them all at once
            logger: Optional contextual logger
        """
        self.provider = provider
        self.downloader = downloader
        self.verifier = verifier
        self.lockfile = lockfile
        self.destination_dir = Path(destination_dir)
        self.repository_url = repository_url.rstrip("/")
        self.repository_name = repository_name
        self.archive_extension = archive_extension
        self.denylist = frozenset(denylist)
        self.library_prefix = library_prefix
        self.license_suffix = license_suffix
        self.integrity_algorithm = integrity_algorithm
        self.max_concurrency = max_concurrency
        self.logger = logger or default_logger.with_context(component="orchestrator")

    async def run(self, mode: Optional[str] = None):
        """Run ``upgrade`` when asked to, ``ci`` otherwise."""
        if mode == UPGRADE_MODE:
            return await self.upgrade()
        return await self.ci()

    async def gather_libraries(self) -> List[str]:
        """List the repository and apply the library policy."""
        libraries = await self.provider.list_libraries(self.repository_url)
        # Listings may repeat an identifier; each library is downloaded once
        return filter_libraries(
            list(dict.fromkeys(libraries)),
            denylist=self.denylist,
            prefix=self.library_prefix,
            excluded_suffix=self.license_suffix,
        )

    async def download_library(self, library: str, version: Optional[str] = LATEST) -> LockEntry:
        """Download one library archive and describe it as a lock entry.

        Args:
            library: Library identifier
            version: Version to download; ``latest`` (or empty) resolves it

        Returns:
            LockEntry with url, file name and integrity of the downloaded archive

        Raises:
            UnresolvedVersionError: If ``latest`` cannot be resolved
            AmbiguousArchiveError: If the version does not have exactly one archive
        """
        if not version or version == LATEST:
            library_url = f"{self.repository_url}/{library}?repo={self.repository_name}"
            version = await self.provider.get_latest_version(library_url)
            if not version:
                raise UnresolvedVersionError(library, library_url)

        archives = await self.provider.list_files(
            f"{self.repository_url}/{library}/{version}", [self.archive_extension]
        )
        if len(archives) != 1:
            raise AmbiguousArchiveError(library, version, archives)

        url = archives[0]
        name = f"{library}-{version}.{self.archive_extension}"
        destination = await self.downloader.download(url, self.destination_dir / name)
        integrity = await run_in_thread_pool(
            compute_integrity, destination, self.integrity_algorithm
        )
        return LockEntry(url=url, name=name, integrity=integrity)

    async def upgrade(self) -> List[LockEntry]:
        """Pin the latest version of every library and rewrite the lockfile."""
        self.logger.info("Obtaining latest Play Services libraries...")
        libraries = await self.gather_libraries()
        self.logger.info(f"Resolved {len(libraries)} libraries")

        empty_dir(self.destination_dir)
        entries = await gather_fail_fast(
            (self.download_library(library) for library in libraries),
            limit=self.max_concurrency,
        )

        self.lockfile.write(entries)
        return entries

    async def ci(self) -> List[Path]:
        """Restore every archive pinned in the lockfile, verifying integrity.

        Every entry is checked for a usable integrity value before the
        destination directory or the network is touched. Repeated identical
        entries are restored once.

        Raises:
            ConfigError: If any entry has no integrity value or no supported hash
            LockfileError: If two different entries share a file name
        """
        self.logger.info("Obtaining Play Services libraries from lockfile...")
        entries = self._unique_entries(self.lockfile.read())

        for entry in entries:
            if not entry.integrity:
                raise ConfigError(
                    f'No "integrity" value given for {entry.url}, may need to run "upgrade" '
                    f"to generate new library listing with updated integrity hashes."
                )
            try:
                pick_algorithm(parse_integrity(entry.integrity))
            except ConfigError as e:
                raise ConfigError(f"{e} for {entry.url}") from e

        empty_dir(self.destination_dir)
        return await gather_fail_fast(
            (
                self.verifier.download_if_necessary(
                    entry.url, self.destination_dir / entry.name, entry.integrity
                )
                for entry in entries
            ),
            limit=self.max_concurrency,
        )

    def _unique_entries(self, entries: List[LockEntry]) -> List[LockEntry]:
        """Drop repeated entries; each file name maps to one destination path."""
        by_name: Dict[str, LockEntry] = {}
        for entry in entries:
            existing = by_name.get(entry.name)
            if existing is None:
                by_name[entry.name] = entry
            elif existing != entry:
                raise LockfileError(
                    f"Lockfile {self.lockfile.path} pins {entry.name} more than once "
                    f"with different values"
                )
            else:
                self.logger.warning(f"Ignoring duplicate lockfile entry for {entry.name}")
        return list(by_name.values())

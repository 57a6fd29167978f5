"""Tests for SyncFactory wiring."""

from pathlib import Path

import httpx
import pytest

from playsync.core.config import Settings
from playsync.platform.listing.mvnrepository import MvnRepositoryListingProvider
from playsync.sync.factory import SyncFactory


@pytest.fixture
def config(tmp_path):
    """Settings pointing at a temporary workspace."""
    return Settings(
        REPOSITORY_URL="https://repo.test/artifact/com.example/",
        DESTINATION_DIR=tmp_path / "lib",
        LOCKFILE_PATH=tmp_path / "lock.json",
        MAX_CONCURRENT_TASKS=4,
        ARCHIVE_EXTENSION="jar",
    )


@pytest.mark.asyncio
async def test_create_orchestrator_uses_settings(config):
    """The orchestrator is configured from settings."""
    async with SyncFactory.create_http_client(config) as client:
        orchestrator = SyncFactory.create_orchestrator(client, config)

    assert isinstance(orchestrator.provider, MvnRepositoryListingProvider)
    assert orchestrator.repository_url == "https://repo.test/artifact/com.example"
    assert orchestrator.destination_dir == Path(config.DESTINATION_DIR)
    assert orchestrator.lockfile.path == Path(config.LOCKFILE_PATH)
    assert orchestrator.archive_extension == "jar"
    assert orchestrator.max_concurrency == 4
    assert orchestrator.verifier.downloader is orchestrator.downloader


@pytest.mark.asyncio
async def test_http_client_has_no_timeout_by_default():
    """By default requests never time out."""
    async with SyncFactory.create_http_client(Settings()) as client:
        assert client.timeout == httpx.Timeout(None)
        assert client.headers["User-Agent"] == Settings().USER_AGENT

"""Unit test conftest for setting up test environment."""

import base64
import hashlib
import os
from typing import Callable, Dict, List, Tuple, Union

REPO = "https://repo.test/artifact/com.google.android.gms"

# Set settings before importing any playsync modules
os.environ.setdefault("PLAYSYNC_REPOSITORY_URL", REPO)
os.environ.setdefault("PLAYSYNC_LOG_LEVEL", "WARNING")

import httpx  # noqa: E402
import pytest  # noqa: E402


def sri(content: bytes, algorithm: str = "sha512") -> str:
    """Build the SRI string of some bytes."""
    digest = hashlib.new(algorithm, content).digest()
    return f"{algorithm}-{base64.b64encode(digest).decode('ascii')}"


class RecordingTransport(httpx.MockTransport):
    """Mock transport serving a fixed URL -> body map and recording requests."""

    def __init__(self, routes: Dict[str, Union[str, bytes, int]]):
        self.routes = dict(routes)
        self.requests: List[httpx.Request] = []
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        body = self.routes.get(str(request.url))
        if body is None:
            return httpx.Response(404, text="not found")
        if isinstance(body, int):
            return httpx.Response(body, text="error")
        if isinstance(body, bytes):
            return httpx.Response(200, content=body)
        return httpx.Response(200, text=body)

    def calls_to(self, url: str) -> int:
        return sum(1 for request in self.requests if str(request.url) == url)


@pytest.fixture
def make_client() -> Callable[..., Tuple[httpx.AsyncClient, RecordingTransport]]:
    """Return a factory of (AsyncClient, RecordingTransport) pairs."""

    def _make(routes: Dict[str, Union[str, bytes, int]]):
        transport = RecordingTransport(routes)
        return httpx.AsyncClient(transport=transport), transport

    return _make

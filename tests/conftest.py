"""
Shared fixtures for requestr tests.
"""
import re
from typing import Callable, List, Optional

import httpx
import pytest
import pytest_asyncio

from requestr import api
from requestr.core.dispatcher import AsyncRequestr, Requestr

Handler = Callable[[httpx.Request], httpx.Response]


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it receives."""

    def __init__(self, handler: Optional[Handler] = None):
        self.requests: List[httpx.Request] = []
        self._respond = handler or (lambda request: httpx.Response(200, text="ok"))
        super().__init__(self._record)

    def _record(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._respond(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def transport():
    """Transport answering 200 "ok" to everything."""
    return RecordingTransport()


@pytest.fixture
def requestr(transport):
    """Requestr over a mock transport."""
    client = httpx.Client(transport=transport, headers={"Accept-Encoding": "identity"})
    dispatcher = Requestr(httpx_client=client)
    yield dispatcher
    client.close()


@pytest_asyncio.fixture
async def async_requestr(transport):
    """AsyncRequestr over a mock transport."""
    client = httpx.AsyncClient(transport=transport, headers={"Accept-Encoding": "identity"})
    dispatcher = AsyncRequestr(httpx_client=client)
    yield dispatcher
    await client.aclose()


@pytest.fixture
def default_requestr(requestr):
    """Install the mock-backed Requestr as the process-wide default."""
    previous = api.set_default_client(requestr)
    yield requestr
    api.set_default_client(previous)


def plain(text: str) -> str:
    """Strip ANSI styling from captured console output."""
    return re.sub(r"\x1b\[[0-9;]*m", "", text)

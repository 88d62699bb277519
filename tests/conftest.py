"""Shared fixtures for the Konnect MCP tests."""
from typing import Any, Callable, List, Optional

import httpx
import pytest

from konnect_mcp.core.api import KonnectApi


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep developer credentials out of the tests."""
    monkeypatch.delenv("KONNECT_ACCESS_TOKEN", raising=False)
    monkeypatch.delenv("KONNECT_REGION", raising=False)


class RecordingApi(KonnectApi):
    """KonnectApi whose request() records the call instead of sending it."""

    def __init__(self, response: Any = None):
        super().__init__(api_key="test-token", region="us")
        self.calls: List[tuple] = []
        self.response = {"data": []} if response is None else response

    async def request(self, endpoint: str, method: str = "GET", body: Any = None) -> Any:
        self.calls.append((endpoint, method, body))
        return self.response


@pytest.fixture
def recording_api() -> RecordingApi:
    return RecordingApi()


@pytest.fixture
def make_api() -> Callable[..., KonnectApi]:
    """Build a KonnectApi backed by an httpx.MockTransport.

    The handler receives each httpx.Request; requests are also collected in
    `api.sent` for assertions.
    """

    def _make(handler: Callable[[httpx.Request], httpx.Response], api_key: Optional[str] = "test-token", region: str = "us"):
        sent: List[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            sent.append(request)
            return handler(request)

        api = KonnectApi(api_key=api_key, region=region, transport=httpx.MockTransport(_record))
        api.sent = sent
        return api

    return _make

"""Shared fixtures for AllNewsAPI tests."""

import httpx
import pytest

from allnewsapi.client import AllNewsClient
from allnewsapi.config import get_settings


class RecordingTransport(httpx.MockTransport):
    """Mock transport that remembers every request it served."""

    def __init__(self, handler):
        self.requests: list[httpx.Request] = []

        def recording_handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(recording_handler)


@pytest.fixture
def make_client():
    """Build a client whose HTTP traffic goes to a mock handler."""

    def _make(handler, **kwargs):
        transport = RecordingTransport(handler)
        client = AllNewsClient(
            api_key="test-key",
            base_url="https://api.test.local",
            transport=transport,
            **kwargs,
        )
        return client, transport

    return _make


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached per process; reset between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()

from typing import Callable, List

import httpx
import pytest

from tripclient.core.http_client import ApiClient
from tests.factories import BASE_URL, FakeBackend, SleepRecorder


@pytest.fixture
def sleep_recorder() -> SleepRecorder:
    return SleepRecorder()


@pytest.fixture
async def make_client(sleep_recorder):
    """Build an ApiClient whose transport is the given handler."""
    clients: List[ApiClient] = []

    def _make(handler: Callable, **kwargs) -> ApiClient:
        client = ApiClient(
            base_url=BASE_URL,
            transport=httpx.MockTransport(handler),
            sleep=sleep_recorder,
            **kwargs,
        )
        clients.append(client)
        return client

    yield _make

    for client in clients:
        await client.aclose()


@pytest.fixture
def fake_backend() -> FakeBackend:
    return FakeBackend()

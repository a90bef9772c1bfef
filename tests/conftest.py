from __future__ import annotations

import pytest
import pytest_asyncio

from tests.mocks.transport import BASE_URL, StubBackend
from tripline.api import ApiClient, ApiFacade
from tripline.core.config import ClientConfig


@pytest.fixture
def config() -> ClientConfig:
    return ClientConfig(base_url=BASE_URL, timeout_seconds=1.0)


@pytest.fixture
def backend() -> StubBackend:
    return StubBackend()


@pytest_asyncio.fixture
async def client(config: ClientConfig, backend: StubBackend):
    api_client = ApiClient.from_config(config, transport=backend.transport())
    yield api_client
    await api_client.aclose()


@pytest.fixture
def facade(client: ApiClient) -> ApiFacade:
    return ApiFacade(client)

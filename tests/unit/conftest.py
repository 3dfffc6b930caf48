import httpx
import pytest
import pytest_asyncio

from auth_client import AuthClient
from tests.fixtures.json_loader import TestDataLoader
from tests.fixtures.mock_endpoint import MockAuthEndpoint

BASE_URL = "http://auth:3000"


@pytest.fixture
def test_data():
    return TestDataLoader()


@pytest.fixture
def endpoint():
    return MockAuthEndpoint()


@pytest_asyncio.fixture
async def client(endpoint):
    async with AuthClient(BASE_URL, transport=httpx.MockTransport(endpoint.handler)) as auth_client:
        yield auth_client

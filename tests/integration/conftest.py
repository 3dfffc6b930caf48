import httpx
import pytest_asyncio

from auth_client import AuthClient, AuthUserData
from tests.fixtures.fake_auth_service import create_app

BASE_URL = "http://auth:3000"
TENANT_EMAIL = "tenant@acme.com"
TENANT_PASSWORD = "Password1"


@pytest_asyncio.fixture
async def client():
    transport = httpx.ASGITransport(app=create_app())
    async with AuthClient(BASE_URL, transport=transport) as auth_client:
        yield auth_client


@pytest_asyncio.fixture
async def tenant_token(client: AuthClient) -> str:
    await client.register_tenant(TENANT_EMAIL, TENANT_PASSWORD)
    response = await client.login_tenant(TENANT_EMAIL, TENANT_PASSWORD)
    return response.access_token


@pytest_asyncio.fixture
async def user_data(client: AuthClient, tenant_token: str) -> AuthUserData:
    data = AuthUserData(
        email="jane@acme.com",
        login="jane@acme.com",
        password="Password1",
        sub="123",
        scope="admin",
    )
    await client.create_user(data, tenant_token)
    return data

import pytest

from auth_client import AuthClient, AuthServiceError
from tests.utils.json_compare import exclude_keys


@pytest.mark.asyncio
async def test_register_tenant(client: AuthClient):
    result = await client.register_tenant("owner@acme.com", "Password1")

    assert result.email == "owner@acme.com"
    assert result.login == "owner@acme.com"
    assert result.id


@pytest.mark.asyncio
async def test_register_existing_tenant_fails(client: AuthClient):
    await client.register_tenant("owner@acme.com", "Password1")

    with pytest.raises(AuthServiceError) as exc_info:
        await client.register_tenant("owner@acme.com", "Password1")

    assert exc_info.value.status_code == 409


@pytest.mark.asyncio
async def test_login_with_wrong_password_fails(client: AuthClient):
    await client.register_tenant("owner@acme.com", "Password1")

    with pytest.raises(AuthServiceError) as exc_info:
        await client.login_tenant("owner@acme.com", "WrongPassword")

    assert exc_info.value.status_code == 401
    assert exc_info.value.body == {"detail": "Invalid credentials"}


@pytest.mark.asyncio
async def test_verify_tenant_token(client: AuthClient):
    registered = await client.register_tenant("owner@acme.com", "Password1")
    login = await client.login_tenant("owner@acme.com", "Password1")

    claims = await client.verify_tenant_token(login.access_token)

    assert claims.id == registered.id
    assert claims.is_tenant is True
    assert exclude_keys(claims.to_wire()) == {
        "login": "owner@acme.com",
        "aud": "Example",
        "isTenant": True,
    }


@pytest.mark.asyncio
async def test_logout_revokes_tenant_token(client: AuthClient, tenant_token: str):
    await client.logout_tenant(tenant_token)

    with pytest.raises(AuthServiceError) as exc_info:
        await client.verify_tenant_token(tenant_token)

    assert exc_info.value.status_code == 401


@pytest.mark.asyncio
async def test_garbage_token_is_rejected(client: AuthClient):
    with pytest.raises(AuthServiceError) as exc_info:
        await client.verify_tenant_token("not-a-jwt")

    assert exc_info.value.status_code == 401

import logging
from typing import Any, Dict, Optional, Type, TypeVar
from urllib.parse import quote

import httpx

from auth_client.app.services.auth_client import IAuthClient
from auth_client.config import ApplicationConfig
from auth_client.domain.base import AuthModel
from auth_client.domain.entities import (
    AccessTokenResponse,
    AuthUserData,
    TenantRegistrationResult,
    TenantVerificationResponse,
    TenantVerificationResult,
    UserLoginData,
    UserRegistrationResult,
    UserVerificationResponse,
    UserVerificationResult,
)
from auth_client.error import AuthResponseError, AuthServiceError, AuthTransportError

ModelT = TypeVar("ModelT", bound=AuthModel)

# RFC 3986 pchar minus unreserved: kept literal inside a path segment
PATH_SEGMENT_SAFE = "!$&'()*+,;=:@"

JSON_HEADERS = {"Accept": "application/json", "Content-Type": "application/json"}


def _response_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


class AuthClient(IAuthClient):
    """
    Auth service client over HTTP/JSON

    Maps each operation to one request against the auth service. Any status
    outside 2xx raises AuthServiceError, network failures raise
    AuthTransportError. Nothing is retried.

    Usage:
        async with AuthClient("http://auth:3000") as client:
            token = await client.login_tenant("owner@acme.com", "Password1")
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        logger: Optional[logging.Logger] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._base_url = (
            base_url if base_url is not None else ApplicationConfig.AUTH_BASE_URL
        )
        self.logger = logger or logging.getLogger(__name__)
        self._http = httpx.AsyncClient(base_url=self._base_url, transport=transport)

    @property
    def base_url(self) -> str:
        return self._base_url

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        await self.aclose()

    async def aclose(self) -> None:
        """Release pooled connections"""
        await self._http.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        json: Optional[Dict[str, Any]] = None,
        token: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> httpx.Response:
        request_headers = dict(headers or {})
        if token is not None:
            request_headers["Authorization"] = f"Bearer {token}"

        self.logger.debug(f"Auth request: {method} {path}")
        try:
            response = await self._http.request(
                method, path, json=json, headers=request_headers
            )
        except httpx.RequestError as exc:
            self.logger.error(f"Auth request {method} {path} failed: {exc!r}")
            raise AuthTransportError(method, path, repr(exc)) from exc

        if not response.is_success:
            self.logger.warning(
                f"Auth service rejected {method} {path} with status {response.status_code}"
            )
            raise AuthServiceError(
                method, path, response.status_code, _response_body(response)
            )

        return response

    async def _request_model(
        self, model: Type[ModelT], method: str, path: str, **kwargs
    ) -> ModelT:
        response = await self._request(method, path, **kwargs)
        try:
            return model.model_validate(response.json())
        except ValueError as exc:
            # pydantic.ValidationError and JSONDecodeError are both ValueErrors
            self.logger.warning(
                f"Auth service returned an unexpected body for {method} {path}"
            )
            raise AuthResponseError(
                method, path, response.status_code, _response_body(response), str(exc)
            ) from exc

    # ------------------------------------------------------------------
    # Tenant operations
    # ------------------------------------------------------------------

    async def register_tenant(self, email: str, password: str) -> TenantRegistrationResult:
        return await self._request_model(
            TenantRegistrationResult,
            "POST",
            "/tenant",
            json={"email": email, "password": password},
        )

    async def login_tenant(self, email: str, password: str) -> AccessTokenResponse:
        return await self._request_model(
            AccessTokenResponse,
            "POST",
            "/tenant/login",
            json={"email": email, "password": password},
        )

    async def verify_tenant_token(self, token: str) -> TenantVerificationResult:
        envelope = await self._request_model(
            TenantVerificationResponse, "POST", "/tenant/verify", json={"token": token}
        )
        return envelope.decoded

    async def logout_tenant(self, token: str) -> None:
        await self._request("POST", "/tenant/logout", json={"token": token})

    # ------------------------------------------------------------------
    # User operations (authorized by a tenant token)
    # ------------------------------------------------------------------

    async def create_user(
        self, user_data: AuthUserData, tenant_token: str
    ) -> UserRegistrationResult:
        return await self._request_model(
            UserRegistrationResult,
            "POST",
            "/user",
            json=user_data.to_wire(),
            token=tenant_token,
            headers=JSON_HEADERS,
        )

    async def login_user(
        self, user_data: UserLoginData, tenant_token: str
    ) -> AccessTokenResponse:
        return await self._request_model(
            AccessTokenResponse,
            "POST",
            "/auth",
            json=user_data.to_wire(),
            token=tenant_token,
        )

    async def verify_user_token(
        self, user_token: str, tenant_token: str
    ) -> UserVerificationResult:
        envelope = await self._request_model(
            UserVerificationResponse,
            "POST",
            "/auth/verify",
            json={"token": user_token},
            token=tenant_token,
        )
        return envelope.decoded

    async def logout_user(self, user_token: str, tenant_token: str) -> None:
        await self._request(
            "POST", "/auth/logout", json={"token": user_token}, token=tenant_token
        )

    async def delete_user(self, login: str, tenant_token: str) -> None:
        path = f"/user/{quote(login, safe=PATH_SEGMENT_SAFE)}"
        await self._request("DELETE", path, token=tenant_token)

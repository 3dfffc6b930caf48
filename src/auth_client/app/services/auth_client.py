from abc import ABC, abstractmethod

from auth_client.domain.entities import (
    AccessTokenResponse,
    AuthUserData,
    TenantRegistrationResult,
    TenantVerificationResult,
    UserLoginData,
    UserRegistrationResult,
    UserVerificationResult,
)


class IAuthClient(ABC):
    """
    Auth service client interface - application layer

    Calling code depends on this contract so it can be exercised against a
    substitute implementation in tests.
    """

    @abstractmethod
    async def register_tenant(self, email: str, password: str) -> TenantRegistrationResult:
        """Register a new tenant"""
        pass

    @abstractmethod
    async def login_tenant(self, email: str, password: str) -> AccessTokenResponse:
        """Exchange tenant credentials for a tenant token"""
        pass

    @abstractmethod
    async def verify_tenant_token(self, token: str) -> TenantVerificationResult:
        """Return the decoded claims of a tenant token"""
        pass

    @abstractmethod
    async def logout_tenant(self, token: str) -> None:
        """Invalidate a tenant token"""
        pass

    @abstractmethod
    async def create_user(
        self, user_data: AuthUserData, tenant_token: str
    ) -> UserRegistrationResult:
        """Create a user under the tenant owning tenant_token"""
        pass

    @abstractmethod
    async def login_user(
        self, user_data: UserLoginData, tenant_token: str
    ) -> AccessTokenResponse:
        """Exchange user credentials for a user token"""
        pass

    @abstractmethod
    async def verify_user_token(
        self, user_token: str, tenant_token: str
    ) -> UserVerificationResult:
        """Return the decoded claims of a user token"""
        pass

    @abstractmethod
    async def logout_user(self, user_token: str, tenant_token: str) -> None:
        """Invalidate a user token"""
        pass

    @abstractmethod
    async def delete_user(self, login: str, tenant_token: str) -> None:
        """Delete a user by login"""
        pass

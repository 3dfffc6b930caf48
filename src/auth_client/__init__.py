"""
Auth Client

Async client for the tenant/user auth service.
"""

from .adapter.services.http_auth_client import AuthClient
from .app.services.auth_client import IAuthClient
from .config import ApplicationConfig
from .domain.entities import (
    AccessTokenResponse,
    AuthUserData,
    RegistrationResult,
    TenantRegistrationResult,
    TenantVerificationResponse,
    TenantVerificationResult,
    UserLoginData,
    UserRegistrationResult,
    UserVerificationResponse,
    UserVerificationResult,
    VerificationResult,
)
from .error import (
    AuthClientError,
    AuthResponseError,
    AuthServiceError,
    AuthTransportError,
)

__all__ = [
    # Client
    "AuthClient",
    "IAuthClient",
    "ApplicationConfig",
    # Errors
    "AuthClientError",
    "AuthServiceError",
    "AuthResponseError",
    "AuthTransportError",
    # DTOs
    "AccessTokenResponse",
    "AuthUserData",
    "RegistrationResult",
    "TenantRegistrationResult",
    "TenantVerificationResponse",
    "TenantVerificationResult",
    "UserLoginData",
    "UserRegistrationResult",
    "UserVerificationResponse",
    "UserVerificationResult",
    "VerificationResult",
]

"""
Auth Client Domain Entities

Transport-level DTOs exchanged with the auth service.
"""

from .registration import (
    RegistrationResult,
    TenantRegistrationResult,
    UserRegistrationResult,
)
from .verification import (
    VerificationResult,
    TenantVerificationResult,
    UserVerificationResult,
    TenantVerificationResponse,
    UserVerificationResponse,
)
from .user import AuthUserData, UserLoginData
from .token import AccessTokenResponse

__all__ = [
    # Registration
    "RegistrationResult",
    "TenantRegistrationResult",
    "UserRegistrationResult",
    # Verification
    "VerificationResult",
    "TenantVerificationResult",
    "UserVerificationResult",
    "TenantVerificationResponse",
    "UserVerificationResponse",
    # Inputs
    "AuthUserData",
    "UserLoginData",
    # Tokens
    "AccessTokenResponse",
]

"""
Verification Results

Decoded token claims returned by the verify endpoints. The service wraps
them in a {"decoded": ...} envelope which the client strips.
"""

from typing import Any, Optional, Union

from auth_client.domain.base import AuthModel


class VerificationResult(AuthModel):
    """Claims common to tenant and user tokens"""

    id: str
    login: str
    jti: str
    iat: Union[int, float]
    aud: str


class TenantVerificationResult(VerificationResult):
    is_tenant: bool


class UserVerificationResult(VerificationResult):
    device_id: str
    sub: str
    exp: Union[int, float]
    scope: Optional[Any] = None


class TenantVerificationResponse(AuthModel):
    decoded: TenantVerificationResult


class UserVerificationResponse(AuthModel):
    decoded: UserVerificationResult

"""
Registration Results

Returned by the auth service when a tenant or a user is created.
"""

from typing import Any, Optional

from auth_client.domain.base import AuthModel


class RegistrationResult(AuthModel):
    """Shape shared by tenant and user registration"""

    id: str
    email: str
    login: str


class TenantRegistrationResult(RegistrationResult):
    """Result of POST /tenant"""

    pass


class UserRegistrationResult(RegistrationResult):
    """Result of POST /user"""

    tenant: str
    sub: str
    scope: Optional[Any] = None

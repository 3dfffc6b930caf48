from typing import Any, Optional

from auth_client.domain.base import AuthModel


class AuthUserData(AuthModel):
    """User creation payload (POST /user)"""

    email: str
    login: str
    password: str
    sub: str
    scope: Optional[Any] = None


class UserLoginData(AuthModel):
    """User login payload (POST /auth)"""

    login: str
    password: str
    device_id: str

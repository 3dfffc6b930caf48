from auth_client.domain.base import AuthModel


class AccessTokenResponse(AuthModel):
    """Returned by tenant and user login"""

    access_token: str

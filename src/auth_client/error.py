from typing import Any, Optional


class AuthClientError(Exception):
    """Base class for every failure raised by the auth client"""

    def __init__(
        self,
        message: str,
        method: str,
        path: str,
        status_code: Optional[int] = None,
        body: Any = None,
    ):
        self.method = method
        self.path = path
        self.status_code = status_code
        self.body = body
        super().__init__(message)


class AuthServiceError(AuthClientError):
    """The auth service answered with a status outside 2xx"""

    def __init__(
        self,
        method: str,
        path: str,
        status_code: int,
        body: Any,
        message: Optional[str] = None,
    ):
        super().__init__(
            message or f"{method} {path} failed with status {status_code}",
            method,
            path,
            status_code=status_code,
            body=body,
        )


class AuthResponseError(AuthServiceError):
    """A 2xx response whose body does not have the expected shape"""

    def __init__(self, method: str, path: str, status_code: int, body: Any, reason: str):
        self.reason = reason
        super().__init__(
            method,
            path,
            status_code,
            body,
            message=f"{method} {path} returned an unexpected body: {reason}",
        )


class AuthTransportError(AuthClientError):
    """The request never got an HTTP response (connect, read, timeout...)"""

    def __init__(self, method: str, path: str, reason: str):
        super().__init__(
            f"{method} {path} could not reach the auth service: {reason}", method, path
        )

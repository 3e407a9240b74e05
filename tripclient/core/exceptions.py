from typing import Optional


class ApiError(Exception):
    """Base error for every failed call to the itinerary backend.

    status_code is the backend HTTP status when one was received, otherwise None.
    retryable marks failures the client may attempt again.
    """

    retryable: bool = False

    def __init__(self, detail: str, status_code: Optional[int] = None):
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code

    def __str__(self) -> str:
        if self.status_code is not None:
            return f"API Error: {self.status_code} - {self.detail}"
        return f"API Error: {self.detail}"


class NotFoundError(ApiError):
    def __init__(self, detail: str = "resource not found."):
        super().__init__(detail, status_code=404)


class UnauthenticatedError(ApiError):
    def __init__(self, detail: str = "authentication required."):
        super().__init__(detail, status_code=401)


class ForbiddenError(ApiError):
    def __init__(self, detail: str = "access denied."):
        super().__init__(detail, status_code=403)


class ClientError(ApiError):
    """Any other 4xx response."""


class ServerError(ApiError):
    retryable = True


class NetworkError(ApiError):
    retryable = True


class RequestTimeoutError(NetworkError):
    pass


class ParseError(ApiError):
    pass


class UnknownError(ApiError):
    pass


class UserResolutionError(Exception):
    """Raised when no backend user can be found or created for an external identity."""

    def __init__(self, external_id: str):
        super().__init__(f"Could not resolve backend user for external id {external_id}")
        self.external_id = external_id


def classify_response(status_code: int, body: str) -> ApiError:
    if status_code == 404:
        return NotFoundError()
    if status_code == 401:
        return UnauthenticatedError(body or "authentication required.")
    if status_code == 403:
        return ForbiddenError(body or "access denied.")
    if 400 <= status_code < 500:
        return ClientError(body, status_code=status_code)
    if status_code >= 500:
        return ServerError(body, status_code=status_code)
    return UnknownError(body or "unexpected response", status_code=status_code)

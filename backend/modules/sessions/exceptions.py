"""
Session client exceptions.

These exceptions are raised by the session client and can be caught
by API error handlers to return appropriate HTTP responses.
"""

from typing import Optional

from shared.exceptions import BadRequestError, UsersServiceError


class UnsupportedProviderError(BadRequestError):
    """Raised when an OAuth provider outside the supported set is requested."""

    def __init__(self, provider: str):
        super().__init__(
            f"Unsupported OAuth provider: {provider}",
            code="UNSUPPORTED_PROVIDER",
            details={"provider": provider},
        )
        self.provider = provider


class UpstreamError(UsersServiceError):
    """
    Raised when the users service rejects or fails a request.

    `status` is the HTTP status the service answered with, or None when
    the request never got a response (connection error, timeout).
    """

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message, details={"status": status})
        self.status = status

"""
Coordinator exceptions.
"""

from shared.exceptions import BadRequestError


class MissingAuthorizationCodeError(BadRequestError):
    """
    Raised when a code exchange is requested on a page without a `code`
    query parameter. This is a caller bug (exchange called outside the
    OAuth callback page), not a runtime condition to recover from.
    """

    def __init__(self, url: str):
        super().__init__(
            "Cannot exchange code for session token: no code provided in the URL search params.",
            code="MISSING_AUTHORIZATION_CODE",
            details={"url": url},
        )

"""API models package."""

from .errors import ErrorResponse
from .session import LoginRedirectResponse, SuccessResponse

__all__ = [
    "ErrorResponse",
    "LoginRedirectResponse",
    "SuccessResponse",
]

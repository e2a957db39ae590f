"""API services package."""

from .session_cookie import set_session_cookie, clear_session_cookie

__all__ = [
    "set_session_cookie",
    "clear_session_cookie",
]

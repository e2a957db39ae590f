"""
Session cookie transport.

The session token travels as an httpOnly cookie scoped to the whole site
and usable cross-site (SameSite=None; Secure). Clearing re-sets the
cookie with max-age 0 and the same scoping attributes, otherwise browsers
treat it as a different cookie and keep the old one.
"""

from fastapi import Response

from shared.config import Settings


def _cookie_attributes() -> dict:
    return {
        "path": "/",
        "httponly": True,
        "samesite": "none",
        "secure": True,
    }


def set_session_cookie(response: Response, token: str, settings: Settings) -> None:
    """Store a session token on the response."""
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=settings.session_cookie_max_age,
        **_cookie_attributes(),
    )


def clear_session_cookie(response: Response, settings: Settings) -> None:
    """Expire the session cookie on the response."""
    response.set_cookie(
        key=settings.session_cookie_name,
        value="",
        max_age=0,
        **_cookie_attributes(),
    )

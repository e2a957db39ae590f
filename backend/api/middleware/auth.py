"""
Session cookie authentication.

Resolves the session cookie against the users service on every request
and attaches the user to the request state.
"""

from fastapi import Depends, HTTPException, Request, status

from shared.config import get_settings
from shared.exceptions import AuthenticationError
from shared.models import UserRecord
from modules.sessions.interfaces import ISessionClient

from ..dependencies import get_session_client

# Key under which the resolved user is attached to request.state
USER_STATE_KEY = "user"


class MissingSessionError(AuthenticationError):
    """Raised when the request carries no session cookie."""

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class AuthError(HTTPException):
    """Authentication error with consistent format."""

    def __init__(self, detail: str):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
        )


async def get_current_user(
    request: Request,
    session_client: ISessionClient = Depends(get_session_client),
) -> UserRecord:
    """
    Dependency that requires a valid session.

    A request without the session cookie is rejected before the users
    service is contacted. A cookie that doesn't resolve to a user is
    rejected with AuthError. There is no caching: each protected request
    costs one round-trip to the users service.

    Usage:
        @router.get("/api/todos")
        async def list_todos(user: UserRecord = Depends(get_current_user)):
            return await todos.for_user(user.id)
    """
    session_token = request.cookies.get(get_settings().session_cookie_name)

    if not isinstance(session_token, str):
        raise MissingSessionError()

    user = await session_client.resolve_session(session_token)

    if user is None:
        raise AuthError("Invalid session token")

    setattr(request.state, USER_STATE_KEY, user)
    return user


# Type alias for cleaner route definitions
RequireUser = Depends(get_current_user)

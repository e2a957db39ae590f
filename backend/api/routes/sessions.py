"""
Session endpoints.

Turns an OAuth authorization code into a session cookie, and ends the
session on logout.
"""

import logging

from fastapi import APIRouter, Depends, Request, Response

from shared.config import get_settings
from modules.sessions.interfaces import ISessionClient
from modules.sessions.models import ExchangeCodeRequest
from ..dependencies import get_session_client
from ..models.errors import ErrorResponse
from ..models.session import SuccessResponse
from ..services.session_cookie import set_session_cookie, clear_session_cookie

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/sessions",
    response_model=SuccessResponse,
    responses={502: {"model": ErrorResponse}},
)
async def create_session(
    body: ExchangeCodeRequest,
    response: Response,
    session_client: ISessionClient = Depends(get_session_client),
) -> SuccessResponse:
    """
    Exchange an authorization code for a session.

    The session token is stored in an httpOnly cookie and never returned
    in the body. The code is sent upstream exactly once.
    """
    session_token = await session_client.exchange_code(body.code)
    set_session_cookie(response, session_token, get_settings())
    return SuccessResponse()


@router.get("/logout", response_model=SuccessResponse)
async def logout(
    request: Request,
    response: Response,
    session_client: ISessionClient = Depends(get_session_client),
) -> SuccessResponse:
    """
    End the current session.

    Revocation upstream is best-effort; the cookie is cleared either way.
    """
    settings = get_settings()
    session_token = request.cookies.get(settings.session_cookie_name)

    if isinstance(session_token, str):
        await session_client.revoke_session(session_token)
    else:
        logger.debug("Logout without a session cookie")

    clear_session_cookie(response, settings)
    return SuccessResponse()

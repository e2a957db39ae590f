"""
OAuth endpoints.

Hands the client the provider URL that starts the consent flow.
"""

from fastapi import APIRouter, Depends

from modules.sessions.interfaces import ISessionClient
from ..dependencies import get_session_client
from ..models.errors import ErrorResponse
from ..models.session import LoginRedirectResponse

router = APIRouter()


@router.get(
    "/{provider}/redirect_url",
    response_model=LoginRedirectResponse,
    responses={400: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
)
async def get_login_redirect_url(
    provider: str,
    session_client: ISessionClient = Depends(get_session_client),
) -> LoginRedirectResponse:
    """
    Get the OAuth redirect URL for a provider.

    Unsupported providers are rejected with 400 without calling the
    users service; upstream failures surface as 502.
    """
    redirect_url = await session_client.get_redirect_url(provider)
    return LoginRedirectResponse(redirect_url=redirect_url)

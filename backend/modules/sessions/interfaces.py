"""
Session client interface.

Routes and the request authenticator depend on ISessionClient, not the
concrete implementation. This enables testing with fakes.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import UserRecord


@runtime_checkable
class ISessionClient(Protocol):
    """
    Interface for calls to the remote users service.

    Each call is an independent request/response exchange; implementations
    hold configuration only, never session state.
    """

    async def get_redirect_url(self, provider: str) -> str:
        """
        Get the URL that starts the provider's OAuth consent flow.

        Raises:
            UnsupportedProviderError: Before any network call, if the provider
                is not supported
            UpstreamError: If the users service does not answer with success
        """
        ...

    async def exchange_code(self, code: str) -> str:
        """
        Exchange a one-time authorization code for a session token.

        Raises:
            UpstreamError: If the users service does not answer with success
        """
        ...

    async def resolve_session(self, token: str) -> Optional[UserRecord]:
        """
        Resolve a session token to the user it belongs to.

        Returns:
            UserRecord if the session is valid, None otherwise. Never raises.
        """
        ...

    async def revoke_session(self, token: str) -> None:
        """Revoke a session token. Best-effort, never raises."""
        ...

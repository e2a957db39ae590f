"""
Session client implementation.

Talks to the remote users service over HTTP with httpx. Every call opens
its own client, so instances carry configuration only and are safe to share
across requests.

Error policy:
- get_redirect_url / exchange_code raise UpstreamError; the caller must react.
- resolve_session / revoke_session never raise; failures degrade to
  "no user" and "ignored" respectively.
"""

import logging
from typing import Optional, TypeVar

import httpx
from pydantic import BaseModel

from shared.models import UserRecord

from .interfaces import ISessionClient
from .models import (
    SUPPORTED_OAUTH_PROVIDERS,
    CurrentUserResponse,
    RedirectUrlResponse,
    SessionTokenResponse,
    UsersServiceOptions,
)
from .exceptions import UnsupportedProviderError, UpstreamError

logger = logging.getLogger(__name__)

ResponseModel = TypeVar("ResponseModel", bound=BaseModel)


class SessionClient(ISessionClient):
    """
    Implementation of the session client.

    Args:
        options: Users service URL, API key and timeout
        transport: Optional httpx transport (tests pass httpx.MockTransport)
    """

    def __init__(
        self,
        options: UsersServiceOptions,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._options = options
        self._transport = transport

    @property
    def options(self) -> UsersServiceOptions:
        return self._options

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._options.api_url,
            headers={"x-api-key": self._options.api_key},
            timeout=self._options.timeout,
            transport=self._transport,
        )

    async def _request_or_raise(
        self,
        method: str,
        path: str,
        action: str,
        **kwargs,
    ) -> httpx.Response:
        """Send a request, raising UpstreamError on transport failure or non-2xx."""
        try:
            async with self._client() as client:
                response = await client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            raise UpstreamError(f"Failed to {action}: {e}") from e

        if not response.is_success:
            raise UpstreamError(
                f"Failed to {action}: {response.reason_phrase}",
                status=response.status_code,
            )
        return response

    @staticmethod
    def _parse_or_raise(
        response: httpx.Response,
        model: type[ResponseModel],
        action: str,
    ) -> ResponseModel:
        try:
            return model.model_validate(response.json())
        except ValueError as e:
            raise UpstreamError(
                f"Failed to {action}: malformed response body",
                status=response.status_code,
            ) from e

    async def get_redirect_url(self, provider: str) -> str:
        """Fetch the OAuth redirect URL for a supported provider."""
        if provider not in SUPPORTED_OAUTH_PROVIDERS:
            raise UnsupportedProviderError(provider)

        action = f"get redirect URL for provider {provider}"
        response = await self._request_or_raise(
            "GET", f"/oauth/{provider}/redirect_url", action
        )
        return self._parse_or_raise(response, RedirectUrlResponse, action).redirect_url

    async def exchange_code(self, code: str) -> str:
        """
        Exchange an authorization code for a session token.

        Codes are single-use upstream, so a failed exchange is never retried.
        """
        action = "exchange code for session token"
        response = await self._request_or_raise(
            "POST", "/sessions", action, json={"code": code}
        )
        session_token = self._parse_or_raise(response, SessionTokenResponse, action).session_token
        logger.info("Exchanged authorization code for a session token")
        return session_token

    async def resolve_session(self, token: str) -> Optional[UserRecord]:
        """
        Fetch the user that owns a session token.

        An invalid, expired or unknown token is an expected outcome and
        yields None, as does any transport failure.
        """
        try:
            async with self._client() as client:
                response = await client.get(
                    "/users/me",
                    headers={"Authorization": f"Bearer {token}"},
                )
        except httpx.HTTPError as e:
            logger.error(f"Error validating session: {e}")
            return None

        if not response.is_success:
            logger.debug(f"Users service rejected session (HTTP {response.status_code})")
            return None

        try:
            return CurrentUserResponse.model_validate(response.json()).data
        except ValueError as e:
            logger.warning(f"Malformed user response from users service: {e}")
            return None

    async def revoke_session(self, token: str) -> None:
        """Delete a session upstream. Failures are logged and ignored."""
        try:
            async with self._client() as client:
                response = await client.delete(
                    "/sessions",
                    headers={"Authorization": f"Bearer {token}"},
                )
        except httpx.HTTPError as e:
            logger.error(f"Error deleting session: {e}")
            return

        if not response.is_success:
            logger.warning(f"Users service failed to delete session (HTTP {response.status_code})")


# Stateless function API. Each call builds a throwaway client from the options.


async def get_redirect_url(provider: str, options: UsersServiceOptions) -> str:
    """Fetch the OAuth redirect URL. See SessionClient.get_redirect_url."""
    return await SessionClient(options).get_redirect_url(provider)


async def exchange_code(code: str, options: UsersServiceOptions) -> str:
    """Exchange an authorization code. See SessionClient.exchange_code."""
    return await SessionClient(options).exchange_code(code)


async def resolve_session(token: str, options: UsersServiceOptions) -> Optional[UserRecord]:
    """Resolve a session token. See SessionClient.resolve_session."""
    return await SessionClient(options).resolve_session(token)


async def revoke_session(token: str, options: UsersServiceOptions) -> None:
    """Revoke a session token. See SessionClient.revoke_session."""
    await SessionClient(options).revoke_session(token)

"""
Sessions module.

Client for the remote users service: OAuth redirect URLs, code exchange,
session resolution and revocation.

Public API:
- ISessionClient: Interface for session operations
- SessionClient: httpx implementation bound to UsersServiceOptions
- get_redirect_url, exchange_code, resolve_session, revoke_session: stateless functions
- Session exceptions: UnsupportedProviderError, UpstreamError
"""

from .interfaces import ISessionClient
from .models import (
    SUPPORTED_OAUTH_PROVIDERS,
    OAuthProvider,
    UsersServiceOptions,
    ExchangeCodeRequest,
)
from .exceptions import UnsupportedProviderError, UpstreamError
from .service import (
    SessionClient,
    get_redirect_url,
    exchange_code,
    resolve_session,
    revoke_session,
)

__all__ = [
    # Interface
    "ISessionClient",
    # Implementation
    "SessionClient",
    "get_redirect_url",
    "exchange_code",
    "resolve_session",
    "revoke_session",
    # Models
    "SUPPORTED_OAUTH_PROVIDERS",
    "OAuthProvider",
    "UsersServiceOptions",
    "ExchangeCodeRequest",
    # Exceptions
    "UnsupportedProviderError",
    "UpstreamError",
]

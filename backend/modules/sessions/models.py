"""
Session client data models.

These models define the configuration of the users service client and
the wire shapes of its request and response bodies.
"""

from typing import Literal, Optional
from pydantic import BaseModel, Field, field_validator

from shared.config import DEFAULT_USERS_SERVICE_API_URL
from shared.models import UserRecord


SUPPORTED_OAUTH_PROVIDERS: tuple[str, ...] = ("google",)
OAuthProvider = Literal["google"]


class UsersServiceOptions(BaseModel):
    """
    Per-deployment configuration for calls to the users service.

    Both the base URL and the API key go out with every request.
    An empty `api_url` falls back to the production endpoint.
    """

    api_key: str = Field(..., description="API key sent as the x-api-key header")
    api_url: str = Field(
        default=DEFAULT_USERS_SERVICE_API_URL,
        description="Base URL of the users service",
    )
    timeout: Optional[float] = Field(
        default=10.0,
        description="Per-request timeout in seconds (None disables it)",
    )

    model_config = {"frozen": True}

    @field_validator("api_url", mode="before")
    @classmethod
    def _default_api_url(cls, value: Optional[str]) -> str:
        if not value:
            return DEFAULT_USERS_SERVICE_API_URL
        return value.rstrip("/")


class ExchangeCodeRequest(BaseModel):
    """Body of a code exchange request."""

    code: str = Field(..., min_length=1, description="OAuth authorization code")


class RedirectUrlResponse(BaseModel):
    """Users service response for GET /oauth/{provider}/redirect_url."""

    redirect_url: str


class SessionTokenResponse(BaseModel):
    """Users service response for POST /sessions."""

    session_token: str


class CurrentUserResponse(BaseModel):
    """Users service response for GET /users/me."""

    data: UserRecord

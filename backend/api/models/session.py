"""
Session models for the same-origin auth endpoints.

These are the bodies the client session coordinator sends and reads.
"""

from pydantic import BaseModel, Field


class LoginRedirectResponse(BaseModel):
    """Where to send the browser to start the OAuth flow."""

    redirect_url: str = Field(..., serialization_alias="redirectUrl")


class SuccessResponse(BaseModel):
    """Acknowledgement for session writes."""

    success: bool = True

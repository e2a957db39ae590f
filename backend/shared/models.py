"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from typing import Optional
from pydantic import BaseModel, Field


class ProviderProfile(BaseModel):
    """
    Profile data reported by the upstream OAuth provider.

    Only `email`, `email_verified` and `sub` are guaranteed; the name and
    picture fields depend on the scopes the user granted.
    """

    email: str = Field(..., description="Email address at the provider")
    email_verified: bool = Field(..., description="Whether the provider verified the email")
    family_name: Optional[str] = Field(None, description="Family name")
    given_name: Optional[str] = Field(None, description="Given name")
    hd: Optional[str] = Field(None, description="Hosted domain (Google Workspace)")
    name: Optional[str] = Field(None, description="Full display name")
    picture: Optional[str] = Field(None, description="Avatar URL")
    sub: str = Field(..., description="Subject identifier at the provider")

    model_config = {
        "frozen": True,
        "extra": "allow",
    }


class UserRecord(BaseModel):
    """
    A user as known to the remote users service.

    This is a read-only projection of remote state. It is fetched per
    request and attached to the request context, never mutated locally.
    Emails and timestamps are kept as the strings the users service sent,
    and unknown upstream fields are kept, so the record round-trips
    unchanged.
    """

    id: str = Field(..., description="Stable user ID")
    email: str = Field(..., description="User's email address")
    google_sub: str = Field(..., description="Upstream provider subject identifier")
    google_user_data: ProviderProfile = Field(..., description="Provider profile")

    # Timestamps, as formatted upstream
    last_signed_in_at: str = Field(..., description="Last sign-in time")
    created_at: str = Field(..., description="Account creation time")
    updated_at: str = Field(..., description="Last update time")

    model_config = {
        "frozen": True,  # Make immutable for safety
        "extra": "allow",  # Keep fields added upstream
    }

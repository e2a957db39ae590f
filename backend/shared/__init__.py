"""
Shared infrastructure for SessionGate backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- exceptions: Error hierarchy with HTTP statuses
- models: The user record returned by the users service

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .exceptions import (
    SessionGateError,
    BadRequestError,
    AuthenticationError,
    UsersServiceError,
)
from .models import ProviderProfile, UserRecord

__all__ = [
    "Settings",
    "get_settings",
    "SessionGateError",
    "BadRequestError",
    "AuthenticationError",
    "UsersServiceError",
    "ProviderProfile",
    "UserRecord",
]

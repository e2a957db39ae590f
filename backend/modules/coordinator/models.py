"""
Coordinator data models.

Local authentication state as seen by consumers of the coordinator.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field

from shared.models import UserRecord


class AuthStatus(str, Enum):
    """Where the coordinator is in resolving the current user."""

    UNRESOLVED = "unresolved"        # Mounted, first resolution not started or settled
    RESOLVING = "resolving"          # A user fetch is in flight
    AUTHENTICATED = "authenticated"  # Last resolution produced a user
    ANONYMOUS = "anonymous"          # Last resolution produced no user


class AuthSnapshot(BaseModel):
    """
    Immutable view of the coordinator's local authentication state.

    `is_pending` means "we don't know yet", not "there is no user": it stays
    True until the first fetch on mount settles, whatever its outcome.
    """

    user: Optional[UserRecord] = Field(None, description="Current user, if any")
    is_pending: bool = Field(default=True, description="Initial resolution not settled yet")
    is_fetching: bool = Field(default=False, description="A user fetch is in flight")

    model_config = {"frozen": True}

    @property
    def status(self) -> AuthStatus:
        if self.is_fetching:
            return AuthStatus.RESOLVING
        if self.is_pending:
            return AuthStatus.UNRESOLVED
        if self.user is not None:
            return AuthStatus.AUTHENTICATED
        return AuthStatus.ANONYMOUS

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

"""
Coordinator interfaces.

IPage abstracts the page the coordinator lives in (its URL and full
navigation). ISessionCoordinator is what application code depends on.
"""

import asyncio
from typing import Callable, Optional, Protocol, runtime_checkable

from shared.models import UserRecord

from .models import AuthSnapshot, AuthStatus


@runtime_checkable
class IPage(Protocol):
    """The hosting page: current URL and navigation."""

    @property
    def url(self) -> str:
        """The full current URL, including the query string."""
        ...

    def navigate(self, url: str) -> None:
        """Perform a full navigation to `url`."""
        ...


AuthListener = Callable[[AuthSnapshot], None]


@runtime_checkable
class ISessionCoordinator(Protocol):
    """
    Interface for the client-side session coordinator.

    One instance per page; it exclusively owns the local authentication state.
    """

    @property
    def snapshot(self) -> AuthSnapshot:
        ...

    @property
    def user(self) -> Optional[UserRecord]:
        ...

    @property
    def status(self) -> AuthStatus:
        ...

    async def mount(self) -> None:
        """Resolve the current user once and clear the pending flag."""
        ...

    def fetch_user(self) -> "asyncio.Task[Optional[UserRecord]]":
        """Fetch the current user, sharing any fetch already in flight."""
        ...

    async def redirect_to_login(self) -> None:
        """Navigate to the provider's login page. Never raises."""
        ...

    def exchange_code_for_session(self) -> "asyncio.Task[Optional[UserRecord]]":
        """
        Exchange the page's authorization code for a session, at most once.

        Raises:
            MissingAuthorizationCodeError: Synchronously, if the page URL has no code
        """
        ...

    async def logout(self) -> None:
        """Clear the user locally, then end the session remotely. Never raises."""
        ...

    def subscribe(self, listener: AuthListener) -> Callable[[], None]:
        """Register a state listener; returns a function that removes it."""
        ...

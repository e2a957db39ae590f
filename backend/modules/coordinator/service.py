"""
Client session coordinator.

Tracks the current user for one page of a long-lived client process and
exposes the login, code exchange and logout actions. All calls go to the
host application's same-origin endpoints; the httpx client's cookie jar
carries the session cookie the way a browser would.

The coordinator runs on a single event loop. Overlapping calls from
repeated lifecycle events are coalesced with SingleFlight slots:
- fetch_user shares one in-flight fetch and starts fresh once it settles.
- exchange_code_for_session is latched: an authorization code is consumed
  at most once per page, so later calls get the first outcome.
"""

import asyncio
import logging
from typing import Callable, Optional
from urllib.parse import parse_qs, urlsplit

import httpx

from shared.models import UserRecord

from .interfaces import AuthListener, IPage, ISessionCoordinator
from .models import AuthSnapshot, AuthStatus
from .exceptions import MissingAuthorizationCodeError
from .single_flight import SingleFlight

logger = logging.getLogger(__name__)

CURRENT_USER_PATH = "/api/users/me"
REDIRECT_URL_PATH = "/api/oauth/google/redirect_url"
SESSIONS_PATH = "/api/sessions"
LOGOUT_PATH = "/api/logout"


class PageContext(IPage):
    """
    In-memory page: holds the current URL and records navigations.

    A full navigation replaces the URL, like assigning window.location.
    """

    def __init__(self, url: str):
        self._url = url
        self.history: list[str] = [url]

    @property
    def url(self) -> str:
        return self._url

    def navigate(self, url: str) -> None:
        logger.info(f"Navigating to {urlsplit(url).netloc or url}")
        self._url = url
        self.history.append(url)


class SessionCoordinator(ISessionCoordinator):
    """
    Owns the local authentication state for one page.

    State is read through `snapshot` and the accessor properties and
    changes only through the coordinator's own operations. Listeners
    registered with `subscribe` get a fresh snapshot after every change.

    Args:
        http_client: Client whose base_url is the host application's origin
        page: The page the coordinator lives in
    """

    def __init__(self, http_client: httpx.AsyncClient, page: IPage):
        self._http = http_client
        self._page = page

        self._user: Optional[UserRecord] = None
        self._is_pending = True
        self._is_fetching = False
        # Bumped by logout so a fetch started earlier can't restore the user
        self._generation = 0

        self._listeners: list[AuthListener] = []
        self._user_flight: SingleFlight[Optional[UserRecord]] = SingleFlight("fetch_user")
        self._exchange_flight: SingleFlight[Optional[UserRecord]] = SingleFlight(
            "exchange_code_for_session", clear_on_settle=False
        )

    @classmethod
    def for_origin(
        cls,
        origin: str,
        page: IPage,
        timeout: Optional[float] = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "SessionCoordinator":
        """Build a coordinator with its own HTTP client for `origin`."""
        client = httpx.AsyncClient(base_url=origin, timeout=timeout, transport=transport)
        return cls(client, page)

    async def aclose(self) -> None:
        """Cancel any fetch or exchange still running, then close the HTTP client."""
        await self._user_flight.cancel()
        await self._exchange_flight.cancel()
        await self._http.aclose()

    async def __aenter__(self) -> "SessionCoordinator":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    # State accessors

    @property
    def snapshot(self) -> AuthSnapshot:
        return AuthSnapshot(
            user=self._user,
            is_pending=self._is_pending,
            is_fetching=self._is_fetching,
        )

    @property
    def user(self) -> Optional[UserRecord]:
        return self._user

    @property
    def is_pending(self) -> bool:
        return self._is_pending

    @property
    def is_fetching(self) -> bool:
        return self._is_fetching

    @property
    def status(self) -> AuthStatus:
        return self.snapshot.status

    def subscribe(self, listener: AuthListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        snapshot = self.snapshot
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                logger.exception("Auth state listener failed")

    # Operations

    async def mount(self) -> None:
        """
        Resolve the current user once on mount.

        Pending is cleared when the fetch settles, whatever the outcome.
        """
        try:
            await self.fetch_user()
        finally:
            if self._is_pending:
                self._is_pending = False
                self._notify()

    def fetch_user(self) -> "asyncio.Task[Optional[UserRecord]]":
        """
        Fetch the current user from GET /api/users/me.

        A call made while a fetch is in flight returns that same task. The
        task resolves to the stored user, or None if the request failed or
        the session is not valid.
        """
        return self._user_flight.run(self._fetch_user)

    async def _fetch_user(self) -> Optional[UserRecord]:
        generation = self._generation
        self._is_fetching = True
        self._notify()

        try:
            user = await self._load_user()
            if generation == self._generation:
                self._user = user
            else:
                logger.debug("Discarding user fetched before logout")
        finally:
            self._is_fetching = False
            self._notify()

        return self._user

    async def _load_user(self) -> Optional[UserRecord]:
        try:
            response = await self._http.get(CURRENT_USER_PATH)
        except httpx.HTTPError as e:
            logger.error(f"Failed to fetch user: {e}")
            return None

        if not response.is_success:
            logger.debug(
                f"Failed to fetch user: API responded with HTTP status {response.status_code}"
            )
            return None

        try:
            return UserRecord.model_validate(response.json())
        except ValueError as e:
            logger.error(f"Failed to fetch user: malformed response body: {e}")
            return None

    async def redirect_to_login(self) -> None:
        """
        Navigate the page to the OAuth consent screen.

        Errors are logged and the page stays where it is.
        """
        try:
            response = await self._http.get(REDIRECT_URL_PATH)
        except httpx.HTTPError as e:
            logger.error(f"Failed to get login redirect URL: {e}")
            return

        if not response.is_success:
            logger.error(
                "Failed to get login redirect URL: "
                f"API responded with HTTP status {response.status_code}"
            )
            return

        try:
            redirect_url = response.json()["redirectUrl"]
        except (ValueError, KeyError, TypeError) as e:
            logger.error(f"Failed to get login redirect URL: malformed response body: {e}")
            return

        self._page.navigate(redirect_url)

    def exchange_code_for_session(self) -> "asyncio.Task[Optional[UserRecord]]":
        """
        Exchange the `code` query parameter for a session via POST /api/sessions.

        Use this only on the OAuth callback page. The first call's task is
        kept for the lifetime of the coordinator; every later call returns
        it, so the code is never sent twice. On success the user is
        refetched and the task resolves to it. On failure the error is
        logged and the task resolves to None.

        Raises:
            MissingAuthorizationCodeError: If no exchange has been started
                and the page URL carries no code
        """
        if self._exchange_flight.task is not None:
            return self._exchange_flight.task

        code = self._read_code()
        return self._exchange_flight.run(lambda: self._exchange(code))

    def _read_code(self) -> str:
        url = self._page.url
        codes = parse_qs(urlsplit(url).query, keep_blank_values=True).get("code")
        if not codes or not codes[0]:
            raise MissingAuthorizationCodeError(url)
        return codes[0]

    async def _exchange(self, code: str) -> Optional[UserRecord]:
        try:
            response = await self._http.post(SESSIONS_PATH, json={"code": code})
        except httpx.HTTPError as e:
            logger.error(f"Failed to exchange code for session token: {e}")
            return None

        if not response.is_success:
            logger.error(
                "Failed to exchange code for session token: "
                f"API responded with HTTP status {response.status_code}"
            )
            return None

        # A fetch already in flight was sent without the new session cookie.
        # Let it settle, then refetch so the user reflects the new session.
        stale = self._user_flight.task
        if stale is not None and not stale.done():
            await asyncio.wait({stale})
        return await self.fetch_user()

    async def logout(self) -> None:
        """
        Log out via GET /api/logout.

        The user is cleared before the request and stays cleared even if
        the request fails.
        """
        self._generation += 1
        self._user = None
        self._notify()

        try:
            response = await self._http.get(LOGOUT_PATH)
        except httpx.HTTPError as e:
            logger.error(f"Failed to logout: {e}")
            return

        if not response.is_success:
            logger.warning(f"Logout responded with HTTP status {response.status_code}")

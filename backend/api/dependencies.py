"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.
"""

from typing import TYPE_CHECKING

from shared.config import Settings, get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.sessions.interfaces import ISessionClient
    from modules.sessions.models import UsersServiceOptions


def users_service_options(settings: Settings) -> "UsersServiceOptions":
    """Build users service client options from application settings."""
    from modules.sessions.models import UsersServiceOptions

    return UsersServiceOptions(
        api_url=settings.users_service_api_url,
        api_key=settings.users_service_api_key,
        timeout=settings.users_service_timeout,
    )


class ServiceContainer:
    """
    Container for all service instances.

    Services are created lazily on first access and cached as singletons
    within the container. Use reset() to clear all cached services for testing.
    """

    def __init__(self) -> None:
        self._session_client: "ISessionClient | None" = None

    @property
    def sessions(self) -> "ISessionClient":
        """Get the session client instance."""
        if self._session_client is None:
            from modules.sessions.service import SessionClient
            self._session_client = SessionClient(users_service_options(get_settings()))
        return self._session_client

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._session_client = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_session_client() -> "ISessionClient":
    """FastAPI dependency for the session client."""
    return get_container().sessions

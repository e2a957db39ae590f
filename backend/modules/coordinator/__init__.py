"""
Coordinator module.

Client-side session state for a long-lived UI process: the current user,
deduplicated fetch and code exchange, login redirect and logout.

Public API:
- ISessionCoordinator: Interface for the coordinator
- SessionCoordinator: httpx implementation against the same-origin API
- IPage / PageContext: The hosting page (URL and navigation)
- AuthSnapshot, AuthStatus: Local authentication state
- SingleFlight: In-flight operation slot
- MissingAuthorizationCodeError
"""

from .interfaces import IPage, ISessionCoordinator, AuthListener
from .models import AuthSnapshot, AuthStatus
from .exceptions import MissingAuthorizationCodeError
from .single_flight import SingleFlight
from .service import PageContext, SessionCoordinator

__all__ = [
    # Interfaces
    "IPage",
    "ISessionCoordinator",
    "AuthListener",
    # Implementation
    "PageContext",
    "SessionCoordinator",
    "SingleFlight",
    # Models
    "AuthSnapshot",
    "AuthStatus",
    # Exceptions
    "MissingAuthorizationCodeError",
]

"""
Error hierarchy for SessionGate.

Each base class carries the HTTP status the host application answers
with, so the API layer renders any SessionGateError from the error itself:

- BadRequestError (400): the request names something that cannot be served
- AuthenticationError (401): no usable session credential
- UsersServiceError (502): the users service failed or refused a call

Module exceptions subclass one of these and set their own error code.
"""

from typing import Any, ClassVar, Optional


class SessionGateError(Exception):
    """Base for every error the application renders as a JSON body."""

    status_code: ClassVar[int] = 500
    default_code: ClassVar[str] = "INTERNAL_ERROR"

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.details = details or {}

    @property
    def is_server_error(self) -> bool:
        return self.status_code >= 500

    def to_dict(self) -> dict[str, Any]:
        """Body of the error response, see api.models.ErrorResponse."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class BadRequestError(SessionGateError):
    status_code = 400
    default_code = "BAD_REQUEST"


class AuthenticationError(SessionGateError):
    """The request has no session the users service accepts."""

    status_code = 401
    default_code = "UNAUTHORIZED"


class UsersServiceError(SessionGateError):
    """
    The users service could not complete a call.

    `details["service"]` names the service so the client can tell an
    upstream outage from a local failure.
    """

    status_code = 502
    default_code = "UPSTREAM_ERROR"
    service: ClassVar[str] = "users_service"

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.details["service"] = self.service

"""
Exception handlers.

Renders SessionGateError subclasses with their own status code and
to_dict() body.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from shared.exceptions import SessionGateError

logger = logging.getLogger(__name__)


async def handle_session_gate_error(request: Request, exc: SessionGateError) -> JSONResponse:
    if exc.is_server_error:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def register_exception_handlers(app: FastAPI) -> None:
    """Install the SessionGateError handler on the application."""
    app.add_exception_handler(SessionGateError, handle_session_gate_error)

"""
SessionGate API package.

Provides the FastAPI host application: session cookie endpoints backed by
the remote users service.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]

"""
Service references shared by the API route handlers.
"""

from fastapi import Request

from ..export.dispatcher import RequestDispatcher


def get_dispatcher(request: Request) -> RequestDispatcher:
    """Get the export dispatcher attached to the application."""
    dispatcher = getattr(request.app.state, "dispatcher", None)
    if dispatcher is None:
        raise RuntimeError("Export dispatcher not initialized")
    return dispatcher

"""
HTTP API routes for message exports.
"""

from .dependencies import get_dispatcher
from .routes import router

__all__ = [
    'router',
    'get_dispatcher',
]

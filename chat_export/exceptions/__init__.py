"""
Exception types for the chat export service.
"""

from .export import (
    ExportError,
    InvalidRangeError,
    UnsupportedFormatError,
    RoomNotFoundError,
    RepositoryUnavailableError,
)
from .repository import RepositoryError

__all__ = [
    'ExportError',
    'InvalidRangeError',
    'UnsupportedFormatError',
    'RoomNotFoundError',
    'RepositoryUnavailableError',
    'RepositoryError',
]

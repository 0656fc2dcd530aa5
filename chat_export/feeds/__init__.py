"""
RSS feed generation module for chat exports.
"""

from .generator import FeedGenerator

__all__ = [
    'FeedGenerator',
]

"""
Data models for the chat export service.

This module provides the read-only domain objects handed out by the
message repository.
"""

from .room import ChatRoom
from .message import ChatMessage, ChatUser
from .time_range import TimeRange, MIN_TIMESTAMP

__all__ = [
    'ChatRoom',
    'ChatMessage',
    'ChatUser',
    'TimeRange',
    'MIN_TIMESTAMP',
]

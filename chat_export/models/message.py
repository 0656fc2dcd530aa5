"""
Chat message models.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict


@dataclass(frozen=True)
class ChatUser:
    """Author of a chat message."""
    name: str


@dataclass(frozen=True)
class ChatMessage:
    """A single persisted chat message.

    Messages are owned by the repository and never modified by the export
    pipeline. ``when`` is always timezone-aware.
    """
    id: str
    content: str
    user: ChatUser
    when: datetime

    @property
    def username(self) -> str:
        """Name of the message author."""
        return self.user.name

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ChatMessage':
        """Create from a seed/database dictionary.

        Naive timestamps are interpreted as UTC.
        """
        when = data["when"]
        if isinstance(when, str):
            when = datetime.fromisoformat(when)
        if when.tzinfo is None:
            when = when.replace(tzinfo=timezone.utc)

        return cls(
            id=str(data["id"]),
            content=data.get("content", ""),
            user=ChatUser(name=data["username"]),
            when=when,
        )

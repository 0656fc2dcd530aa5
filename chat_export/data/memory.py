"""
In-memory message store, optionally seeded from a JSON file.
"""

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

from .base import ChatRepository
from ..models import ChatRoom, ChatMessage

logger = logging.getLogger(__name__)


class InMemoryChatRepository(ChatRepository):
    """Dictionary-backed repository keyed by case-folded room name."""

    def __init__(self):
        self._rooms: Dict[str, ChatRoom] = {}
        self._messages: Dict[str, List[ChatMessage]] = {}

    def add_room(self, room: ChatRoom) -> None:
        key = room.name.casefold()
        self._rooms[key] = room
        self._messages.setdefault(key, [])

    def add_message(self, room_name: str, message: ChatMessage) -> None:
        key = room_name.casefold()
        if key not in self._rooms:
            raise KeyError(f"Unknown room: {room_name}")
        self._messages[key].append(message)

    async def find_room(self, name: str) -> Optional[ChatRoom]:
        return self._rooms.get((name or "").casefold())

    async def get_messages_by_room(self, name: str) -> List[ChatMessage]:
        return list(self._messages.get((name or "").casefold(), []))

    @classmethod
    def from_seed_file(cls, path: Union[str, Path]) -> 'InMemoryChatRepository':
        """Build a repository from a JSON seed document.

        The document holds a ``rooms`` list; each room carries its flags and
        a ``messages`` list of ``{id, username, content, when}`` objects.
        """
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        repository = cls()

        message_count = 0
        for room_data in data.get("rooms", []):
            room = ChatRoom.from_dict(room_data)
            repository.add_room(room)
            for message_data in room_data.get("messages", []):
                repository.add_message(room.name, ChatMessage.from_dict(message_data))
                message_count += 1

        logger.info(
            f"Loaded {len(repository._rooms)} rooms and {message_count} messages from {path}"
        )
        return repository

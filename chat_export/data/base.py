"""
Abstract repository interface for the message store.

Concrete implementations should inherit from ChatRepository. The export
pipeline only reads through this contract.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..exceptions import RepositoryError
from ..models import ChatRoom, ChatMessage


class ChatRepository(ABC):
    """Abstract repository for rooms and their messages."""

    async def connect(self) -> None:
        """Open any underlying resources."""

    async def disconnect(self) -> None:
        """Release any underlying resources."""

    @abstractmethod
    async def find_room(self, name: str) -> Optional[ChatRoom]:
        """
        Look up a room by name, ignoring case.

        Args:
            name: Room name

        Returns:
            The room if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_messages_by_room(self, name: str) -> List[ChatMessage]:
        """
        Retrieve every message of a room.

        Args:
            name: Room name

        Returns:
            Unfiltered messages; no ordering is guaranteed
        """
        pass

    async def verify_room(self, name: str, must_be_open: bool = True) -> ChatRoom:
        """
        Resolve a room, rejecting names that cannot be used.

        Args:
            name: Room name
            must_be_open: Reject closed rooms when True

        Returns:
            The matching room

        Raises:
            RepositoryError: Blank name, unknown room, or closed room when
                ``must_be_open`` is set
        """
        if not name or not name.strip():
            raise RepositoryError("Room name cannot be blank!")

        room = await self.find_room(name)
        if room is None:
            raise RepositoryError(f"Unable to locate room {name}.")

        if must_be_open and room.closed:
            raise RepositoryError(f"{room.name} is closed.")

        return room

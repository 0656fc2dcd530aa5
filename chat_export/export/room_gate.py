"""
Room lookup and visibility policy for exports.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Awaitable, Optional, TypeVar

from ..data.base import ChatRepository
from ..exceptions import (
    ExportError, RepositoryError, RepositoryUnavailableError, RoomNotFoundError
)
from ..models import ChatRoom

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def read_with_timeout(awaitable: Awaitable[T], timeout: Optional[float]) -> T:
    """Await a repository read, bounded by ``timeout`` seconds when set."""
    if not timeout:
        return await awaitable
    try:
        return await asyncio.wait_for(awaitable, timeout)
    except asyncio.TimeoutError:
        logger.warning(f"Repository read exceeded {timeout}s")
        raise RepositoryUnavailableError() from None


@dataclass(frozen=True)
class RoomAccess:
    """Outcome of a room authorization: either a room or an error."""
    room: Optional[ChatRoom] = None
    error: Optional[ExportError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class RoomGate:
    """Resolves rooms by name and hides private ones.

    Private rooms answer exactly like rooms that do not exist.
    """

    def __init__(self, repository: ChatRepository, timeout: Optional[float] = None):
        self.repository = repository
        self.timeout = timeout

    async def authorize(self, room_name: str) -> RoomAccess:
        """Look up a room for public export.

        Closed rooms are allowed so their history stays readable.
        """
        try:
            room = await read_with_timeout(
                self.repository.verify_room(room_name, must_be_open=False),
                self.timeout,
            )
        except RepositoryError as e:
            return RoomAccess(error=RoomNotFoundError(e.message))
        except RepositoryUnavailableError as e:
            return RoomAccess(error=e)

        if room.private:
            # TODO: allow private room exports for callers presenting an auth token
            return RoomAccess(error=RoomNotFoundError(f"Unable to locate room {room.name}."))

        return RoomAccess(room=room)

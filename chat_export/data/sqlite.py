"""
SQLite implementation of the message store using aiosqlite.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import aiosqlite

from .base import ChatRepository
from ..models import ChatRoom, ChatMessage

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS rooms (
    name TEXT PRIMARY KEY COLLATE NOCASE,
    private INTEGER NOT NULL DEFAULT 0,
    closed INTEGER NOT NULL DEFAULT 0
);

CREATE TABLE IF NOT EXISTS messages (
    id TEXT PRIMARY KEY,
    room_name TEXT NOT NULL COLLATE NOCASE REFERENCES rooms(name),
    username TEXT NOT NULL,
    content TEXT NOT NULL,
    sent_at TEXT NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_messages_room ON messages(room_name);
"""


class SQLiteChatRepository(ChatRepository):
    """Repository reading rooms and messages from a SQLite database."""

    def __init__(self, db_path: str):
        self.db_path = db_path
        self._connection: Optional[aiosqlite.Connection] = None

    async def connect(self) -> None:
        """Open the database and create the schema if needed."""
        if self._connection is not None:
            return

        if self.db_path != ":memory:":
            Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)

        self._connection = await aiosqlite.connect(self.db_path)
        self._connection.row_factory = aiosqlite.Row
        await self._connection.executescript(SCHEMA)
        await self._connection.commit()
        logger.info(f"Connected to SQLite message store at {self.db_path}")

    async def disconnect(self) -> None:
        """Close the database connection."""
        if self._connection is not None:
            await self._connection.close()
            self._connection = None

    async def save_room(self, room: ChatRoom) -> None:
        await self._execute(
            "INSERT OR REPLACE INTO rooms (name, private, closed) VALUES (?, ?, ?)",
            (room.name, int(room.private), int(room.closed)),
        )

    async def save_message(self, room_name: str, message: ChatMessage) -> None:
        await self._execute(
            """INSERT OR REPLACE INTO messages (id, room_name, username, content, sent_at)
               VALUES (?, ?, ?, ?, ?)""",
            (message.id, room_name, message.username, message.content,
             message.when.isoformat()),
        )

    async def find_room(self, name: str) -> Optional[ChatRoom]:
        rows = await self._fetch_all(
            "SELECT name, private, closed FROM rooms WHERE name = ?", (name,)
        )
        if not rows:
            return None
        return ChatRoom.from_dict(rows[0])

    async def get_messages_by_room(self, name: str) -> List[ChatMessage]:
        rows = await self._fetch_all(
            """SELECT id, username, content, sent_at AS "when"
               FROM messages WHERE room_name = ?""",
            (name,),
        )
        return [ChatMessage.from_dict(row) for row in rows]

    def _require_connection(self) -> aiosqlite.Connection:
        if self._connection is None:
            raise RuntimeError("SQLite repository is not connected")
        return self._connection

    async def _execute(self, query: str, params: tuple) -> None:
        connection = self._require_connection()
        await connection.execute(query, params)
        await connection.commit()

    async def _fetch_all(self, query: str, params: tuple) -> List[Dict[str, Any]]:
        connection = self._require_connection()
        async with connection.execute(query, params) as cursor:
            rows = await cursor.fetchall()
        return [dict(row) for row in rows]

"""
Message repository for database access.

Encapsulates all Supabase queries and data mapping for the messages table.
There is deliberately no delete method: messages are only flagged.
"""

from typing import Optional, Any

from shared.repository import BaseRepository
from .models import Message, MessageType

TABLE = "messages"


class MessageRepository(BaseRepository[Message]):
    """
    Repository for message data access.

    Note: This repository does NOT perform authorization checks.
    The service layer is responsible for verifying authorship.
    """

    async def create(self, data: dict[str, Any]) -> Message:
        """Insert a new message row and return it."""
        db = await self._client()
        result = await db.table(TABLE).insert(data).execute()
        return self._map_to_message(result.data[0])

    async def get_by_id(self, message_id: str) -> Optional[Message]:
        """Get a message by ID, or None if not found."""
        db = await self._client()
        result = await db.table(TABLE).select("*").eq("id", message_id).execute()
        if not result.data:
            return None
        return self._map_to_message(result.data[0])

    async def list_by_author(self, user_id: str) -> list[Message]:
        """List one user's messages, newest first."""
        db = await self._client()
        result = await (
            db.table(TABLE)
            .select("*")
            .eq("created_by", user_id)
            .order("created_at", desc=True)
            .execute()
        )
        return [self._map_to_message(row) for row in result.data]

    async def list_all(self) -> list[Message]:
        """List every message, newest first."""
        db = await self._client()
        result = await db.table(TABLE).select("*").order("created_at", desc=True).execute()
        return [self._map_to_message(row) for row in result.data]

    async def update_flags(self, message_id: str, flags: dict[str, bool]) -> Optional[Message]:
        """Write the read and/or archived flag of one message."""
        db = await self._client()
        result = await db.table(TABLE).update(flags).eq("id", message_id).execute()
        if not result.data:
            return None
        return self._map_to_message(result.data[0])

    def _map_to_message(self, data: dict[str, Any]) -> Message:
        """Map database row to Message model."""
        return Message(
            id=str(data["id"]),
            type=MessageType(data.get("type") or MessageType.GENERAL.value),
            content=data["content"],
            innovation_id=data.get("innovation_id"),
            innovation_title=data.get("innovation_title"),
            created_by=data["created_by"],
            created_by_email=data.get("created_by_email"),
            created_at=data["created_at"],
            read=bool(data.get("read", False)),
            archived=bool(data.get("archived", False)),
        )

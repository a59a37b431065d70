"""
Innovation repository for database access.

Encapsulates all Supabase queries and data mapping for the innovations table.
"""

from typing import Optional, Any

from shared.repository import BaseRepository
from .models import Innovation, InnovationStatus

TABLE = "innovations"


class InnovationRepository(BaseRepository[Innovation]):
    """
    Repository for innovation data access.

    Note: This repository does NOT perform authorization checks.
    The API layer and service are responsible for that.
    """

    async def list_all(self) -> list[Innovation]:
        """List all innovations, newest first."""
        db = await self._client()
        result = await db.table(TABLE).select("*").order("created_at", desc=True).execute()
        return [self._map_to_innovation(row) for row in result.data]

    async def get_by_id(self, innovation_id: str) -> Optional[Innovation]:
        """Get an innovation by ID, or None if not found."""
        db = await self._client()
        result = await db.table(TABLE).select("*").eq("id", innovation_id).execute()
        if not result.data:
            return None
        return self._map_to_innovation(result.data[0])

    async def create(self, data: dict[str, Any]) -> Innovation:
        """
        Insert a new innovation row.

        Args:
            data: Column values, including timestamps and creator.

        Returns:
            The created Innovation with its generated ID.
        """
        db = await self._client()
        result = await db.table(TABLE).insert(data).execute()
        return self._map_to_innovation(result.data[0])

    async def update(self, innovation_id: str, data: dict[str, Any]) -> Optional[Innovation]:
        """Update columns of one innovation and return the stored row."""
        db = await self._client()
        result = await db.table(TABLE).update(data).eq("id", innovation_id).execute()
        if not result.data:
            return None
        return self._map_to_innovation(result.data[0])

    async def delete(self, innovation_id: str) -> None:
        """Delete one innovation row."""
        db = await self._client()
        await db.table(TABLE).delete().eq("id", innovation_id).execute()

    def _map_to_innovation(self, data: dict[str, Any]) -> Innovation:
        """Map database row to Innovation model."""
        return Innovation(
            id=str(data["id"]),
            title=data["title"],
            description=data.get("description", ""),
            status=InnovationStatus(data.get("status") or InnovationStatus.PENDING.value),
            tags=list(data.get("tags") or []),
            link=data.get("link"),
            created_at=data["created_at"],
            updated_at=data["updated_at"],
            created_by=data.get("created_by"),
        )

"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and providing shared utilities for data operations.
"""

from datetime import datetime, timezone
from typing import TypeVar, Generic, Optional
from supabase import AsyncClient

from .database import get_supabase_client


T = TypeVar("T")


def utc_now() -> str:
    """Current UTC time as an ISO-8601 string, as stored in the tables."""
    return datetime.now(timezone.utc).isoformat()


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via await self._client()
    - Generic type parameter for model type hints

    Subclasses should implement domain-specific data access methods
    and handle dict-to-Pydantic model mapping internally.

    Example:
        class InnovationRepository(BaseRepository[Innovation]):
            async def get_by_id(self, innovation_id: str) -> Optional[Innovation]:
                db = await self._client()
                result = await db.table("innovations").select("*").eq("id", innovation_id).execute()
                if not result.data:
                    return None
                return self._map_to_innovation(result.data[0])
    """

    def __init__(self, db: Optional[AsyncClient] = None) -> None:
        """
        Initialize the repository.

        Args:
            db: Supabase client instance. When omitted, the process-wide
                client is awaited on first use.
        """
        self._db = db

    async def _client(self) -> AsyncClient:
        if self._db is None:
            self._db = await get_supabase_client()
        return self._db

"""Tests for shared/repository.py."""

from datetime import datetime

import pytest
from unittest.mock import patch, MagicMock

from shared.repository import BaseRepository, utc_now


class TestBaseRepository:
    """Tests for BaseRepository base class."""

    @pytest.mark.asyncio
    async def test_uses_injected_client(self):
        mock_db = MagicMock()
        repo = BaseRepository(mock_db)
        assert await repo._client() is mock_db

    @pytest.mark.asyncio
    async def test_falls_back_to_shared_client_once(self):
        shared_client = MagicMock()
        with patch("shared.repository.get_supabase_client", return_value=shared_client) as mock_get:
            repo = BaseRepository()
            assert await repo._client() is shared_client
            assert await repo._client() is shared_client
        mock_get.assert_called_once()


def test_utc_now_is_timezone_aware_iso():
    parsed = datetime.fromisoformat(utc_now())
    assert parsed.tzinfo is not None

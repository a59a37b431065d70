"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
from unittest.mock import patch

from api.dependencies import reset_container
from modules.auth.service import AuthService, reset_auth_service
from shared.config import get_settings
from shared.database import reset_client_cache

from tests.fakes import FakeSupabase
from tests.tokens import TEST_JWT_SECRET, create_test_token


ADMIN_ID = "admin-user-1"
ADMIN_EMAIL = "admin@whynot.test"
USER_ID = "test-user-123"
USER_EMAIL = "test@example.com"


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset process-wide singletons before and after each test."""
    reset_auth_service()
    reset_container()
    reset_client_cache()
    get_settings.cache_clear()
    yield
    reset_auth_service()
    reset_container()
    reset_client_cache()
    get_settings.cache_clear()


@pytest.fixture
def fake_db() -> FakeSupabase:
    """In-memory Supabase with one admin and one participant account."""
    db = FakeSupabase()
    db.add_user(ADMIN_ID, ADMIN_EMAIL)
    db.add_user(USER_ID, USER_EMAIL)
    db.add_admin(ADMIN_ID)
    return db


@pytest.fixture
def auth_service(fake_db: FakeSupabase) -> AuthService:
    """Auth service verifying tokens offline against the test secret."""
    with patch("modules.auth.service.get_settings") as mock_settings:
        mock_settings.return_value.supabase_jwt_secret = TEST_JWT_SECRET
        yield AuthService(db=fake_db)


@pytest.fixture
def admin_token() -> str:
    return create_test_token(user_id=ADMIN_ID, email=ADMIN_EMAIL)


@pytest.fixture
def user_token() -> str:
    return create_test_token(user_id=USER_ID, email=USER_EMAIL)


@pytest.fixture
def admin_headers(admin_token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {admin_token}"}


@pytest.fixture
def user_headers(user_token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {user_token}"}

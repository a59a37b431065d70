"""
Fixtures for API tests.

The app is wired to services bound to the in-memory Supabase so requests
exercise the real routes, dependencies and exception handlers.
"""

import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import (
    get_auth_service,
    get_innovation_service,
    get_message_service,
    get_user_admin_service,
)
from modules.innovations.repository import InnovationRepository
from modules.innovations.service import InnovationService
from modules.messages.repository import MessageRepository
from modules.messages.service import MessageService
from modules.users.repository import UserRepository
from modules.users.service import UserAdminService


@pytest.fixture
def app(fake_db, auth_service):
    """Create a fresh app for each test."""
    app = create_app()
    innovations = InnovationService(InnovationRepository(db=fake_db))
    messages = MessageService(innovations, MessageRepository(db=fake_db))
    users = UserAdminService(UserRepository(db=fake_db))

    app.dependency_overrides[get_auth_service] = lambda: auth_service
    app.dependency_overrides[get_innovation_service] = lambda: innovations
    app.dependency_overrides[get_message_service] = lambda: messages
    app.dependency_overrides[get_user_admin_service] = lambda: users
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def innovation_payload() -> dict:
    return {
        "title": "Solar kiosk",
        "description": "Off-grid charging point",
        "status": "active",
        "tags": ["energy"],
        "link": "https://example.com/kiosk",
    }

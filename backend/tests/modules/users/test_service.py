"""Tests for account administration against the in-memory backend."""

import pytest

from modules.users.exceptions import (
    CannotDeleteAdminError,
    CannotDeleteSelfError,
    EmailAlreadyExistsError,
    FieldsRequiredError,
    InvalidEmailError,
    PasswordTooShortError,
    UserNotFoundError,
)
from modules.users.models import CreateUserRequest
from modules.users.repository import UserRepository
from modules.users.service import UserAdminService


ADMIN_ID = "admin-user-1"
USER_ID = "test-user-123"


@pytest.fixture
def service(fake_db):
    return UserAdminService(UserRepository(db=fake_db))


class TestListUsers:
    @pytest.mark.asyncio
    async def test_lists_all_accounts_with_admin_flag(self, service):
        accounts = {a.id: a for a in await service.list_users()}
        assert set(accounts) == {ADMIN_ID, USER_ID}
        assert accounts[ADMIN_ID].is_admin is True
        assert accounts[USER_ID].is_admin is False
        assert accounts[USER_ID].email == "test@example.com"

    @pytest.mark.asyncio
    async def test_admins_only(self, service):
        accounts = await service.list_users(admins_only=True)
        assert [a.id for a in accounts] == [ADMIN_ID]


class TestCreateUser:
    @pytest.mark.asyncio
    async def test_creates_unverified_account(self, service, fake_db):
        account = await service.create_user(CreateUserRequest(email="x@y.com", password="abcdef"))

        assert account.email == "x@y.com"
        assert account.email_verified is False
        assert account.id in fake_db.auth.admin.users

    @pytest.mark.asyncio
    async def test_short_password_rejected(self, service, fake_db):
        with pytest.raises(PasswordTooShortError) as exc_info:
            await service.create_user(CreateUserRequest(email="x@y.com", password="abcde"))

        assert exc_info.value.message == "Password must be at least 6 characters"
        assert len(fake_db.auth.admin.users) == 2

    @pytest.mark.asyncio
    @pytest.mark.parametrize("email,password", [("", "abcdef"), ("x@y.com", ""), ("  ", "")])
    async def test_fields_required(self, service, email, password):
        with pytest.raises(FieldsRequiredError):
            await service.create_user(CreateUserRequest(email=email, password=password))

    @pytest.mark.asyncio
    @pytest.mark.parametrize("email", ["plainaddress", "a@b", "a b@c.com", "@y.com"])
    async def test_invalid_email(self, service, email):
        with pytest.raises(InvalidEmailError):
            await service.create_user(CreateUserRequest(email=email, password="abcdef"))

    @pytest.mark.asyncio
    async def test_duplicate_email(self, service):
        with pytest.raises(EmailAlreadyExistsError):
            await service.create_user(CreateUserRequest(email="test@example.com", password="abcdef"))


class TestDeleteUser:
    @pytest.mark.asyncio
    async def test_delete_participant(self, service, fake_db):
        await service.delete_user(ADMIN_ID, USER_ID)
        assert USER_ID not in fake_db.auth.admin.users

    @pytest.mark.asyncio
    async def test_cannot_delete_self(self, service, fake_db):
        with pytest.raises(CannotDeleteSelfError):
            await service.delete_user(ADMIN_ID, ADMIN_ID)
        assert ADMIN_ID in fake_db.auth.admin.users

    @pytest.mark.asyncio
    async def test_cannot_delete_another_admin(self, service, fake_db):
        fake_db.add_user("admin-2", "second@whynot.test")
        fake_db.add_admin("admin-2")

        with pytest.raises(CannotDeleteAdminError):
            await service.delete_user(ADMIN_ID, "admin-2")
        assert "admin-2" in fake_db.auth.admin.users

    @pytest.mark.asyncio
    async def test_delete_missing(self, service):
        with pytest.raises(UserNotFoundError):
            await service.delete_user(ADMIN_ID, "ghost")

    @pytest.mark.asyncio
    async def test_admin_lookup_failure_blocks_delete(self, service, fake_db):
        """If admin membership cannot be read, nothing is deleted."""
        fake_db.failing_tables.add("admins")
        with pytest.raises(RuntimeError):
            await service.delete_user(ADMIN_ID, USER_ID)
        assert USER_ID in fake_db.auth.admin.users


class TestListUsersPaging:
    @pytest.fixture
    def crowded_db(self, fake_db):
        for i in range(118):
            fake_db.add_user(f"user-{i:03d}", f"user{i}@example.com")
        fake_db.add_admin("user-117")
        return fake_db

    @pytest.mark.asyncio
    async def test_lists_every_page(self, service, crowded_db):
        accounts = await service.list_users()

        assert len(accounts) == 120
        assert crowded_db.auth.admin.list_calls == [(1, 50), (2, 50), (3, 50)]

    @pytest.mark.asyncio
    async def test_admins_beyond_first_page(self, service, crowded_db):
        accounts = await service.list_users(admins_only=True)
        assert {a.id for a in accounts} == {ADMIN_ID, "user-117"}

    @pytest.mark.asyncio
    async def test_exact_multiple_of_page_size(self, fake_db):
        for i in range(48):
            fake_db.add_user(f"user-{i:03d}", f"user{i}@example.com")
        repo = UserRepository(db=fake_db)

        users = await repo.list_accounts()

        assert len(users) == 50
        assert fake_db.auth.admin.list_calls == [(1, 50), (2, 50)]
